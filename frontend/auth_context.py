import logging

from frontend.api_client import ApiError

logger = logging.getLogger(__name__)

API_AUTH = "/api/auth"


class AuthContext:
    """
    Shared authentication state for every page-level guard.

    ``is_authenticated`` is derived from ``user``; it is never stored.
    Listeners are called after login, signup and logout so caches can drop
    data that belonged to the previous user.
    """

    def __init__(self, api):
        self.api = api
        self.user = None
        self.is_loading = False
        self._listeners = []

    @property
    def is_authenticated(self):
        return self.user is not None

    @property
    def user_id(self):
        return self.user["id"] if self.user else None

    def on_change(self, listener):
        self._listeners.append(listener)

    def _set_user(self, user):
        self.user = user
        for listener in self._listeners:
            listener(user)

    def _run(self, call):
        self.is_loading = True
        try:
            return call()
        finally:
            self.is_loading = False

    def refresh(self):
        """Restore the user from an existing session cookie, if any."""
        try:
            user = self._run(lambda: self.api.get(f"{API_AUTH}/me"))
        except ApiError as e:
            if e.status_code != 401:
                raise
            user = None
        self._set_user(user)
        return user

    def login(self, email, password):
        user = self._run(lambda: self.api.post(f"{API_AUTH}/login", {"email": email, "password": password}))
        self._set_user(user)
        logger.info(f"Logged in as {user['username']}")
        return user

    def signup(self, data):
        user = self._run(lambda: self.api.post(f"{API_AUTH}/signup", data))
        self._set_user(user)
        logger.info(f"Signed up as {user['username']}")
        return user

    def logout(self):
        try:
            self._run(lambda: self.api.post(f"{API_AUTH}/logout"))
        finally:
            self._set_user(None)
