import logging

from frontend.api_client import ApiError
from frontend.resource_cache import ResourceCache

logger = logging.getLogger(__name__)

# collection -> writes the server exposes for it
COLLECTIONS = {
    "assessments": {"create"},
    "resumes": {"create", "update", "delete"},
    "interviews": {"create", "update"},
    "career-paths": {"create", "update"},
    "skills": {"create", "update", "delete"},
    "goals": {"create", "update", "delete"},
    "recommendations": set(),
}


class Resource:
    """Cached list-by-current-user plus the mutations for one collection."""

    def __init__(self, collection, api, auth, cache, operations):
        self.collection = collection
        self.api = api
        self.auth = auth
        self.cache = cache
        self.operations = operations

    @property
    def key(self):
        return ("/api/users", self.auth.user_id, self.collection)

    @property
    def is_loading(self):
        return self.auth.user_id is not None and self.cache.is_loading(self.key)

    def list(self):
        user_id = self.auth.user_id
        if user_id is None:
            return []
        try:
            result = self.cache.get(self.key, lambda: self.api.get(f"/api/users/{user_id}/{self.collection}"))
        except ApiError as e:
            logger.warning(f"Could not load {self.collection}: {e}")
            return []
        return result or []

    def _mutated(self, result):
        self.cache.invalidate(self.key)
        return result

    def _require(self, operation):
        if operation not in self.operations:
            raise TypeError(f"{self.collection} does not support {operation}")

    def create(self, payload):
        self._require("create")
        body = dict(payload)
        if self.auth.user_id is not None:
            body.setdefault("userId", self.auth.user_id)
        return self._mutated(self.api.post(f"/api/{self.collection}", body))

    def update(self, record_id, payload):
        self._require("update")
        return self._mutated(self.api.patch(f"/api/{self.collection}/{record_id}", payload))

    def delete(self, record_id):
        self._require("delete")
        return self._mutated(self.api.delete(f"/api/{self.collection}/{record_id}"))


class CareerData:
    """
    One ``Resource`` per collection, all sharing a cache that is cleared
    whenever the signed-in user changes.

        data = CareerData(api, auth)
        data["skills"].create({"name": "SQL", "level": 6})
        data.skills.list()
    """

    def __init__(self, api, auth, cache=None):
        self.api = api
        self.auth = auth
        self.cache = cache if cache is not None else ResourceCache()
        self.resources = {
            name: Resource(name, api, auth, self.cache, operations)
            for name, operations in COLLECTIONS.items()
        }
        auth.on_change(lambda user: self.cache.clear())

    def __getitem__(self, collection):
        return self.resources[collection]

    def __getattr__(self, name):
        resources = self.__dict__.get("resources", {})
        collection = name.replace("_", "-")
        if collection in resources:
            return resources[collection]
        raise AttributeError(name)
