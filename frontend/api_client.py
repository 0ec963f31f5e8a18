import os

import requests

# --- API CONFIGURATION ---
BASE_URL = os.getenv("API_URL", "http://127.0.0.1:8000")


class ApiError(Exception):
    def __init__(self, status_code, detail):
        super().__init__(f"{status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


class ApiClient:
    """
    Thin JSON wrapper over a ``requests.Session``.

    The session keeps the server's session cookie between calls. Any object
    with the same ``request(method, url, json=...)`` signature can be passed
    in, which is how the tests drive it against FastAPI's TestClient.
    """

    def __init__(self, base_url=BASE_URL, session=None):
        self.base_url = (base_url or "").rstrip("/")
        self.session = session if session is not None else requests.Session()

    def request(self, method, path, payload=None):
        kwargs = {} if payload is None else {"json": payload}
        response = self.session.request(method, f"{self.base_url}{path}", **kwargs)

        if response.status_code >= 400:
            raise ApiError(response.status_code, self._detail(response))
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    @staticmethod
    def _detail(response):
        try:
            body = response.json()
        except ValueError:
            return response.text
        if isinstance(body, dict):
            return body.get("detail", body)
        return body

    def get(self, path):
        return self.request("GET", path)

    def post(self, path, payload=None):
        return self.request("POST", path, payload if payload is not None else {})

    def patch(self, path, payload):
        return self.request("PATCH", path, payload)

    def delete(self, path):
        return self.request("DELETE", path)
