import subprocess
import sys
import threading
from pathlib import Path

import pytest

from frontend.api_client import ApiClient, ApiError
from frontend.auth_context import AuthContext
from frontend.career_data import CareerData
from frontend.resource_cache import ResourceCache
from tests.conftest import SIGNUP


@pytest.fixture
def api(client):
    return ApiClient(base_url="", session=client)


@pytest.fixture
def auth(api):
    return AuthContext(api)


@pytest.fixture
def data(api, auth):
    return CareerData(api, auth)


def test_refresh_without_session_is_anonymous(auth):
    assert auth.refresh() is None
    assert auth.is_authenticated is False
    assert auth.is_loading is False


def test_signup_then_refresh_restores_user(api, auth):
    user = auth.signup(SIGNUP)
    assert auth.is_authenticated
    assert "password" not in user

    fresh = AuthContext(api)
    assert fresh.refresh()["id"] == user["id"]


def test_bad_login_raises_api_error(auth):
    auth.signup(SIGNUP)
    auth.logout()

    with pytest.raises(ApiError) as excinfo:
        auth.login("j@x.com", "wrong-password")
    assert excinfo.value.status_code == 401
    assert auth.user is None


def test_collections_are_empty_without_user(data, api):
    assert data.skills.list() == []
    assert data["career-paths"].list() == []


def test_create_invalidates_cached_list(data, auth):
    auth.signup(SIGNUP)

    assert data.skills.list() == []
    created = data.skills.create({"name": "SQL", "level": 6})
    assert created["userId"] == auth.user_id

    assert [s["name"] for s in data.skills.list()] == ["SQL"]


def test_update_and_delete_refresh_the_list(data, auth):
    auth.signup(SIGNUP)
    goal = data.goals.create({"title": "Get certified"})
    assert data.goals.list()[0]["progress"] == 0

    data.goals.update(goal["id"], {"progress": 60})
    assert data.goals.list()[0]["progress"] == 60

    assert data.goals.delete(goal["id"]) is None
    assert data.goals.list() == []


def test_unsupported_operations_are_refused(data, auth):
    auth.signup(SIGNUP)
    with pytest.raises(TypeError):
        data.recommendations.create({"title": "x"})
    with pytest.raises(TypeError):
        data.assessments.delete("some-id")


def test_cache_is_dropped_when_user_changes(data, auth):
    auth.signup(SIGNUP)
    data.skills.create({"name": "SQL", "level": 6})
    assert len(data.skills.list()) == 1

    auth.logout()
    assert data.skills.list() == []

    auth.signup(dict(SIGNUP, username="asmith", email="a@x.com"))
    assert data.skills.list() == []


def test_server_errors_surface_as_api_error(data, auth):
    auth.signup(SIGNUP)
    with pytest.raises(ApiError) as excinfo:
        data.skills.create({"name": "SQL", "level": 42})
    assert excinfo.value.status_code == 400
    assert excinfo.value.detail == "Invalid input"


def test_failed_listing_reads_as_empty(data, auth, client):
    auth.signup(SIGNUP)
    data.skills.create({"name": "SQL", "level": 6})
    data.cache.clear()
    client.cookies.clear()

    # the server now answers 401, the page still gets a list
    assert data.skills.list() == []


def test_overlapping_reads_share_one_fetch():
    cache = ResourceCache()
    started = threading.Event()
    release = threading.Event()
    calls = []

    def fetch():
        calls.append(1)
        started.set()
        release.wait(timeout=5)
        return ["SQL"]

    results = []
    leader = threading.Thread(target=lambda: results.append(cache.get("skills", fetch)))
    leader.start()
    started.wait(timeout=5)
    assert cache.is_loading("skills")

    follower = threading.Thread(target=lambda: results.append(cache.get("skills", fetch)))
    follower.start()
    release.set()
    leader.join(timeout=5)
    follower.join(timeout=5)

    assert results == [["SQL"], ["SQL"]]
    assert len(calls) == 1
    assert not cache.is_loading("skills")


def test_invalidation_during_fetch_discards_stale_result():
    cache = ResourceCache()

    def fetch():
        cache.invalidate("skills")
        return ["stale"]

    assert cache.get("skills", fetch) == ["stale"]
    assert cache.get("skills", lambda: ["fresh"]) == ["fresh"]
    assert cache.get("skills", lambda: ["ignored"]) == ["fresh"]


def test_failed_fetch_is_not_cached():
    cache = ResourceCache()

    def broken():
        raise ApiError(500, "Internal server error")

    with pytest.raises(ApiError):
        cache.get("skills", broken)
    assert cache.get("skills", lambda: ["SQL"]) == ["SQL"]


def test_client_package_does_not_load_server_code():
    script = (
        "import sys\n"
        "import frontend.api_client, frontend.auth_context, frontend.career_data\n"
        "loaded = sorted(m for m in sys.modules if m.split('.')[0] in ('advisor', 'backend'))\n"
        "assert not loaded, loaded\n"
    )
    result = subprocess.run(
        [sys.executable, "-c", script],
        cwd=Path(__file__).resolve().parents[1],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, result.stderr
