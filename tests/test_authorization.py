import pytest

COLLECTIONS = ["assessments", "resumes", "interviews", "career-paths", "skills", "goals", "recommendations"]


@pytest.mark.parametrize("collection", COLLECTIONS)
def test_listing_requires_session(client, user, collection):
    client.cookies.clear()
    response = client.get(f"/api/users/{user['id']}/{collection}")
    assert response.status_code == 401


@pytest.mark.parametrize("collection", COLLECTIONS)
def test_listing_someone_elses_records_is_forbidden(client, user, other_client, collection):
    response = other_client.get(f"/api/users/{user['id']}/{collection}")
    assert response.status_code == 403


def test_profile_of_another_user_is_forbidden(client, user, other_client):
    assert other_client.get(f"/api/users/{user['id']}").status_code == 403
    assert other_client.patch(f"/api/users/{user['id']}", json={"firstName": "X"}).status_code == 403


def test_creating_for_another_user_is_forbidden(client, user, other_client):
    response = other_client.post("/api/skills", json={"userId": user["id"], "name": "SQL", "level": 5})
    assert response.status_code == 403
    assert client.get(f"/api/users/{user['id']}/skills").json() == []


def test_user_id_defaults_to_session_user(client, user):
    response = client.post("/api/goals", json={"title": "Ship portfolio"})
    assert response.status_code == 200
    assert response.json()["userId"] == user["id"]


def test_records_of_another_user_cannot_be_read_or_changed(client, user, other_client):
    skill = client.post("/api/skills", json={"name": "SQL", "level": 5}).json()
    resume = client.post("/api/resumes", json={"title": "CV", "content": "Ten years of SQL"}).json()

    assert other_client.patch(f"/api/skills/{skill['id']}", json={"level": 9}).status_code == 403
    assert other_client.delete(f"/api/skills/{skill['id']}").status_code == 403
    assert other_client.get(f"/api/resumes/{resume['id']}").status_code == 403
    assert other_client.delete(f"/api/resumes/{resume['id']}").status_code == 403

    assert client.get(f"/api/users/{user['id']}/skills").json()[0]["level"] == 5


def test_unknown_record_is_404(client, user):
    response = client.patch("/api/goals/does-not-exist", json={"progress": 10})
    assert response.status_code == 404
    assert response.json()["detail"] == "Goal not found"


def test_writes_require_session(client):
    assert client.post("/api/skills", json={"name": "SQL", "level": 5}).status_code == 401
    assert client.post("/api/resumes", json={"title": "CV", "content": "x"}).status_code == 401
