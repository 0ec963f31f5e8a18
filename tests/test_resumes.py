def create_resume(client, content="Five years building dashboards"):
    response = client.post("/api/resumes", json={"title": "Main CV", "content": content})
    assert response.status_code == 200, response.text
    return response.json()


def test_resume_is_analyzed_on_upload(client, user):
    resume = create_resume(client)

    assert resume["score"] == 72
    assert resume["analysis"]["weaknesses"] == ["No metrics"]
    assert resume["suggestions"] == ["Rewrite summary v72"]
    assert resume["enrichmentStatus"] == "completed"


def test_changing_content_reanalyzes(client, user, advisor):
    resume = create_resume(client)

    response = client.patch(f"/api/resumes/{resume['id']}", json={"content": "Led a team of six analysts"})
    assert response.status_code == 200
    updated = response.json()
    assert updated["content"] == "Led a team of six analysts"
    assert updated["score"] == 77
    assert updated["analysis"] != resume["analysis"]
    assert updated["updatedAt"] > resume["updatedAt"]
    assert len([c for c in advisor.calls if c[0] == "analyze_resume"]) == 2


def test_title_change_keeps_analysis(client, user, advisor):
    resume = create_resume(client)

    updated = client.patch(f"/api/resumes/{resume['id']}", json={"title": "Short CV"}).json()
    assert updated["title"] == "Short CV"
    assert updated["score"] == resume["score"]
    assert len(advisor.calls) == 1


def test_analysis_failure_keeps_resume(client, user, advisor):
    advisor.failing.add("analyze_resume")

    resume = create_resume(client)
    assert resume["analysis"] is None
    assert resume["score"] is None
    assert resume["enrichmentStatus"] == "failed"

    advisor.failing.clear()
    response = client.post(f"/api/resumes/{resume['id']}/analyze")
    assert response.status_code == 200
    assert response.json()["score"] == 72
    assert response.json()["enrichmentStatus"] == "completed"


def test_failed_reanalysis_keeps_previous_analysis(client, user, advisor):
    resume = create_resume(client)
    advisor.failing.add("analyze_resume")

    updated = client.patch(f"/api/resumes/{resume['id']}", json={"content": "Something new"}).json()
    assert updated["content"] == "Something new"
    assert updated["enrichmentStatus"] == "failed"
    assert updated["score"] == resume["score"]


def test_empty_content_is_rejected(client, user):
    assert client.post("/api/resumes", json={"title": "CV", "content": ""}).status_code == 400


def test_delete_resume(client, user):
    resume = create_resume(client)

    assert client.delete(f"/api/resumes/{resume['id']}").status_code == 204
    assert client.get(f"/api/resumes/{resume['id']}").status_code == 404
    assert client.get(f"/api/users/{user['id']}/resumes").json() == []
