def test_career_path_is_planned(client, user, advisor):
    response = client.post(
        "/api/career-paths",
        json={"currentRole": "Cashier", "targetRole": "Data Analyst", "industry": "Retail"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["steps"][0]["title"] == "Learn SQL"
    assert body["timeline"]["totalMonths"] == 12
    assert body["skillGaps"][0]["name"] == "Statistics"
    assert body["learningPlan"][0]["type"] == "Course"
    assert body["progress"] == 0
    assert body["enrichmentStatus"] == "completed"
    assert advisor.calls == [("generate_career_recommendations", ("Cashier", "Data Analyst", "Retail"))]


def test_planning_failure_stores_bare_path(client, user, advisor):
    advisor.failing.add("generate_career_recommendations")

    body = client.post("/api/career-paths", json={"targetRole": "Data Analyst"}).json()
    assert body["steps"] == []
    assert body["timeline"] is None
    assert body["enrichmentStatus"] == "failed"

    advisor.failing.clear()
    regenerated = client.post(f"/api/career-paths/{body['id']}/generate").json()
    assert regenerated["steps"][0]["title"] == "Learn SQL"


def test_progress_update(client, user):
    path = client.post("/api/career-paths", json={"targetRole": "Data Analyst"}).json()

    response = client.patch(f"/api/career-paths/{path['id']}", json={"progress": 40})
    assert response.status_code == 200
    assert response.json()["progress"] == 40
    assert response.json()["steps"] == path["steps"]
    assert client.patch(f"/api/career-paths/{path['id']}", json={"progress": 140}).status_code == 400


def test_skill_gap_analysis_uses_stored_skills(client, user, advisor):
    client.post("/api/skills", json={"name": "SQL", "level": 6, "category": "Data"})

    response = client.post(
        f"/api/users/{user['id']}/skill-gap-analysis",
        json={"targetRole": "ML Engineer"},
    )

    assert response.status_code == 200
    assert response.json()["skillGaps"][0]["skill"] == "ML"
    name, (skills, target_role, industry) = advisor.calls[-1]
    assert name == "analyze_skill_gaps"
    assert skills == [{"name": "SQL", "level": 6, "category": "Data"}]
    assert target_role == "ML Engineer"
    assert industry is None


def test_skill_gap_analysis_failure_is_502(client, user, advisor):
    advisor.failing.add("analyze_skill_gaps")
    response = client.post(f"/api/users/{user['id']}/skill-gap-analysis", json={"targetRole": "ML Engineer"})
    assert response.status_code == 502


def test_skill_gap_analysis_for_another_user_is_forbidden(client, user, other_client):
    response = other_client.post(f"/api/users/{user['id']}/skill-gap-analysis", json={"targetRole": "ML Engineer"})
    assert response.status_code == 403
