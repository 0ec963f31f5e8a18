import sys

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from advisor.components.career_advisor.career_advisor import get_advisor
from advisor.components.exception.exception import AdvisoryServiceError
from backend.app import app
from backend.auth.dependencies import get_session_store
from backend.auth.sessions import SessionStore
from backend.database.database import get_db, init_db


class FakeAdvisor:
    """Canned advisory answers; names in ``failing`` raise AdvisoryServiceError."""

    def __init__(self):
        self.failing = set()
        self.calls = []
        self.resume_score = 72

    def _call(self, name, *args):
        self.calls.append((name, args))
        if name in self.failing:
            raise AdvisoryServiceError(f"{name} unavailable", sys)

    def analyze_career_fit(self, data):
        self._call("analyze_career_fit", data)
        return {
            "overallScore": 81,
            "recommendedRoles": ["Data Analyst", "Product Analyst"],
            "strengths": ["Curiosity"],
            "areasForImprovement": ["Public speaking"],
            "careerSuggestions": ["Build a portfolio"],
        }

    def analyze_resume(self, content):
        self._call("analyze_resume", content)
        score = self.resume_score
        self.resume_score += 5
        return {
            "score": score,
            "analysis": {
                "strengths": [f"Clear layout ({len(content)} chars)"],
                "weaknesses": ["No metrics"],
                "suggestions": ["Quantify impact"],
            },
            "suggestions": [f"Rewrite summary v{score}"],
        }

    def generate_interview_questions(self, job_title, company=None):
        self._call("generate_interview_questions", job_title, company)
        return [
            {"question": f"Why {job_title}?", "category": "Behavioral", "difficulty": "Easy"},
            {"question": "Design a cache.", "category": "Technical", "difficulty": "Hard"},
        ]

    def generate_career_recommendations(self, current_role, target_role, industry=None):
        self._call("generate_career_recommendations", current_role, target_role, industry)
        return {
            "steps": [{"title": "Learn SQL", "description": "Basics", "duration": "2 months", "tasks": ["Course"]}],
            "timeline": {"totalMonths": 12, "phases": ["Foundation"]},
            "skillGaps": [{"name": "Statistics", "priority": "High"}],
            "learningPlan": [{"title": "Stats 101", "type": "Course"}],
        }

    def analyze_interview_performance(self, questions, responses):
        self._call("analyze_interview_performance", questions, responses)
        return {
            "overallScore": 77,
            "feedback": {"strengths": ["Structure"], "improvements": ["Depth"], "recommendations": ["Practice"]},
            "questionScores": [{"question": "Why?", "score": 80, "feedback": "Good"}],
        }

    def analyze_skill_gaps(self, skills, target_role, industry=None):
        self._call("analyze_skill_gaps", skills, target_role, industry)
        return {
            "analysis": {"strengthAreas": ["SQL"], "gapAreas": ["ML"], "recommendations": ["Take a course"]},
            "skillGaps": [{"skill": "ML", "importance": "Critical", "difficulty": "Advanced"}],
            "learningPath": [{"phase": "Phase 1", "skills": ["ML"], "duration": "3 months"}],
        }


@pytest.fixture
def db_session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    factory = sessionmaker(autoflush=False, bind=engine)
    yield factory
    engine.dispose()


@pytest.fixture
def advisor():
    return FakeAdvisor()


@pytest.fixture
def sessions():
    return SessionStore()


@pytest.fixture
def client(db_session_factory, advisor, sessions):
    def override_get_db():
        db = db_session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_advisor] = lambda: advisor
    app.dependency_overrides[get_session_store] = lambda: sessions
    yield TestClient(app)
    app.dependency_overrides.clear()


SIGNUP = {
    "username": "jdoe",
    "email": "j@x.com",
    "password": "secret1",
    "firstName": "J",
    "lastName": "D",
}


def signup(client, **overrides):
    payload = dict(SIGNUP, **overrides)
    response = client.post("/api/auth/signup", json=payload)
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
def user(client):
    return signup(client)


@pytest.fixture
def other_client(client, db_session_factory, advisor, sessions):
    """A second browser, signed in as a different user, against the same app."""
    other = TestClient(app)
    signup(other, username="asmith", email="a@x.com")
    return other
