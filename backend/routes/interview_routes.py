from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from advisor.components.career_advisor.career_advisor import CareerAdvisor, get_advisor
from backend.auth.dependencies import ensure_creator, get_current_user, owned_record, require_owner
from backend.database import models
from backend.database.database import get_db
from backend.database.storage import storage
from backend.schemas import InterviewCreate, InterviewOut, InterviewUpdate
from backend.services.enrichment import interview_evaluation_fields, interview_questions

router = APIRouter(prefix="/api", tags=["Interviews"])


@router.post("/interviews", response_model=InterviewOut)
def create_interview(
    request: InterviewCreate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
    advisor: CareerAdvisor = Depends(get_advisor),
):
    user_id = ensure_creator(request.user_id, current_user)

    # Questions are generated up front; the interview is stored either way
    questions, status = interview_questions(request.job_title, request.company, advisor)

    return storage.interviews.create(
        db,
        user_id=user_id,
        job_title=request.job_title,
        company=request.company,
        duration=request.duration,
        questions=questions,
        enrichment_status=status,
    )


@router.get("/users/{user_id}/interviews", response_model=List[InterviewOut])
def list_interviews(
    user_id: str,
    current_user: models.User = Depends(require_owner),
    db: Session = Depends(get_db),
):
    return storage.interviews.list_by_owner(db, user_id)


@router.get("/interviews/{interview_id}", response_model=InterviewOut)
def get_interview(
    interview_id: str,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return owned_record(storage.interviews, db, interview_id, current_user)


@router.patch("/interviews/{interview_id}", response_model=InterviewOut)
def update_interview(
    interview_id: str,
    request: InterviewUpdate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
    advisor: CareerAdvisor = Depends(get_advisor),
):
    interview = owned_record(storage.interviews, db, interview_id, current_user)
    changes = request.changes()

    # Recorded answers get scored unless the client already sent a verdict
    scored_by_client = "feedback" in changes or "score" in changes
    if changes.get("responses") and not scored_by_client:
        questions = changes.get("questions", interview.questions)
        changes.update(interview_evaluation_fields(questions, changes["responses"], advisor, interview.id))

    return storage.interviews.update(db, interview.id, **changes)


@router.post("/interviews/{interview_id}/evaluate", response_model=InterviewOut)
def evaluate_interview(
    interview_id: str,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
    advisor: CareerAdvisor = Depends(get_advisor),
):
    interview = owned_record(storage.interviews, db, interview_id, current_user)
    if not interview.responses:
        raise HTTPException(status_code=400, detail="Interview has no recorded responses")

    fields = interview_evaluation_fields(interview.questions, interview.responses, advisor, interview.id)
    return storage.interviews.update(db, interview.id, **fields)
