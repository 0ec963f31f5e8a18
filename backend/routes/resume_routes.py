from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from advisor.components.career_advisor.career_advisor import CareerAdvisor, get_advisor
from backend.auth.dependencies import ensure_creator, get_current_user, owned_record, require_owner
from backend.database import models
from backend.database.database import get_db
from backend.database.storage import storage
from backend.schemas import ResumeCreate, ResumeOut, ResumeUpdate
from backend.services.enrichment import enrich_resume, resume_analysis_fields

router = APIRouter(prefix="/api", tags=["Resumes"])


@router.post("/resumes", response_model=ResumeOut)
def create_resume(
    request: ResumeCreate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
    advisor: CareerAdvisor = Depends(get_advisor),
):
    user_id = ensure_creator(request.user_id, current_user)
    resume = storage.resumes.create(
        db,
        user_id=user_id,
        title=request.title,
        content=request.content,
        enrichment_status=models.ENRICHMENT_PENDING,
    )
    return enrich_resume(db, resume, advisor)


@router.get("/users/{user_id}/resumes", response_model=List[ResumeOut])
def list_resumes(
    user_id: str,
    current_user: models.User = Depends(require_owner),
    db: Session = Depends(get_db),
):
    return storage.resumes.list_by_owner(db, user_id)


@router.get("/resumes/{resume_id}", response_model=ResumeOut)
def get_resume(
    resume_id: str,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return owned_record(storage.resumes, db, resume_id, current_user)


@router.patch("/resumes/{resume_id}", response_model=ResumeOut)
def update_resume(
    resume_id: str,
    request: ResumeUpdate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
    advisor: CareerAdvisor = Depends(get_advisor),
):
    resume = owned_record(storage.resumes, db, resume_id, current_user)
    changes = request.changes()

    # New content invalidates the previous analysis
    if "content" in changes and changes["content"] != resume.content:
        changes.update(resume_analysis_fields(changes["content"], advisor, resume.id))

    return storage.resumes.update(db, resume.id, **changes)


@router.post("/resumes/{resume_id}/analyze", response_model=ResumeOut)
def reanalyze_resume(
    resume_id: str,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
    advisor: CareerAdvisor = Depends(get_advisor),
):
    resume = owned_record(storage.resumes, db, resume_id, current_user)
    return enrich_resume(db, resume, advisor)


@router.delete("/resumes/{resume_id}", status_code=204)
def delete_resume(
    resume_id: str,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    resume = owned_record(storage.resumes, db, resume_id, current_user)
    storage.resumes.delete(db, resume.id)
    return Response(status_code=204)
