from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from advisor.components.career_advisor.career_advisor import CareerAdvisor, get_advisor
from backend.auth.dependencies import ensure_creator, get_current_user, owned_record, require_owner
from backend.database import models
from backend.database.database import get_db
from backend.database.storage import storage
from backend.schemas import AssessmentCreate, AssessmentOut
from backend.services.enrichment import enrich_assessment

router = APIRouter(prefix="/api", tags=["Assessments"])


@router.post("/assessments", response_model=AssessmentOut)
def create_assessment(
    request: AssessmentCreate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
    advisor: CareerAdvisor = Depends(get_advisor),
):
    user_id = ensure_creator(request.user_id, current_user)
    status = models.ENRICHMENT_PENDING if request.type == "career" else models.ENRICHMENT_SKIPPED

    assessment = storage.assessments.create(
        db,
        user_id=user_id,
        type=request.type,
        data=request.data,
        enrichment_status=status,
    )
    # Only career assessments are scored by the advisor
    return enrich_assessment(db, assessment, advisor)


@router.get("/users/{user_id}/assessments", response_model=List[AssessmentOut])
def list_assessments(
    user_id: str,
    current_user: models.User = Depends(require_owner),
    db: Session = Depends(get_db),
):
    return storage.assessments.list_by_owner(db, user_id)


@router.get("/assessments/{assessment_id}", response_model=AssessmentOut)
def get_assessment(
    assessment_id: str,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return owned_record(storage.assessments, db, assessment_id, current_user)


@router.post("/assessments/{assessment_id}/analyze", response_model=AssessmentOut)
def reanalyze_assessment(
    assessment_id: str,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
    advisor: CareerAdvisor = Depends(get_advisor),
):
    assessment = owned_record(storage.assessments, db, assessment_id, current_user)
    if assessment.type != "career":
        raise HTTPException(status_code=400, detail="Only career assessments can be analyzed")
    return enrich_assessment(db, assessment, advisor)
