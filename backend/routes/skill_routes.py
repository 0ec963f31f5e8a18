from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from advisor.components.career_advisor.career_advisor import CareerAdvisor, get_advisor
from advisor.components.exception.exception import AdvisoryServiceError
from advisor.components.src_logging.logger import logging
from backend.auth.dependencies import ensure_creator, get_current_user, owned_record, require_owner
from backend.database import models
from backend.database.database import get_db
from backend.database.storage import storage
from backend.schemas import SkillCreate, SkillGapRequest, SkillOut, SkillUpdate

router = APIRouter(prefix="/api", tags=["Skills"])


@router.post("/skills", response_model=SkillOut)
def create_skill(
    request: SkillCreate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    fields = request.model_dump(exclude={"user_id"})
    fields["user_id"] = ensure_creator(request.user_id, current_user)
    return storage.skills.create(db, **fields)


@router.get("/users/{user_id}/skills", response_model=List[SkillOut])
def list_skills(
    user_id: str,
    current_user: models.User = Depends(require_owner),
    db: Session = Depends(get_db),
):
    return storage.skills.list_by_owner(db, user_id)


@router.patch("/skills/{skill_id}", response_model=SkillOut)
def update_skill(
    skill_id: str,
    request: SkillUpdate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    skill = owned_record(storage.skills, db, skill_id, current_user)
    return storage.skills.update(db, skill.id, **request.changes())


@router.delete("/skills/{skill_id}", status_code=204)
def delete_skill(
    skill_id: str,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    skill = owned_record(storage.skills, db, skill_id, current_user)
    storage.skills.delete(db, skill.id)
    return Response(status_code=204)


@router.post("/users/{user_id}/skill-gap-analysis")
def skill_gap_analysis(
    request: SkillGapRequest,
    current_user: models.User = Depends(require_owner),
    db: Session = Depends(get_db),
    advisor: CareerAdvisor = Depends(get_advisor),
):
    skills = [
        {"name": s.name, "level": s.level, "category": s.category}
        for s in storage.skills.list_by_owner(db, current_user.id)
    ]
    try:
        return advisor.analyze_skill_gaps(skills, request.target_role, request.industry)
    except AdvisoryServiceError as e:
        # Nothing is stored here, so there is no partial result to fall back on
        logging.error(f"Skill gap analysis failed for user {current_user.id}: {e}")
        raise HTTPException(status_code=502, detail="Skill gap analysis is unavailable right now")
