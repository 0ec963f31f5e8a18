from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from advisor.components.career_advisor.career_advisor import CareerAdvisor, get_advisor
from backend.auth.dependencies import ensure_creator, get_current_user, owned_record, require_owner
from backend.database import models
from backend.database.database import get_db
from backend.database.storage import storage
from backend.schemas import CareerPathCreate, CareerPathOut, CareerPathUpdate
from backend.services.enrichment import enrich_career_path

router = APIRouter(prefix="/api", tags=["Career Paths"])


@router.post("/career-paths", response_model=CareerPathOut)
def create_career_path(
    request: CareerPathCreate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
    advisor: CareerAdvisor = Depends(get_advisor),
):
    user_id = ensure_creator(request.user_id, current_user)
    career_path = storage.career_paths.create(
        db,
        user_id=user_id,
        current_role=request.current_role,
        target_role=request.target_role,
        industry=request.industry,
        progress=request.progress,
        steps=[],
        enrichment_status=models.ENRICHMENT_PENDING,
    )
    return enrich_career_path(db, career_path, advisor)


@router.get("/users/{user_id}/career-paths", response_model=List[CareerPathOut])
def list_career_paths(
    user_id: str,
    current_user: models.User = Depends(require_owner),
    db: Session = Depends(get_db),
):
    return storage.career_paths.list_by_owner(db, user_id)


@router.get("/career-paths/{career_path_id}", response_model=CareerPathOut)
def get_career_path(
    career_path_id: str,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return owned_record(storage.career_paths, db, career_path_id, current_user)


@router.patch("/career-paths/{career_path_id}", response_model=CareerPathOut)
def update_career_path(
    career_path_id: str,
    request: CareerPathUpdate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    career_path = owned_record(storage.career_paths, db, career_path_id, current_user)
    return storage.career_paths.update(db, career_path.id, **request.changes())


@router.post("/career-paths/{career_path_id}/generate", response_model=CareerPathOut)
def regenerate_career_path(
    career_path_id: str,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
    advisor: CareerAdvisor = Depends(get_advisor),
):
    career_path = owned_record(storage.career_paths, db, career_path_id, current_user)
    return enrich_career_path(db, career_path, advisor)
