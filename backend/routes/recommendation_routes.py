from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.auth.dependencies import require_owner
from backend.database import models
from backend.database.database import get_db
from backend.database.storage import storage
from backend.schemas import RecommendationOut

router = APIRouter(prefix="/api", tags=["Recommendations"])


@router.get("/users/{user_id}/recommendations", response_model=List[RecommendationOut])
def list_recommendations(
    user_id: str,
    current_user: models.User = Depends(require_owner),
    db: Session = Depends(get_db),
):
    return storage.recommendations.list_by_owner(db, user_id)
