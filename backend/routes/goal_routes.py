from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from backend.auth.dependencies import ensure_creator, get_current_user, owned_record, require_owner
from backend.database import models
from backend.database.database import get_db
from backend.database.storage import storage
from backend.schemas import GoalCreate, GoalOut, GoalUpdate

router = APIRouter(prefix="/api", tags=["Goals"])


@router.post("/goals", response_model=GoalOut)
def create_goal(
    request: GoalCreate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    fields = request.model_dump(exclude={"user_id"})
    fields["user_id"] = ensure_creator(request.user_id, current_user)
    return storage.goals.create(db, **fields)


@router.get("/users/{user_id}/goals", response_model=List[GoalOut])
def list_goals(
    user_id: str,
    current_user: models.User = Depends(require_owner),
    db: Session = Depends(get_db),
):
    return storage.goals.list_by_owner(db, user_id)


@router.patch("/goals/{goal_id}", response_model=GoalOut)
def update_goal(
    goal_id: str,
    request: GoalUpdate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    goal = owned_record(storage.goals, db, goal_id, current_user)
    return storage.goals.update(db, goal.id, **request.changes())


@router.delete("/goals/{goal_id}", status_code=204)
def delete_goal(
    goal_id: str,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    goal = owned_record(storage.goals, db, goal_id, current_user)
    storage.goals.delete(db, goal.id)
    return Response(status_code=204)
