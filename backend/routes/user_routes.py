from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from backend.auth.dependencies import require_owner
from backend.auth.security import hash_password
from backend.database import models
from backend.database.database import get_db
from backend.database.storage import storage
from backend.routes.auth_routes import register_user
from backend.schemas import SignupRequest, UserOut, UserUpdate

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.post("", response_model=UserOut)
def create_user(request: SignupRequest, db: Session = Depends(get_db)):
    # Account creation without a session; signup is the interactive path.
    return register_user(db, request)


@router.get("/{user_id}", response_model=UserOut)
def get_user(current_user: models.User = Depends(require_owner)):
    return current_user


@router.patch("/{user_id}", response_model=UserOut)
def update_user(
    request: UserUpdate,
    current_user: models.User = Depends(require_owner),
    db: Session = Depends(get_db),
):
    changes = request.changes()

    if "email" in changes and changes["email"] != current_user.email:
        if storage.users.get_by_email(db, changes["email"]):
            raise HTTPException(status_code=400, detail="User with this email already exists")
    if "username" in changes and changes["username"] != current_user.username:
        if storage.users.get_by_username(db, changes["username"]):
            raise HTTPException(status_code=400, detail="Username already taken")
    if "password" in changes:
        changes["password"] = hash_password(changes["password"])

    return storage.users.update(db, current_user.id, **changes)
