from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sqlalchemy.orm import Session

from advisor.components.src_logging.logger import logging
from backend.auth.dependencies import (
    clear_session_cookie,
    get_current_user,
    get_session_store,
    session_token,
    set_session_cookie,
)
from backend.auth.security import hash_password, verify_password
from backend.auth.sessions import SessionStore
from backend.database import models
from backend.database.database import get_db
from backend.database.storage import storage
from backend.schemas import LoginRequest, MessageOut, SignupRequest, UserOut

router = APIRouter(prefix="/api/auth", tags=["Authentication"])

INVALID_CREDENTIALS = "Invalid credentials"


def register_user(db: Session, request: SignupRequest) -> models.User:
    """Uniqueness checks plus hashed insert, shared by signup and POST /api/users."""
    if storage.users.get_by_email(db, request.email):
        raise HTTPException(status_code=400, detail="User with this email already exists")
    if storage.users.get_by_username(db, request.username):
        raise HTTPException(status_code=400, detail="Username already taken")

    fields = request.model_dump()
    fields["password"] = hash_password(request.password)
    return storage.users.create(db, **fields)


# Endpoints
@router.post("/signup", response_model=UserOut)
def signup(
    request: SignupRequest,
    response: Response,
    db: Session = Depends(get_db),
    sessions: SessionStore = Depends(get_session_store),
):
    user = register_user(db, request)
    set_session_cookie(response, sessions.create(user.id))
    logging.info(f"User {user.username} signed up")
    return user


@router.post("/login", response_model=UserOut)
def login(
    request: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
    sessions: SessionStore = Depends(get_session_store),
):
    user = storage.users.get_by_email(db, request.email)

    # same answer for an unknown email and a wrong password
    if not user or not verify_password(request.password, user.password):
        raise HTTPException(status_code=401, detail=INVALID_CREDENTIALS)

    set_session_cookie(response, sessions.create(user.id))
    logging.info(f"User {user.username} logged in")
    return user


@router.get("/me", response_model=UserOut)
def me(current_user: models.User = Depends(get_current_user)):
    return current_user


@router.post("/logout", response_model=MessageOut)
def logout(
    request: Request,
    response: Response,
    current_user: models.User = Depends(get_current_user),
    sessions: SessionStore = Depends(get_session_store),
):
    sessions.destroy(session_token(request))
    clear_session_cookie(response)
    logging.info(f"User {current_user.username} logged out")
    return {"message": "Logged out successfully"}
