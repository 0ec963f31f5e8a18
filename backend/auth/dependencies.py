from typing import Optional

from fastapi import Depends, HTTPException, Request, Response
from sqlalchemy.orm import Session

from backend import config
from backend.auth.sessions import SessionStore, session_store
from backend.database import models
from backend.database.database import get_db
from backend.database.storage import RecordNotFound, RecordStore, storage


def get_session_store() -> SessionStore:
    return session_store


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=config.SESSION_COOKIE_NAME,
        value=token,
        max_age=config.SESSION_TTL_HOURS * 3600,
        httponly=True,
        samesite="lax",
        secure=config.SESSION_COOKIE_SECURE,
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=config.SESSION_COOKIE_NAME,
        httponly=True,
        samesite="lax",
        secure=config.SESSION_COOKIE_SECURE,
    )


def session_token(request: Request) -> Optional[str]:
    return request.cookies.get(config.SESSION_COOKIE_NAME)


def get_current_user(
    request: Request,
    db: Session = Depends(get_db),
    sessions: SessionStore = Depends(get_session_store),
) -> models.User:
    user_id = sessions.resolve(session_token(request))
    if not user_id:
        raise HTTPException(status_code=401, detail="Authentication required")

    user = storage.users.find(db, user_id)
    if user is None:
        raise HTTPException(status_code=401, detail="Authentication required")
    return user


def require_owner(user_id: str, current_user: models.User = Depends(get_current_user)) -> models.User:
    """Path-scoped guard for /api/users/{user_id}/... routes."""
    if current_user.id != user_id:
        raise HTTPException(status_code=403, detail="You do not have access to this user's records")
    return current_user


def ensure_creator(requested_user_id: Optional[str], current_user: models.User) -> str:
    if requested_user_id is not None and requested_user_id != current_user.id:
        raise HTTPException(status_code=403, detail="Records can only be created for your own account")
    return current_user.id


def owned_record(store: RecordStore, db: Session, record_id: str, current_user: models.User):
    try:
        record = store.get(db, record_id)
    except RecordNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    if record.user_id != current_user.id:
        raise HTTPException(status_code=403, detail="You do not have access to this record")
    return record
