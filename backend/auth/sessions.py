import secrets
import threading
import time
from typing import Dict, Optional

from advisor.components.src_logging.logger import logging
from backend import config


class SessionStore:
    """
    Server-side sessions keyed by an opaque cookie token.

    Only the user id lives here; the user row is re-read on every request so a
    deleted account stops authenticating immediately.
    """

    def __init__(self, ttl_seconds: Optional[int] = None):
        self.ttl_seconds = ttl_seconds if ttl_seconds is not None else config.SESSION_TTL_HOURS * 3600
        self._sessions: Dict[str, Dict] = {}
        self._lock = threading.Lock()

    def create(self, user_id: str) -> str:
        token = secrets.token_urlsafe(32)
        now = time.time()
        with self._lock:
            # drop every expired session, including tokens no client holds any more
            expired = [t for t, s in self._sessions.items() if s["expires_at"] <= now]
            for t in expired:
                del self._sessions[t]
            self._sessions[token] = {
                "user_id": user_id,
                "expires_at": now + self.ttl_seconds,
            }
        if expired:
            logging.info(f"{len(expired)} expired sessions evicted")
        logging.info(f"Session created for user {user_id}")
        return token

    def resolve(self, token: Optional[str]) -> Optional[str]:
        if not token:
            return None
        with self._lock:
            session = self._sessions.get(token)
            if session is None:
                return None
            if session["expires_at"] <= time.time():
                del self._sessions[token]
                logging.info("Expired session evicted")
                return None
            return session["user_id"]

    def destroy(self, token: Optional[str]) -> None:
        if not token:
            return
        with self._lock:
            session = self._sessions.pop(token, None)
        if session is not None:
            logging.info(f"Session destroyed for user {session['user_id']}")

    def __len__(self):
        with self._lock:
            return len(self._sessions)


session_store = SessionStore()
