import logging
from datetime import timedelta
from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from errors import SessionDestroyError, StoreError
from models import SessionRecord, User, utcnow
from schemas import SessionUser
from utils.security import generate_session_token

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TTL_SECONDS = 60 * 60 * 24


class SessionManager:
    """
    Server-side session table mapping opaque tokens to a user summary.

    Sessions expire a fixed time after creation; activity does not extend them.
    """

    def __init__(self, db: Session, ttl_seconds: int = DEFAULT_SESSION_TTL_SECONDS):
        self.db = db
        self.ttl = timedelta(seconds=ttl_seconds)

    def create(self, user: User) -> str:
        """
        Start a session for an authenticated user

        Args:
            user: User whose id, username and email are stored in the session

        Returns:
            The new session token
        """
        now = utcnow()
        record = SessionRecord(
            token=generate_session_token(),
            user_id=user.id,
            username=user.username,
            email=user.email,
            created_at=now,
            expires_at=now + self.ttl,
        )

        try:
            self.db.add(record)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to create session for user id=%s", user.id)
            raise StoreError(str(exc)) from exc

        logger.debug("Session created for user id=%s, expires %s", user.id, record.expires_at)
        return record.token

    def resolve(self, token: Optional[str]) -> Optional[SessionUser]:
        """Return the session's user summary, or None if absent or expired"""
        if not token:
            return None

        try:
            record = self.db.get(SessionRecord, token)
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc

        if record is None:
            return None

        if record.expires_at <= utcnow():
            logger.info("Session for user id=%s expired", record.user_id)
            self._remove(record)
            return None

        return SessionUser(id=record.user_id, username=record.username, email=record.email)

    def destroy(self, token: Optional[str]) -> None:
        """
        Remove a session; unknown tokens are treated as already logged out

        Raises:
            SessionDestroyError: If the session row cannot be removed
        """
        if not token:
            return

        try:
            record = self.db.get(SessionRecord, token)
            if record is not None:
                self.db.delete(record)
                self.db.commit()
                logger.info("Session destroyed for user id=%s", record.user_id)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to destroy session")
            raise SessionDestroyError() from exc

    def purge_expired(self) -> int:
        """Delete every expired session; returns how many were removed"""
        try:
            expired = self.db.exec(
                select(SessionRecord).where(SessionRecord.expires_at <= utcnow())
            ).all()
            for record in expired:
                self.db.delete(record)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError(str(exc)) from exc
        if expired:
            logger.info("Purged %d expired sessions", len(expired))
        return len(expired)

    def _remove(self, record: SessionRecord) -> None:
        try:
            self.db.delete(record)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError(str(exc)) from exc
