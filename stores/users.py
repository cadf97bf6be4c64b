import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select, or_

from errors import DuplicateIdentity, StoreError
from models import User
from utils.security import PasswordHasher

logger = logging.getLogger(__name__)


class UserStore:
    """Persists user identities and owns password hashing and verification"""

    def __init__(self, db: Session, hasher: PasswordHasher):
        self.db = db
        self.hasher = hasher

    def get(self, user_id: int) -> Optional[User]:
        try:
            return self.db.get(User, user_id)
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc

    def find_by_email(self, email: str) -> Optional[User]:
        try:
            return self.db.exec(select(User).where(User.email == email)).first()
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc

    def find_by_identity(self, username: str, email: str) -> Optional[User]:
        """Return any user holding either the username or the email"""
        query = select(User).where(or_(User.username == username, User.email == email))
        try:
            return self.db.exec(query).first()
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc

    def register(
        self,
        username: str,
        email: str,
        password: str,
        name: Optional[str] = None,
        avatar: Optional[str] = None,
    ) -> User:
        """
        Create a user after checking username and email are both free

        Args:
            username: Unique login name
            email: Unique email address
            password: Plaintext password, hashed before it is persisted
            name: Optional display name
            avatar: Optional avatar URL

        Returns:
            The persisted User

        Raises:
            DuplicateIdentity: If the username or email is already registered
            StoreError: If the database write fails
        """
        if self.find_by_identity(username, email) is not None:
            raise DuplicateIdentity()

        user = User(
            username=username,
            email=email,
            password_hash=self.hasher.hash(password),
            name=name,
            avatar=avatar,
        )
        self._commit(user)
        logger.info("Registered user id=%s username=%s", user.id, user.username)
        return user

    def set_password(self, user: User, password: str) -> bool:
        """
        Replace the stored hash, unless password already matches it

        Returns:
            True if a new hash was written
        """
        if self.verify(user, password):
            return False

        user.password_hash = self.hasher.hash(password)
        self._commit(user)
        logger.info("Password changed for user id=%s", user.id)
        return True

    def verify(self, user: User, candidate: str) -> bool:
        return self.hasher.verify(candidate, user.password_hash)

    def _commit(self, user: User) -> None:
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        except IntegrityError as exc:
            # A concurrent registration won the unique index
            self.db.rollback()
            raise DuplicateIdentity() from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to save user username=%s", user.username)
            raise StoreError(str(exc)) from exc
