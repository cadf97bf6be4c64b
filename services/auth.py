"""Registration, login and logout."""

import logging
from typing import Optional, Tuple

from errors import InvalidCredentials, UserNotFound
from models import User
from schemas import SessionUser, UserRegister
from stores.sessions import SessionManager
from stores.users import UserStore

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, users: UserStore, sessions: SessionManager):
        self.users = users
        self.sessions = sessions

    def register(self, data: UserRegister) -> User:
        """Create a user; DuplicateIdentity if the username or email is taken."""
        return self.users.register(
            username=data.username,
            email=data.email,
            password=data.password,
            name=data.name,
            avatar=data.avatar,
        )

    def login(self, email: str, password: str) -> Tuple[str, SessionUser]:
        """Verify credentials and open a session, returning its token and user summary."""
        user = self.users.find_by_email(email)
        if user is None:
            logger.info("Login rejected: no user for email")
            raise UserNotFound()

        if not self.users.verify(user, password):
            logger.info("Login rejected: bad password for user id=%s", user.id)
            raise InvalidCredentials()

        token = self.sessions.create(user)
        logger.info("User id=%s logged in", user.id)
        return token, SessionUser(id=user.id, username=user.username, email=user.email)

    def logout(self, token: Optional[str]) -> None:
        self.sessions.destroy(token)
