from fastapi import Depends, Request
from sqlmodel import Session

from config import Settings
from database import get_session
from services.auth import AuthService
from services.tasks import TaskService
from stores.sessions import SessionManager
from stores.tasks import TaskStore
from stores.users import UserStore
from utils.security import PasswordHasher


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_session_manager(
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> SessionManager:
    return SessionManager(session, ttl_seconds=settings.session_ttl_seconds)


def get_auth_service(
    session: Session = Depends(get_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
    sessions: SessionManager = Depends(get_session_manager),
) -> AuthService:
    return AuthService(UserStore(session, hasher), sessions)


def get_task_service(session: Session = Depends(get_session)) -> TaskService:
    return TaskService(TaskStore(session))
