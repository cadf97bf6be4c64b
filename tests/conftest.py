# tests/conftest.py

from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from config import Settings
from database import create_db_and_tables, create_db_engine
from main import create_app
from services.tasks import TaskService
from stores.sessions import SessionManager
from stores.tasks import TaskStore
from stores.users import UserStore
from utils.security import PasswordHasher

# bcrypt's minimum cost; keeps hashing fast in tests
TEST_BCRYPT_ROUNDS = 4


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'todo.db'}",
        bcrypt_rounds=TEST_BCRYPT_ROUNDS,
        log_level="DEBUG",
    )


@pytest.fixture()
def engine(settings: Settings):
    engine = create_db_engine(settings.database_url)
    create_db_and_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture()
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture()
def user_store(db: Session, hasher: PasswordHasher) -> UserStore:
    return UserStore(db, hasher)


@pytest.fixture()
def sessions(db: Session) -> SessionManager:
    return SessionManager(db)


@pytest.fixture()
def task_service(db: Session) -> TaskService:
    return TaskService(TaskStore(db))


@pytest.fixture()
def app(settings: Settings):
    return create_app(settings)


@pytest.fixture()
def client(app):
    # Entering the client runs the lifespan, which creates the tables
    with TestClient(app) as c:
        yield c


def register_and_login(client: TestClient, username: str = "u1", email: str = "u1@x.com", password: str = "p") -> dict:
    """Register a user through the API, log in, and return the session user"""
    res = client.post("/users/register", json={"username": username, "email": email, "password": password})
    assert res.status_code == 201, res.text
    res = client.post("/users/login", json={"email": email, "password": password})
    assert res.status_code == 200, res.text
    return res.json()["user"]
