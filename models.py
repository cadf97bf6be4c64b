from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field
from datetime import date, datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """Naive UTC timestamp; datetime columns use a plain DateTime type to match"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class User(SQLModel, table=True):
    """Registered user; password is only ever stored hashed"""
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(index=True, unique=True)
    email: str = Field(index=True, unique=True)
    password_hash: str
    name: Optional[str] = None
    avatar: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime)


class Task(SQLModel, table=True):
    """Task model for todo items"""
    __tablename__ = "tasks"

    id: Optional[int] = Field(default=None, primary_key=True)
    # Plain reference, not a foreign key: owner existence is not enforced here.
    owner_id: int = Field(index=True)
    title: str = Field(max_length=200)
    description: Optional[str] = None
    status: bool = Field(default=False)
    due_date: Optional[date] = None
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime)


class SessionRecord(SQLModel, table=True):
    """Server-side session, keyed by the token carried in the session cookie"""
    __tablename__ = "sessions"

    token: str = Field(primary_key=True)
    user_id: int = Field(index=True)
    username: str
    email: str
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime)
    expires_at: datetime = Field(index=True, sa_type=DateTime)
