from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime


class UserRegister(BaseModel):
    """Schema for registering a new user"""
    username: str = Field(..., min_length=1, examples=["test_user"])
    email: str = Field(..., min_length=1, examples=["test@example.com"])
    password: str = Field(..., min_length=1, examples=["securepassword"])
    name: Optional[str] = Field(None, examples=["Test User"])
    avatar: Optional[str] = Field(None, examples=["http://example.com/avatar.jpg"])


class UserLogin(BaseModel):
    """Schema for logging in"""
    email: str = Field(..., min_length=1, examples=["test@example.com"])
    password: str = Field(..., min_length=1, examples=["securepassword"])


class UserResponse(BaseModel):
    """Public view of a user; never carries the password hash"""
    id: int
    username: str
    email: str
    name: Optional[str] = None
    avatar: Optional[str] = None

    class Config:
        from_attributes = True


class SessionUser(BaseModel):
    """User summary held by a session"""
    id: int
    username: str
    email: str


class RegisterResponse(BaseModel):
    message: str
    user: UserResponse


class LoginResponse(BaseModel):
    message: str
    user: SessionUser


class MessageResponse(BaseModel):
    message: str


class TaskCreate(BaseModel):
    """Schema for creating a new task"""
    title: str = Field(..., min_length=1, max_length=200, examples=["New Task"])
    description: Optional[str] = Field(None, max_length=1000)
    status: bool = False
    due_date: Optional[date] = Field(None, examples=["2024-12-31"])


class TaskUpdate(BaseModel):
    """Schema for updating a task; only fields present in the body are applied"""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)
    status: Optional[bool] = None
    due_date: Optional[date] = None


class TaskResponse(BaseModel):
    """Schema for task response"""
    id: int
    owner_id: int
    title: str
    description: Optional[str]
    status: bool
    due_date: Optional[date]
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
