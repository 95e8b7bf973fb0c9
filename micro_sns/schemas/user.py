"""Pydantic schemas for User."""
from datetime import datetime

from pydantic import BaseModel, EmailStr, Field


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1)
    bio: str | None = None


class UserCreated(BaseModel):
    user_id: int


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserResponse(BaseModel):
    """User record as returned to clients; never carries the password hash."""
    user_id: int
    name: str
    email: str
    bio: str | None = None
    created_at: datetime | None = None

    model_config = {"from_attributes": True}
