"""Pydantic schemas for Post."""
from datetime import datetime

from pydantic import BaseModel, Field


class PostCreate(BaseModel):
    user_id: int = Field(..., ge=1)
    content: str = Field(..., min_length=1)


class PostUpdate(BaseModel):
    content: str = Field(..., min_length=1)


class PostCreated(BaseModel):
    post_id: int


class PostResponse(BaseModel):
    post_id: int
    author_id: int
    author: str
    content: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    like_count: int = 0

    model_config = {"from_attributes": True}
