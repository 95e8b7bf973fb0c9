"""Pydantic schemas for Comment."""
from datetime import datetime

from pydantic import BaseModel, Field


class CommentCreate(BaseModel):
    post_id: int = Field(..., ge=1)
    user_id: int = Field(..., ge=1)
    content: str = Field(..., min_length=1)


class CommentUpdate(BaseModel):
    content: str = Field(..., min_length=1)


class CommentCreated(BaseModel):
    comment_id: int


class CommentResponse(BaseModel):
    comment_id: int
    post_id: int
    content: str
    created_at: datetime | None = None
    author_id: int
    author: str

    model_config = {"from_attributes": True}
