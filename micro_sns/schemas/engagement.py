"""Pydantic schemas for likes and follows."""
from datetime import datetime

from pydantic import BaseModel, Field


class LikeRequest(BaseModel):
    user_id: int = Field(..., ge=1)
    post_id: int = Field(..., ge=1)


class LikeCount(BaseModel):
    like_count: int


class FollowCreate(BaseModel):
    follower_id: int = Field(..., ge=1)
    following_id: int = Field(..., ge=1)


class FollowUser(BaseModel):
    user_id: int
    name: str
    email: str
    followed_at: datetime | None = None

    model_config = {"from_attributes": True}


class FollowCounts(BaseModel):
    following_count: int = 0
    follower_count: int = 0


class FollowStatus(BaseModel):
    following: bool
