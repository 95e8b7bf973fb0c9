"""API router aggregation."""
from fastapi import APIRouter

from micro_sns.api.endpoints import comments, follows, health, likes, posts, users

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(users.router)
api_router.include_router(posts.router)
api_router.include_router(comments.router)
api_router.include_router(likes.router)
api_router.include_router(follows.router)
