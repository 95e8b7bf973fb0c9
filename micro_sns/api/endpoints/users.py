"""User directory endpoints: register, login, search, password, profile."""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from micro_sns.api.deps import get_db
from micro_sns.core.config import settings
from micro_sns.schemas.common import Envelope, Message, ok
from micro_sns.schemas.password import ChangePasswordRequest
from micro_sns.schemas.user import LoginRequest, UserCreate, UserCreated, UserResponse
from micro_sns.services.auth_service import (
    authenticate_user,
    change_password,
    create_user,
    require_user,
    search_users,
    user_to_response,
)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/register", response_model=Envelope[UserCreated], status_code=status.HTTP_201_CREATED)
async def register(
    data: UserCreate,
    db: AsyncSession = Depends(get_db),
):
    user = await create_user(db, data)
    await db.commit()
    return ok(UserCreated(user_id=user.user_id))


@router.post("/login", response_model=Envelope[UserResponse])
async def login(
    data: LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    user = await authenticate_user(db, data.email, data.password)
    return ok(user_to_response(user))


@router.get("/search", response_model=Envelope[list[UserResponse]])
async def search(
    keyword: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    users = await search_users(db, keyword, limit=settings.SEARCH_LIMIT)
    return ok([user_to_response(u) for u in users])


@router.post("/change-password", response_model=Envelope[Message])
async def change_password_endpoint(
    data: ChangePasswordRequest,
    db: AsyncSession = Depends(get_db),
):
    await change_password(db, data.user_id, data.old_password, data.new_password)
    await db.commit()
    return ok(Message(message="Password changed successfully"))


@router.get("/{user_id}", response_model=Envelope[UserResponse])
async def get_user(
    user_id: int,
    db: AsyncSession = Depends(get_db),
):
    user = await require_user(db, user_id)
    return ok(user_to_response(user))
