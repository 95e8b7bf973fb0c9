"""Follow graph endpoints."""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from micro_sns.api.deps import get_db
from micro_sns.schemas.common import AffectedRows, Envelope, ok
from micro_sns.schemas.engagement import FollowCounts, FollowCreate, FollowStatus, FollowUser
from micro_sns.services.follow_service import (
    count_follows,
    follow_user,
    is_following,
    list_followers,
    list_following,
    unfollow_user,
)

router = APIRouter(prefix="/follows", tags=["follows"])


@router.post("", response_model=Envelope[FollowCreate], status_code=status.HTTP_201_CREATED)
async def follow(
    data: FollowCreate,
    db: AsyncSession = Depends(get_db),
):
    await follow_user(db, data.follower_id, data.following_id)
    await db.commit()
    return ok(data)


@router.delete("", response_model=Envelope[AffectedRows])
async def unfollow(
    data: FollowCreate,
    db: AsyncSession = Depends(get_db),
):
    affected = await unfollow_user(db, data.follower_id, data.following_id)
    await db.commit()
    return ok(AffectedRows(affected_rows=affected))


@router.get("/status", response_model=Envelope[FollowStatus])
async def follow_status(
    follower_id: int = Query(..., ge=1),
    following_id: int = Query(..., ge=1),
    db: AsyncSession = Depends(get_db),
):
    """Whether follower_id currently follows following_id."""
    return ok(FollowStatus(following=await is_following(db, follower_id, following_id)))


@router.get("/following/{user_id}", response_model=Envelope[list[FollowUser]])
async def following(user_id: int, db: AsyncSession = Depends(get_db)):
    return ok(await list_following(db, user_id))


@router.get("/followers/{user_id}", response_model=Envelope[list[FollowUser]])
async def followers(user_id: int, db: AsyncSession = Depends(get_db)):
    return ok(await list_followers(db, user_id))


@router.get("/count/{user_id}", response_model=Envelope[FollowCounts])
async def follow_counts(user_id: int, db: AsyncSession = Depends(get_db)):
    return ok(await count_follows(db, user_id))
