"""Like endpoints."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from micro_sns.api.deps import get_db
from micro_sns.schemas.common import AffectedRows, Envelope, ok
from micro_sns.schemas.engagement import LikeCount, LikeRequest
from micro_sns.schemas.post import PostResponse
from micro_sns.services.like_service import add_like, count_likes, list_liked_posts, remove_like

router = APIRouter(prefix="/likes", tags=["likes"])


@router.post("", response_model=Envelope[LikeRequest], status_code=status.HTTP_201_CREATED)
async def like_post(
    data: LikeRequest,
    db: AsyncSession = Depends(get_db),
):
    await add_like(db, data.user_id, data.post_id)
    await db.commit()
    return ok(data)


@router.delete("", response_model=Envelope[AffectedRows])
async def unlike_post(
    data: LikeRequest,
    db: AsyncSession = Depends(get_db),
):
    affected = await remove_like(db, data.user_id, data.post_id)
    await db.commit()
    return ok(AffectedRows(affected_rows=affected))


@router.get("/count/{post_id}", response_model=Envelope[LikeCount])
async def like_count(post_id: int, db: AsyncSession = Depends(get_db)):
    return ok(LikeCount(like_count=await count_likes(db, post_id)))


@router.get("/by-user/{user_id}", response_model=Envelope[list[PostResponse]])
async def liked_posts(user_id: int, db: AsyncSession = Depends(get_db)):
    return ok(await list_liked_posts(db, user_id))
