"""Posts CRUD and feed."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from micro_sns.api.deps import get_db
from micro_sns.core.config import settings
from micro_sns.schemas.common import AffectedRows, Envelope, ok
from micro_sns.schemas.post import PostCreate, PostCreated, PostResponse, PostUpdate
from micro_sns.services.feed_service import (
    create_post,
    delete_post,
    get_feed_posts,
    get_post,
    list_posts,
    list_trending_posts,
    list_user_posts,
    update_post,
)

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=Envelope[list[PostResponse]])
async def list_posts_endpoint(db: AsyncSession = Depends(get_db)):
    return ok(await list_posts(db))


@router.get("/trending", response_model=Envelope[list[PostResponse]])
async def trending_posts(db: AsyncSession = Depends(get_db)):
    return ok(await list_trending_posts(db, limit=settings.TRENDING_LIMIT))


@router.get("/user/{user_id}", response_model=Envelope[list[PostResponse]])
async def user_posts(user_id: int, db: AsyncSession = Depends(get_db)):
    return ok(await list_user_posts(db, user_id))


@router.get("/feed/{follower_id}", response_model=Envelope[list[PostResponse]])
async def feed(follower_id: int, db: AsyncSession = Depends(get_db)):
    return ok(await get_feed_posts(db, follower_id))


@router.post("", response_model=Envelope[PostCreated], status_code=status.HTTP_201_CREATED)
async def create_post_endpoint(
    data: PostCreate,
    db: AsyncSession = Depends(get_db),
):
    post = await create_post(db, data)
    await db.commit()
    return ok(PostCreated(post_id=post.post_id))


@router.put("/{post_id}", response_model=Envelope[AffectedRows])
async def update_post_endpoint(
    post_id: int,
    data: PostUpdate,
    db: AsyncSession = Depends(get_db),
):
    affected = await update_post(db, post_id, data.content)
    await db.commit()
    return ok(AffectedRows(affected_rows=affected))


@router.delete("/{post_id}", response_model=Envelope[AffectedRows])
async def delete_post_endpoint(
    post_id: int,
    db: AsyncSession = Depends(get_db),
):
    affected = await delete_post(db, post_id)
    await db.commit()
    return ok(AffectedRows(affected_rows=affected))


# Declared last so the literal paths above take precedence
@router.get("/{post_id}", response_model=Envelope[PostResponse])
async def get_post_endpoint(post_id: int, db: AsyncSession = Depends(get_db)):
    return ok(await get_post(db, post_id))
