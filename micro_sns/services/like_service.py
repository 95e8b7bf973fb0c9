"""Like ledger: one row per (user, post) pair."""
from sqlalchemy import delete, desc, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from micro_sns.core.errors import ConflictError
from micro_sns.core.logging import get_logger
from micro_sns.models.engagement import Like
from micro_sns.models.post import Post
from micro_sns.schemas.post import PostResponse
from micro_sns.services.auth_service import require_user
from micro_sns.services.feed_service import fetch_posts, post_listing, require_post

logger = get_logger(__name__)


async def add_like(db: AsyncSession, user_id: int, post_id: int) -> Like:
    await require_user(db, user_id)
    await require_post(db, post_id)
    like = Like(user_id=user_id, post_id=post_id)
    db.add(like)
    try:
        await db.flush()
    except IntegrityError:
        await db.rollback()
        logger.info("Duplicate like: user %s post %s", user_id, post_id)
        raise ConflictError("Already liked")
    return like


async def remove_like(db: AsyncSession, user_id: int, post_id: int) -> int:
    result = await db.execute(
        delete(Like).where(Like.user_id == user_id, Like.post_id == post_id)
    )
    return result.rowcount


async def count_likes(db: AsyncSession, post_id: int) -> int:
    count = await db.scalar(select(func.count()).select_from(Like).where(Like.post_id == post_id))
    return count or 0


async def list_liked_posts(db: AsyncSession, user_id: int) -> list[PostResponse]:
    """Posts user_id has liked, most recently liked first."""
    stmt = (
        post_listing()
        .join(Like, Like.post_id == Post.post_id)
        .where(Like.user_id == user_id)
        .order_by(desc(Like.created_at), desc(Post.post_id))
    )
    return await fetch_posts(db, stmt)
