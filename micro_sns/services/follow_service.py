"""Follow graph logic."""
from sqlalchemy import delete, desc, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from micro_sns.core.errors import ConflictError, ValidationError
from micro_sns.core.logging import get_logger
from micro_sns.models.engagement import Follow
from micro_sns.models.user import User
from micro_sns.schemas.engagement import FollowCounts, FollowUser
from micro_sns.services.auth_service import require_user

logger = get_logger(__name__)


async def follow_user(db: AsyncSession, follower_id: int, following_id: int) -> Follow:
    if follower_id == following_id:
        raise ValidationError("Cannot follow yourself")
    await require_user(db, follower_id)
    await require_user(db, following_id)
    follow = Follow(follower_id=follower_id, following_id=following_id)
    db.add(follow)
    try:
        await db.flush()
    except IntegrityError:
        await db.rollback()
        logger.info("Duplicate follow: %s -> %s", follower_id, following_id)
        raise ConflictError("Already following")
    return follow


async def unfollow_user(db: AsyncSession, follower_id: int, following_id: int) -> int:
    result = await db.execute(
        delete(Follow).where(
            Follow.follower_id == follower_id,
            Follow.following_id == following_id,
        )
    )
    return result.rowcount


async def is_following(db: AsyncSession, follower_id: int, following_id: int) -> bool:
    result = await db.execute(
        select(Follow).where(
            Follow.follower_id == follower_id,
            Follow.following_id == following_id,
        )
    )
    return result.scalar_one_or_none() is not None


async def list_following(db: AsyncSession, user_id: int) -> list[FollowUser]:
    """Users that user_id follows."""
    result = await db.execute(
        select(User.user_id, User.name, User.email, Follow.followed_at)
        .join(Follow, Follow.following_id == User.user_id)
        .where(Follow.follower_id == user_id)
        .order_by(desc(Follow.followed_at))
    )
    return [FollowUser.model_validate(row) for row in result.all()]


async def list_followers(db: AsyncSession, user_id: int) -> list[FollowUser]:
    """Users who follow user_id."""
    result = await db.execute(
        select(User.user_id, User.name, User.email, Follow.followed_at)
        .join(Follow, Follow.follower_id == User.user_id)
        .where(Follow.following_id == user_id)
        .order_by(desc(Follow.followed_at))
    )
    return [FollowUser.model_validate(row) for row in result.all()]


async def count_follows(db: AsyncSession, user_id: int) -> FollowCounts:
    following_count = await db.scalar(
        select(func.count()).select_from(Follow).where(Follow.follower_id == user_id)
    )
    follower_count = await db.scalar(
        select(func.count()).select_from(Follow).where(Follow.following_id == user_id)
    )
    return FollowCounts(following_count=following_count or 0, follower_count=follower_count or 0)
