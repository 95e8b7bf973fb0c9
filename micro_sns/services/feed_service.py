"""Post and feed business logic."""
from datetime import datetime

from sqlalchemy import Select, delete, desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from micro_sns.core.errors import NotFoundError
from micro_sns.core.logging import get_logger
from micro_sns.models.comment import Comment
from micro_sns.models.engagement import Follow, Like
from micro_sns.models.post import Post
from micro_sns.models.user import User
from micro_sns.schemas.post import PostCreate, PostResponse
from micro_sns.services.auth_service import require_user

logger = get_logger(__name__)


def like_count_column():
    """Correlated count of Likes rows for the enclosing Post row."""
    return (
        select(func.count())
        .select_from(Like)
        .where(Like.post_id == Post.post_id)
        .correlate(Post)
        .scalar_subquery()
        .label("like_count")
    )


def post_listing(like_count=None) -> Select:
    """Base select for post listings: post fields, author and like_count."""
    if like_count is None:
        like_count = like_count_column()
    return select(
        Post.post_id,
        Post.user_id.label("author_id"),
        User.name.label("author"),
        Post.content,
        Post.created_at,
        Post.updated_at,
        like_count,
    ).join(User, User.user_id == Post.user_id)


def newest_first(stmt: Select) -> Select:
    return stmt.order_by(desc(Post.created_at), desc(Post.post_id))


async def fetch_posts(db: AsyncSession, stmt: Select) -> list[PostResponse]:
    result = await db.execute(stmt)
    return [PostResponse.model_validate(row) for row in result.all()]


async def list_posts(db: AsyncSession) -> list[PostResponse]:
    return await fetch_posts(db, newest_first(post_listing()))


async def list_user_posts(db: AsyncSession, user_id: int) -> list[PostResponse]:
    return await fetch_posts(db, newest_first(post_listing().where(Post.user_id == user_id)))


async def get_feed_posts(db: AsyncSession, follower_id: int) -> list[PostResponse]:
    """Posts authored by everyone follower_id follows, newest first."""
    subq_following = select(Follow.following_id).where(Follow.follower_id == follower_id)
    return await fetch_posts(db, newest_first(post_listing().where(Post.user_id.in_(subq_following))))


async def list_trending_posts(db: AsyncSession, limit: int) -> list[PostResponse]:
    like_count = like_count_column()
    stmt = (
        post_listing(like_count)
        .order_by(like_count.desc(), desc(Post.created_at), desc(Post.post_id))
        .limit(limit)
    )
    return await fetch_posts(db, stmt)


async def get_post(db: AsyncSession, post_id: int) -> PostResponse | None:
    result = await db.execute(post_listing().where(Post.post_id == post_id))
    row = result.first()
    return PostResponse.model_validate(row) if row else None


async def require_post(db: AsyncSession, post_id: int) -> Post:
    result = await db.execute(select(Post).where(Post.post_id == post_id))
    post = result.scalar_one_or_none()
    if not post:
        raise NotFoundError("Post not found")
    return post


async def create_post(db: AsyncSession, data: PostCreate) -> Post:
    await require_user(db, data.user_id)
    post = Post(user_id=data.user_id, content=data.content)
    db.add(post)
    await db.flush()
    await db.refresh(post)
    return post


async def update_post(db: AsyncSession, post_id: int, content: str) -> int:
    result = await db.execute(
        update(Post)
        .where(Post.post_id == post_id)
        .values(content=content, updated_at=datetime.utcnow())
    )
    return result.rowcount


async def delete_post(db: AsyncSession, post_id: int) -> int:
    """Delete a post together with its comments and likes in one transaction."""
    await db.execute(delete(Comment).where(Comment.post_id == post_id))
    await db.execute(delete(Like).where(Like.post_id == post_id))
    result = await db.execute(delete(Post).where(Post.post_id == post_id))
    if result.rowcount:
        logger.info("Deleted post %s", post_id)
    return result.rowcount
