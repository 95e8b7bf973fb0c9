"""Comment thread logic."""
from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from micro_sns.models.comment import Comment
from micro_sns.models.user import User
from micro_sns.schemas.comment import CommentCreate, CommentResponse
from micro_sns.services.auth_service import require_user
from micro_sns.services.feed_service import require_post


async def list_post_comments(db: AsyncSession, post_id: int) -> list[CommentResponse]:
    """Comments on a post in chronological order (oldest first)."""
    result = await db.execute(
        select(
            Comment.comment_id,
            Comment.post_id,
            Comment.content,
            Comment.created_at,
            User.user_id.label("author_id"),
            User.name.label("author"),
        )
        .join(User, Comment.user_id == User.user_id)
        .where(Comment.post_id == post_id)
        .order_by(Comment.created_at.asc(), Comment.comment_id.asc())
    )
    return [CommentResponse.model_validate(row) for row in result.all()]


async def create_comment(db: AsyncSession, data: CommentCreate) -> Comment:
    await require_post(db, data.post_id)
    await require_user(db, data.user_id)
    comment = Comment(post_id=data.post_id, user_id=data.user_id, content=data.content)
    db.add(comment)
    await db.flush()
    await db.refresh(comment)
    return comment


async def update_comment(db: AsyncSession, comment_id: int, content: str) -> int:
    result = await db.execute(
        update(Comment).where(Comment.comment_id == comment_id).values(content=content)
    )
    return result.rowcount


async def delete_comment(db: AsyncSession, comment_id: int) -> int:
    result = await db.execute(delete(Comment).where(Comment.comment_id == comment_id))
    return result.rowcount
