"""Comment endpoints."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from micro_sns.api.deps import get_db
from micro_sns.schemas.comment import CommentCreate, CommentCreated, CommentResponse, CommentUpdate
from micro_sns.schemas.common import AffectedRows, Envelope, ok
from micro_sns.services.comment_service import (
    create_comment,
    delete_comment,
    list_post_comments,
    update_comment,
)

router = APIRouter(prefix="/comments", tags=["comments"])


@router.get("/by-post/{post_id}", response_model=Envelope[list[CommentResponse]])
async def comments_by_post(post_id: int, db: AsyncSession = Depends(get_db)):
    return ok(await list_post_comments(db, post_id))


@router.post("", response_model=Envelope[CommentCreated], status_code=status.HTTP_201_CREATED)
async def create_comment_endpoint(
    data: CommentCreate,
    db: AsyncSession = Depends(get_db),
):
    comment = await create_comment(db, data)
    await db.commit()
    return ok(CommentCreated(comment_id=comment.comment_id))


@router.put("/{comment_id}", response_model=Envelope[AffectedRows])
async def update_comment_endpoint(
    comment_id: int,
    data: CommentUpdate,
    db: AsyncSession = Depends(get_db),
):
    affected = await update_comment(db, comment_id, data.content)
    await db.commit()
    return ok(AffectedRows(affected_rows=affected))


@router.delete("/{comment_id}", response_model=Envelope[AffectedRows])
async def delete_comment_endpoint(
    comment_id: int,
    db: AsyncSession = Depends(get_db),
):
    affected = await delete_comment(db, comment_id)
    await db.commit()
    return ok(AffectedRows(affected_rows=affected))
