"""Health check including DB."""
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from micro_sns.api.deps import get_db
from micro_sns.schemas.common import Envelope, ok

router = APIRouter(tags=["health"])


@router.get("/health", response_model=Envelope[dict])
async def health(db: AsyncSession = Depends(get_db)):
    await db.execute(text("SELECT 1"))
    return ok({"database": "connected"})
