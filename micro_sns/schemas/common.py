"""Uniform response envelope shared by every endpoint."""
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    ok: bool = True
    data: T | None = None
    error: str | None = None


class AffectedRows(BaseModel):
    model_config = {"populate_by_name": True}

    affected_rows: int = Field(..., alias="affectedRows")


class Message(BaseModel):
    message: str


def ok(data=None) -> Envelope:
    return Envelope(ok=True, data=data)
