"""Pydantic schemas for post resources."""
from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from .users import AuthorSummary


class PostCreate(BaseModel):
    """Payload used by API clients when constructing a post.

    Length limits are enforced on the trimmed text by the post service.
    """

    content: str = Field(..., min_length=1)
    media_url: str | None = Field(default=None, max_length=2048)


class PostMediaResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    media_url: str
    created_at: datetime


class PostResponse(BaseModel):
    """Serialized post with its media list and author summary."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    content: str
    created_at: datetime
    media: list[PostMediaResponse] = Field(default_factory=list)
    author: AuthorSummary


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int


class PaginatedPostsResponse(BaseModel):
    """Envelope used when returning a page of posts."""

    items: list[PostResponse]
    pagination: Pagination


__all__ = [
    "PostCreate",
    "PostMediaResponse",
    "PostResponse",
    "Pagination",
    "PaginatedPostsResponse",
]
