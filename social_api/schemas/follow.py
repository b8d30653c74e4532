"""Schemas supporting follower APIs."""
from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel

from .users import UserSummary


class FollowActionResponse(BaseModel):
    success: bool = True
    message: str


class FollowListResponse(BaseModel):
    items: list[UserSummary]


class FollowStatsResponse(BaseModel):
    user_id: UUID
    followers_count: int
    following_count: int
    is_following: bool


__all__ = ["FollowActionResponse", "FollowListResponse", "FollowStatsResponse"]
