"""Follow management API routes."""
from __future__ import annotations

from dataclasses import asdict
from uuid import UUID

from fastapi import APIRouter, Depends

from ..dependencies import get_current_user, get_follow_service, get_optional_user
from ..models import User
from ..schemas import FollowActionResponse, FollowListResponse, FollowStatsResponse, UserSummary
from ..services import FollowService

router = APIRouter(prefix="/follow", tags=["follows"])


@router.post("/{user_id}", response_model=FollowActionResponse)
async def follow_user_endpoint(
    user_id: UUID,
    current_user: User = Depends(get_current_user),
    follows: FollowService = Depends(get_follow_service),
) -> FollowActionResponse:
    ack = follows.follow(current_user.id, user_id)
    return FollowActionResponse(message=ack.message)


@router.delete("/{user_id}", response_model=FollowActionResponse)
async def unfollow_user_endpoint(
    user_id: UUID,
    current_user: User = Depends(get_current_user),
    follows: FollowService = Depends(get_follow_service),
) -> FollowActionResponse:
    ack = follows.unfollow(current_user.id, user_id)
    return FollowActionResponse(message=ack.message)


@router.get("/followers/{user_id}", response_model=FollowListResponse)
async def followers_endpoint(
    user_id: UUID,
    _: User = Depends(get_current_user),
    follows: FollowService = Depends(get_follow_service),
) -> FollowListResponse:
    return FollowListResponse(items=[UserSummary.model_validate(user) for user in follows.list_followers(user_id)])


@router.get("/following/{user_id}", response_model=FollowListResponse)
async def following_endpoint(
    user_id: UUID,
    _: User = Depends(get_current_user),
    follows: FollowService = Depends(get_follow_service),
) -> FollowListResponse:
    return FollowListResponse(items=[UserSummary.model_validate(user) for user in follows.list_following(user_id)])


@router.get("/stats/{user_id}", response_model=FollowStatsResponse)
async def follow_stats_endpoint(
    user_id: UUID,
    viewer: User | None = Depends(get_optional_user),
    follows: FollowService = Depends(get_follow_service),
) -> FollowStatsResponse:
    stats = follows.get_stats(user_id, viewer_id=viewer.id if viewer else None)
    return FollowStatsResponse(**asdict(stats))
