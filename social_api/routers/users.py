"""Public user lookup routes."""
from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query
from pydantic import EmailStr

from ..dependencies import get_user_service
from ..schemas import UserSummary
from ..services import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/search/username", response_model=UserSummary)
async def search_by_username_endpoint(
    username: str = Query(..., min_length=1),
    users: UserService = Depends(get_user_service),
) -> UserSummary:
    return UserSummary.model_validate(users.find_by_username(username))


@router.get("/search/email", response_model=UserSummary)
async def search_by_email_endpoint(
    email: EmailStr = Query(...),
    users: UserService = Depends(get_user_service),
) -> UserSummary:
    return UserSummary.model_validate(users.find_by_email(str(email)))


@router.get("/{user_id}", response_model=UserSummary)
async def get_user_endpoint(user_id: UUID, users: UserService = Depends(get_user_service)) -> UserSummary:
    return UserSummary.model_validate(users.get(user_id))
