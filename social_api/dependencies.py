"""FastAPI dependency providers that wire repositories into services per request."""
from __future__ import annotations

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from .config import Settings, get_settings
from .database import get_session
from .errors import UnauthorizedError
from .models import User
from .repositories import FollowRepository, PostRepository, UserRepository
from .services import AuthService, FeedService, FollowService, PostService, UserService

_security = HTTPBearer(auto_error=False)


def get_user_repository(db: Session = Depends(get_session)) -> UserRepository:
    return UserRepository(db)


def get_follow_repository(db: Session = Depends(get_session)) -> FollowRepository:
    return FollowRepository(db)


def get_post_repository(db: Session = Depends(get_session)) -> PostRepository:
    return PostRepository(db)


def get_auth_service(
    db: Session = Depends(get_session),
    users: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(db, users, settings)


def get_user_service(users: UserRepository = Depends(get_user_repository)) -> UserService:
    return UserService(users)


def get_follow_service(
    db: Session = Depends(get_session),
    users: UserRepository = Depends(get_user_repository),
    follows: FollowRepository = Depends(get_follow_repository),
) -> FollowService:
    return FollowService(db, users, follows)


def get_post_service(
    db: Session = Depends(get_session),
    posts: PostRepository = Depends(get_post_repository),
) -> PostService:
    return PostService(db, posts)


def get_feed_service(
    follows: FollowService = Depends(get_follow_service),
    posts: PostRepository = Depends(get_post_repository),
) -> FeedService:
    return FeedService(follows, posts)


def _extract_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None,
    settings: Settings,
) -> str | None:
    if credentials and credentials.scheme.lower() == "bearer":
        return credentials.credentials
    return request.cookies.get(settings.cookie_name) or None


async def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_security),
    auth: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
) -> User:
    """Resolve the authenticated user from the session cookie or bearer token."""

    token = _extract_token(request, credentials, settings)
    if not token:
        raise UnauthorizedError("No token provided")
    return auth.resolve_user(token)


async def get_optional_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_security),
    auth: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
) -> User | None:
    """Return the authenticated user when a valid token is provided."""

    token = _extract_token(request, credentials, settings)
    if not token:
        return None
    try:
        return auth.resolve_user(token)
    except UnauthorizedError:
        return None


__all__ = [
    "get_auth_service",
    "get_current_user",
    "get_feed_service",
    "get_follow_service",
    "get_optional_user",
    "get_post_service",
    "get_user_service",
]
