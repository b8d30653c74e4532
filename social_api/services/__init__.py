"""Convenience exports for service layer."""
from .auth_service import (
    AuthService,
    TokenPayload,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from .feed_service import FeedService
from .follow_service import FollowAck, FollowService, FollowStats
from .post_service import PostPage, PostService
from .user_service import UserService

__all__ = [
    "AuthService",
    "TokenPayload",
    "create_access_token",
    "decode_access_token",
    "hash_password",
    "verify_password",
    "FeedService",
    "FollowAck",
    "FollowService",
    "FollowStats",
    "PostPage",
    "PostService",
    "UserService",
]
