"""Convenience exports for schema layer."""
from .auth import AuthResponse, LoginRequest, MessageResponse, RegisterRequest
from .follow import FollowActionResponse, FollowListResponse, FollowStatsResponse
from .posts import PaginatedPostsResponse, Pagination, PostCreate, PostMediaResponse, PostResponse
from .users import AuthorSummary, UserSummary

__all__ = [
    "AuthResponse",
    "LoginRequest",
    "MessageResponse",
    "RegisterRequest",
    "FollowActionResponse",
    "FollowListResponse",
    "FollowStatsResponse",
    "PaginatedPostsResponse",
    "Pagination",
    "PostCreate",
    "PostMediaResponse",
    "PostResponse",
    "AuthorSummary",
    "UserSummary",
]
