"""Convenience exports for ORM models."""
from .follow import Follow
from .post import Post, PostMedia
from .user import User

__all__ = [
    "Follow",
    "Post",
    "PostMedia",
    "User",
]
