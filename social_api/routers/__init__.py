"""Aggregate router exports."""
from .auth import router as auth_router
from .follows import router as follows_router
from .posts import feed_router
from .posts import router as posts_router
from .system import router as system_router
from .users import router as users_router

__all__ = [
    "auth_router",
    "feed_router",
    "follows_router",
    "posts_router",
    "system_router",
    "users_router",
]
