"""Repository layer wrapping SQLAlchemy sessions."""
from .follow_repository import FollowRepository
from .post_repository import PostRepository
from .user_repository import UserRepository

__all__ = ["FollowRepository", "PostRepository", "UserRepository"]
