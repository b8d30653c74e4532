"""Business logic for creating and listing posts."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..errors import NotFoundError
from ..models import Post
from ..repositories import PostRepository
from .validation import DEFAULT_PAGE_SIZE, normalize_content, validate_media_url, validate_pagination

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PostPage:
    posts: list[Post] = field(default_factory=list)
    total: int = 0


class PostService:
    def __init__(self, session: Session, posts: PostRepository):
        self._session = session
        self._posts = posts

    def create(self, author_id: UUID, content: str, media_url: str | None = None) -> Post:
        """Persist a post with at most one media attachment.

        Content is stored trimmed. The returned post carries its media list
        and its author so callers can render the author summary.
        """

        text = normalize_content(content)
        url = validate_media_url(media_url)

        try:
            post = self._posts.create(author_id, text, url)
            self._session.commit()
        except SQLAlchemyError:
            self._session.rollback()
            logger.exception("Failed to create post for user %s", author_id)
            raise

        logger.info("User %s created post %s", author_id, post.id)
        return self.get(post.id)

    def get(self, post_id: UUID) -> Post:
        post = self._posts.get(post_id)
        if post is None:
            raise NotFoundError("Post not found")
        return post

    def list_by_author(self, user_id: UUID, page: int = 1, limit: int = DEFAULT_PAGE_SIZE) -> PostPage:
        offset = validate_pagination(page, limit)
        posts, total = self._posts.list_by_authors([user_id], offset=offset, limit=limit)
        return PostPage(posts=posts, total=total)


__all__ = ["PostPage", "PostService"]
