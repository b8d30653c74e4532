"""Data access for posts, their media and the aggregated feed query."""
from __future__ import annotations

from typing import Iterable
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.orm import Session, joinedload, selectinload

from ..models import Post, PostMedia


def _with_relations(statement):
    return statement.options(joinedload(Post.author), selectinload(Post.media))


class PostRepository:
    def __init__(self, session: Session):
        self.session = session

    def create(self, author_id: UUID, content: str, media_url: str | None = None) -> Post:
        post = Post(user_id=author_id, content=content)
        if media_url:
            post.media.append(PostMedia(media_url=media_url))
        self.session.add(post)
        self.session.flush()
        return post

    def get(self, post_id: UUID) -> Post | None:
        return self.session.scalar(_with_relations(select(Post).where(Post.id == post_id)))

    def list_by_authors(self, author_ids: Iterable[UUID], *, offset: int, limit: int) -> tuple[list[Post], int]:
        """Return one page of posts by any of ``author_ids`` and the unpaginated total.

        Posts are ordered newest first across all authors; the post id breaks
        ties between identical timestamps so consecutive pages never overlap.
        """

        ids = list(dict.fromkeys(author_ids))
        if not ids:
            return [], 0

        statement = (
            _with_relations(select(Post))
            .where(Post.user_id.in_(ids))
            .order_by(Post.created_at.desc(), Post.id.desc())
            .offset(offset)
            .limit(limit)
        )
        posts = list(self.session.scalars(statement).unique().all())
        total = self.session.scalar(select(func.count()).select_from(Post).where(Post.user_id.in_(ids)))
        return posts, int(total or 0)


__all__ = ["PostRepository"]
