"""Composition of the reverse-chronological home feed."""
from __future__ import annotations

from uuid import UUID

from ..repositories import PostRepository
from .follow_service import FollowService
from .post_service import PostPage
from .validation import DEFAULT_PAGE_SIZE, validate_pagination


class FeedService:
    """Merge the viewer's own posts with posts from everyone they follow.

    Read only: the edge set and the posts are fetched with two sequential
    queries and no snapshot, so a post by a newly followed author may or may
    not appear.
    """

    def __init__(self, follows: FollowService, posts: PostRepository):
        self._follows = follows
        self._posts = posts

    def get_feed(self, viewer_id: UUID, page: int = 1, limit: int = DEFAULT_PAGE_SIZE) -> PostPage:
        offset = validate_pagination(page, limit)
        # An unknown viewer simply has no outbound edges.
        author_ids = [viewer_id, *self._follows.following_ids(viewer_id)]
        posts, total = self._posts.list_by_authors(author_ids, offset=offset, limit=limit)
        return PostPage(posts=posts, total=total)


__all__ = ["FeedService"]
