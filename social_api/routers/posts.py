"""Post and feed API routes."""
from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from ..dependencies import get_current_user, get_feed_service, get_post_service
from ..models import User
from ..schemas import PaginatedPostsResponse, Pagination, PostCreate, PostResponse
from ..services import FeedService, PostPage, PostService
from ..services.validation import DEFAULT_PAGE_SIZE, total_pages

router = APIRouter(prefix="/posts", tags=["posts"])
feed_router = APIRouter(tags=["feed"])


def _paginated(result: PostPage, page: int, limit: int) -> PaginatedPostsResponse:
    return PaginatedPostsResponse(
        items=[PostResponse.model_validate(post) for post in result.posts],
        pagination=Pagination(page=page, limit=limit, total=result.total, total_pages=total_pages(result.total, limit)),
    )


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post_endpoint(
    payload: PostCreate,
    current_user: User = Depends(get_current_user),
    posts: PostService = Depends(get_post_service),
) -> PostResponse:
    post = posts.create(current_user.id, payload.content, payload.media_url)
    return PostResponse.model_validate(post)


@router.get("/{user_id}", response_model=PaginatedPostsResponse)
async def list_user_posts_endpoint(
    user_id: UUID,
    page: int = Query(1),
    limit: int = Query(DEFAULT_PAGE_SIZE),
    posts: PostService = Depends(get_post_service),
) -> PaginatedPostsResponse:
    return _paginated(posts.list_by_author(user_id, page, limit), page, limit)


@feed_router.get("/feed", response_model=PaginatedPostsResponse)
async def feed_endpoint(
    page: int = Query(1),
    limit: int = Query(DEFAULT_PAGE_SIZE),
    current_user: User = Depends(get_current_user),
    feed: FeedService = Depends(get_feed_service),
) -> PaginatedPostsResponse:
    return _paginated(feed.get_feed(current_user.id, page, limit), page, limit)
