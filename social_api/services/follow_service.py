"""Business logic for follower relationships."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..errors import ConflictError, NotFoundError, ValidationError
from ..models import User
from ..repositories import FollowRepository, UserRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FollowAck:
    message: str


@dataclass(slots=True)
class FollowStats:
    user_id: UUID
    followers_count: int
    following_count: int
    is_following: bool


class FollowService:
    """Owns the directed follow edge set and its mutation rules.

    The follower id always comes from the authenticated session and is
    trusted; the target id is caller supplied and must reference a user.
    """

    def __init__(self, session: Session, users: UserRepository, follows: FollowRepository):
        self._session = session
        self._users = users
        self._follows = follows

    def _require_user(self, user_id: UUID) -> None:
        if not self._users.exists(user_id):
            raise NotFoundError("User not found")

    def follow(self, follower_id: UUID, following_id: UUID) -> FollowAck:
        if follower_id == following_id:
            raise ValidationError("Cannot follow yourself")

        self._require_user(following_id)

        if self._follows.find(follower_id, following_id) is not None:
            raise ConflictError("Already following this user")

        try:
            self._follows.create(follower_id, following_id)
            self._session.commit()
        except IntegrityError as exc:
            self._session.rollback()
            # A concurrent follow for the same pair won the insert.
            if self._follows.find(follower_id, following_id) is not None:
                logger.warning("Duplicate follow %s -> %s rejected by the store", follower_id, following_id)
                raise ConflictError("Already following this user") from exc
            logger.exception("Failed to create follow %s -> %s", follower_id, following_id)
            raise
        except SQLAlchemyError:
            self._session.rollback()
            logger.exception("Failed to create follow %s -> %s", follower_id, following_id)
            raise

        logger.info("User %s followed %s", follower_id, following_id)
        return FollowAck(message="Successfully followed user")

    def unfollow(self, follower_id: UUID, following_id: UUID) -> FollowAck:
        if self._follows.find(follower_id, following_id) is None:
            raise NotFoundError("You are not following this user")

        try:
            deleted = self._follows.delete(follower_id, following_id)
            self._session.commit()
        except SQLAlchemyError:
            self._session.rollback()
            logger.exception("Failed to delete follow %s -> %s", follower_id, following_id)
            raise

        if not deleted:
            # Removed by a concurrent unfollow between the lookup and the delete.
            raise NotFoundError("You are not following this user")

        logger.info("User %s unfollowed %s", follower_id, following_id)
        return FollowAck(message="Successfully unfollowed user")

    def list_followers(self, user_id: UUID) -> list[User]:
        self._require_user(user_id)
        return self._follows.list_followers(user_id)

    def list_following(self, user_id: UUID) -> list[User]:
        self._require_user(user_id)
        return self._follows.list_following(user_id)

    def following_ids(self, user_id: UUID) -> list[UUID]:
        return self._follows.following_ids(user_id)

    def get_stats(self, user_id: UUID, viewer_id: UUID | None = None) -> FollowStats:
        self._require_user(user_id)
        is_following = viewer_id is not None and self._follows.find(viewer_id, user_id) is not None
        return FollowStats(
            user_id=user_id,
            followers_count=self._follows.count_followers(user_id),
            following_count=self._follows.count_following(user_id),
            is_following=is_following,
        )


__all__ = ["FollowAck", "FollowStats", "FollowService"]
