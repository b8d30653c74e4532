"""Data access for the directed ``follows`` edge set."""
from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from ..models import Follow, User


class FollowRepository:
    def __init__(self, session: Session):
        self.session = session

    def find(self, follower_id: UUID, following_id: UUID) -> Follow | None:
        return self.session.get(Follow, (follower_id, following_id))

    def create(self, follower_id: UUID, following_id: UUID) -> Follow:
        record = Follow(follower_id=follower_id, following_id=following_id)
        self.session.add(record)
        self.session.flush()
        return record

    def delete(self, follower_id: UUID, following_id: UUID) -> int:
        """Remove the edge and return the number of rows deleted."""
        result = self.session.execute(
            delete(Follow).where(Follow.follower_id == follower_id, Follow.following_id == following_id)
        )
        return int(result.rowcount or 0)

    def list_followers(self, user_id: UUID) -> list[User]:
        statement = (
            select(User)
            .join(Follow, Follow.follower_id == User.id)
            .where(Follow.following_id == user_id)
            .order_by(Follow.created_at.desc(), Follow.follower_id.desc())
        )
        return list(self.session.scalars(statement).all())

    def list_following(self, user_id: UUID) -> list[User]:
        statement = (
            select(User)
            .join(Follow, Follow.following_id == User.id)
            .where(Follow.follower_id == user_id)
            .order_by(Follow.created_at.desc(), Follow.following_id.desc())
        )
        return list(self.session.scalars(statement).all())

    def following_ids(self, user_id: UUID) -> list[UUID]:
        return list(self.session.scalars(select(Follow.following_id).where(Follow.follower_id == user_id)).all())

    def count_followers(self, user_id: UUID) -> int:
        count = self.session.scalar(select(func.count()).select_from(Follow).where(Follow.following_id == user_id))
        return int(count or 0)

    def count_following(self, user_id: UUID) -> int:
        count = self.session.scalar(select(func.count()).select_from(Follow).where(Follow.follower_id == user_id))
        return int(count or 0)


__all__ = ["FollowRepository"]
