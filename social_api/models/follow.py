"""SQLAlchemy ORM model for follower relationships."""
from __future__ import annotations

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from social_api.database import Base
from .base import utcnow


class Follow(Base):
    __tablename__ = "follows"

    follower_id = Column(UUID(as_uuid=True), ForeignKey("users.id"), primary_key=True, index=True)
    following_id = Column(UUID(as_uuid=True), ForeignKey("users.id"), primary_key=True, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)

    follower = relationship("User", foreign_keys=[follower_id], back_populates="following_relations")
    following = relationship("User", foreign_keys=[following_id], back_populates="follower_relations")

    __table_args__ = (CheckConstraint("follower_id <> following_id", name="ck_follows_no_self_follow"),)


__all__ = ["Follow"]
