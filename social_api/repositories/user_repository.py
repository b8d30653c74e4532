"""Data access for the ``users`` table."""
from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import User


class UserRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, user_id: UUID) -> User | None:
        return self.session.get(User, user_id)

    def exists(self, user_id: UUID) -> bool:
        return self.session.scalar(select(User.id).where(User.id == user_id)) is not None

    def get_by_email(self, email: str) -> User | None:
        """Emails are stored lowercased, so lookups normalise the same way."""
        return self.session.scalar(select(User).where(User.email == email.strip().lower()))

    def get_by_username(self, username: str) -> User | None:
        return self.session.scalar(select(User).where(User.username == username))

    def create(self, *, email: str, username: str, hashed_password: str) -> User:
        user = User(email=email.strip().lower(), username=username, hashed_password=hashed_password)
        self.session.add(user)
        self.session.flush()
        return user


__all__ = ["UserRepository"]
