"""Lookups of public user records."""
from __future__ import annotations

from uuid import UUID

from ..errors import NotFoundError
from ..models import User
from ..repositories import UserRepository


class UserService:
    def __init__(self, users: UserRepository):
        self._users = users

    @staticmethod
    def _require(user: User | None) -> User:
        if user is None:
            raise NotFoundError("User not found")
        return user

    def get(self, user_id: UUID) -> User:
        return self._require(self._users.get_by_id(user_id))

    def find_by_username(self, username: str) -> User:
        return self._require(self._users.get_by_username(username))

    def find_by_email(self, email: str) -> User:
        return self._require(self._users.get_by_email(email))


__all__ = ["UserService"]
