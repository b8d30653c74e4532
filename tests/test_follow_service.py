"""Unit tests for follow graph rules exercised directly against the service layer."""
from __future__ import annotations

import os
import uuid
from typing import Callable, Iterator

import pytest
from sqlalchemy import delete
from sqlalchemy.orm import Session

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///./test_social.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-the-social-feed-suite")
os.environ.setdefault("APP_ENV", "test")

from social_api.database import Base, SessionLocal, engine  # noqa: E402
from social_api.errors import ConflictError, NotFoundError, ValidationError  # noqa: E402
from social_api.models import Follow, Post, PostMedia, User  # noqa: E402
from social_api.repositories import FollowRepository, UserRepository  # noqa: E402
from social_api.services import FollowService  # noqa: E402


@pytest.fixture(scope="module", autouse=True)
def _create_schema() -> Iterator[None]:
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def _clean_database() -> Iterator[None]:
    with SessionLocal() as session:
        session.execute(delete(PostMedia))
        session.execute(delete(Post))
        session.execute(delete(Follow))
        session.execute(delete(User))
        session.commit()
    yield


@pytest.fixture
def db() -> Iterator[Session]:
    with SessionLocal() as session:
        yield session


@pytest.fixture
def service(db: Session) -> FollowService:
    return FollowService(db, UserRepository(db), FollowRepository(db))


@pytest.fixture
def user_factory() -> Callable[[str], User]:
    def _factory(username: str) -> User:
        with SessionLocal() as session:
            user = User(username=username, email=f"{username}@example.com", hashed_password="test-hash")
            session.add(user)
            session.commit()
            session.refresh(user)
            return user
    return _factory


def test_self_follow_is_rejected_even_for_unknown_user(service: FollowService, user_factory) -> None:
    ghost = uuid.uuid4()
    with pytest.raises(ValidationError):
        service.follow(ghost, ghost)

    alice = user_factory("alice")
    with pytest.raises(ValidationError):
        service.follow(alice.id, alice.id)


def test_follow_unknown_target_is_not_found(service: FollowService, user_factory) -> None:
    alice = user_factory("alice")
    with pytest.raises(NotFoundError):
        service.follow(alice.id, uuid.uuid4())


def test_follow_lifecycle(service: FollowService, user_factory) -> None:
    alice = user_factory("alice")
    bob = user_factory("bob")

    ack = service.follow(alice.id, bob.id)
    assert ack.message == "Successfully followed user"

    with pytest.raises(ConflictError):
        service.follow(alice.id, bob.id)

    assert service.unfollow(alice.id, bob.id).message == "Successfully unfollowed user"

    with pytest.raises(NotFoundError):
        service.unfollow(alice.id, bob.id)


def test_follow_is_not_symmetric(service: FollowService, user_factory) -> None:
    alice = user_factory("alice")
    bob = user_factory("bob")

    service.follow(alice.id, bob.id)

    assert [user.id for user in service.list_following(alice.id)] == [bob.id]
    assert service.list_following(bob.id) == []
    assert [user.id for user in service.list_followers(bob.id)] == [alice.id]
    with pytest.raises(NotFoundError):
        service.unfollow(bob.id, alice.id)


def test_followers_are_listed_once_newest_first(service: FollowService, user_factory) -> None:
    target = user_factory("target")
    first = user_factory("first")
    second = user_factory("second")

    service.follow(first.id, target.id)
    service.follow(second.id, target.id)

    followers = service.list_followers(target.id)
    assert [user.id for user in followers] == [second.id, first.id]

    service.unfollow(first.id, target.id)
    assert [user.id for user in service.list_followers(target.id)] == [second.id]


def test_listing_unknown_user_is_not_found(service: FollowService) -> None:
    with pytest.raises(NotFoundError):
        service.list_followers(uuid.uuid4())
    with pytest.raises(NotFoundError):
        service.list_following(uuid.uuid4())


def test_concurrent_duplicate_follow_surfaces_as_conflict(
    db: Session, user_factory, monkeypatch: pytest.MonkeyPatch
) -> None:
    alice = user_factory("alice")
    bob = user_factory("bob")

    # Another request commits the same edge after this one checked for it.
    with SessionLocal() as other:
        other.add(Follow(follower_id=alice.id, following_id=bob.id))
        other.commit()

    follows = FollowRepository(db)
    service = FollowService(db, UserRepository(db), follows)
    real_find = follows.find
    calls = {"count": 0}

    def _stale_find(follower_id, following_id):
        calls["count"] += 1
        if calls["count"] == 1:
            return None
        return real_find(follower_id, following_id)

    monkeypatch.setattr(follows, "find", _stale_find)

    with pytest.raises(ConflictError):
        service.follow(alice.id, bob.id)

    with SessionLocal() as session:
        assert session.query(Follow).count() == 1


def test_follow_stats(service: FollowService, user_factory) -> None:
    alice = user_factory("alice")
    bob = user_factory("bob")
    charlie = user_factory("charlie")

    service.follow(alice.id, bob.id)
    service.follow(charlie.id, bob.id)
    service.follow(bob.id, alice.id)

    stats = service.get_stats(bob.id, viewer_id=alice.id)
    assert stats.followers_count == 2
    assert stats.following_count == 1
    assert stats.is_following is True

    assert service.get_stats(bob.id).is_following is False
    assert service.get_stats(alice.id, viewer_id=charlie.id).is_following is False
