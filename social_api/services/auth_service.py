"""Registration, login and JWT handling backed by the user repository."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple
from uuid import UUID

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..config import Settings
from ..errors import ConflictError, UnauthorizedError
from ..models import User
from ..repositories import UserRepository
from .validation import validate_password

logger = logging.getLogger(__name__)

_pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


@dataclass(slots=True, frozen=True)
class TokenPayload:
    user_id: UUID
    email: str | None = None


def hash_password(password: str) -> str:
    """Hash a plain-text password using bcrypt."""

    return _pwd_context.hash(password)


def verify_password(password: str, hashed_password: str) -> bool:
    """Verify that ``password`` matches ``hashed_password``."""

    try:
        return _pwd_context.verify(password, hashed_password)
    except ValueError:
        logger.warning("Stored password hash could not be parsed")
        return False


def create_access_token(
    settings: Settings,
    user_id: UUID,
    email: str | None = None,
    *,
    expires_minutes: Optional[int] = None,
) -> str:
    """Create a signed JWT holding the user id as ``sub``."""

    expire_delta = timedelta(minutes=expires_minutes or settings.jwt_expires_minutes)
    now = datetime.now(timezone.utc)
    payload = {"sub": str(user_id), "email": email, "exp": now + expire_delta, "iat": now}
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(settings: Settings, token: str) -> TokenPayload:
    """Decode and validate a JWT; expired or tampered tokens are unauthorized."""

    try:
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        raise UnauthorizedError("Invalid or expired token") from exc

    subject = payload.get("sub")
    if not subject:
        raise UnauthorizedError("Invalid token payload")
    try:
        user_id = UUID(subject)
    except ValueError as exc:
        raise UnauthorizedError("Invalid token payload") from exc
    return TokenPayload(user_id=user_id, email=payload.get("email"))


class AuthService:
    def __init__(self, session: Session, users: UserRepository, settings: Settings):
        self._session = session
        self._users = users
        self._settings = settings

    def _issue_token(self, user: User) -> str:
        return create_access_token(self._settings, user.id, user.email)

    def register(self, email: str, username: str, password: str) -> Tuple[User, str]:
        """Persist a new user and return the user with an access token."""

        validate_password(password)

        if self._users.get_by_email(email) is not None:
            raise ConflictError("Email already registered")
        if self._users.get_by_username(username) is not None:
            raise ConflictError("Username already taken")

        hashed = hash_password(password)
        try:
            user = self._users.create(email=email, username=username, hashed_password=hashed)
            self._session.commit()
        except IntegrityError as exc:
            self._session.rollback()
            logger.warning("Registration for %s lost a uniqueness race", username)
            raise ConflictError("A user with this email or username already exists") from exc
        except SQLAlchemyError:
            self._session.rollback()
            logger.exception("Failed to register user")
            raise

        logger.info("Registered user %s (%s)", user.username, user.id)
        return user, self._issue_token(user)

    def login(self, email: str, password: str) -> Tuple[User, str]:
        user = self._users.get_by_email(email)
        if user is None or not verify_password(password, user.hashed_password):
            raise UnauthorizedError("Invalid email or password")
        return user, self._issue_token(user)

    def resolve_user(self, token: str) -> User:
        """Return the user a session token belongs to."""

        payload = decode_access_token(self._settings, token)
        user = self._users.get_by_id(payload.user_id)
        if user is None:
            raise UnauthorizedError("Invalid token")
        return user


__all__ = [
    "AuthService",
    "TokenPayload",
    "create_access_token",
    "decode_access_token",
    "hash_password",
    "verify_password",
]
