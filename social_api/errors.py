"""Error taxonomy shared by services and the HTTP boundary."""
from __future__ import annotations

from fastapi import status


class AppError(Exception):
    """Base class for failures that map to a client-facing status code."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Caller-supplied data violates a semantic invariant."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class UnauthorizedError(AppError):
    """Missing, invalid or expired credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class ConflictError(AppError):
    """The operation would violate a uniqueness invariant."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "A record with this value already exists"


__all__ = ["AppError", "ValidationError", "UnauthorizedError", "NotFoundError", "ConflictError"]
