"""Semantic checks shared by the post, feed and auth services."""
from __future__ import annotations

import math
from urllib.parse import urlparse

from ..errors import ValidationError

MAX_POST_LENGTH = 5000
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
MIN_PASSWORD_LENGTH = 6

# Schemes whose URLs are meaningless without an authority component.
HIERARCHICAL_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})


def validate_pagination(page: int, limit: int) -> int:
    """Check 1-indexed page bounds and return the row offset."""

    if page < 1:
        raise ValidationError("Page must be greater than 0")
    if limit < 1 or limit > MAX_PAGE_SIZE:
        raise ValidationError(f"Limit must be between 1 and {MAX_PAGE_SIZE}")
    return (page - 1) * limit


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit > 0 else 0


def normalize_content(content: str | None) -> str:
    text = (content or "").strip()
    if not text:
        raise ValidationError("Post content cannot be empty")
    if len(text) > MAX_POST_LENGTH:
        raise ValidationError(f"Post content cannot exceed {MAX_POST_LENGTH} characters")
    return text


def validate_media_url(media_url: str | None) -> str | None:
    """Return the trimmed URL, or ``None`` when no media was supplied.

    Any absolute URL is accepted. Web schemes must carry a host; other schemes
    such as ``mailto:`` or ``data:`` only need a non-empty body.
    """

    if media_url is None:
        return None
    candidate = media_url.strip()
    if not candidate:
        return None
    try:
        parsed = urlparse(candidate)
    except ValueError as exc:
        raise ValidationError("Invalid media URL format") from exc
    if not parsed.scheme or any(ch.isspace() for ch in candidate):
        raise ValidationError("Invalid media URL format")
    if parsed.scheme.lower() in HIERARCHICAL_SCHEMES:
        if not parsed.netloc:
            raise ValidationError("Invalid media URL format")
    elif not parsed.path:
        raise ValidationError("Invalid media URL format")
    return candidate


def validate_password(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")


__all__ = [
    "MAX_POST_LENGTH",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "MIN_PASSWORD_LENGTH",
    "validate_pagination",
    "total_pages",
    "normalize_content",
    "validate_media_url",
    "validate_password",
]
