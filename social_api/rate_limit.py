"""Per-client request throttling for the authentication routes."""
from __future__ import annotations

from slowapi import Limiter
from slowapi.util import get_remote_address

from .config import get_settings

AUTH_RATE_LIMIT_MESSAGE = "Too many authentication attempts, please try again later."

limiter = Limiter(key_func=get_remote_address)


def auth_rate_limit() -> str:
    # Read on every request so operators and tests can retune it at runtime.
    return get_settings().auth_rate_limit_value


__all__ = ["AUTH_RATE_LIMIT_MESSAGE", "auth_rate_limit", "limiter"]
