"""Tests for settings parsing and token helpers."""
from __future__ import annotations

import os
import uuid
from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt
from pydantic import ValidationError as SettingsValidationError

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///./test_social.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-the-social-feed-suite")
os.environ.setdefault("APP_ENV", "test")

from social_api.config import Settings, is_placeholder  # noqa: E402
from social_api.errors import UnauthorizedError  # noqa: E402
from social_api.services import create_access_token, decode_access_token, hash_password, verify_password  # noqa: E402
from social_api.services.validation import total_pages, validate_pagination  # noqa: E402


def _settings(**overrides) -> Settings:
    values = {"DATABASE_URL": "sqlite+pysqlite:///:memory:", "JWT_SECRET_KEY": "unit-test-secret-with-enough-length-0001"}
    values.update(overrides)
    return Settings(**values)


@pytest.mark.parametrize("value", [None, "", "   ", "changeme", "Placeholder"])
def test_placeholder_detection(value) -> None:
    assert is_placeholder(value)


def test_placeholder_secret_is_rejected() -> None:
    with pytest.raises(SettingsValidationError):
        _settings(JWT_SECRET_KEY="changeme")


def test_short_secret_is_rejected() -> None:
    with pytest.raises(SettingsValidationError, match="at least 32 characters"):
        _settings(JWT_SECRET_KEY="s" * 31)

    assert _settings(JWT_SECRET_KEY="  " + "s" * 32 + "  ").jwt_secret_key == "s" * 32


def test_auth_rate_limit_defaults_by_environment() -> None:
    assert _settings(APP_ENV="development").auth_rate_limit_value == "100 per 15 minutes"
    assert _settings(APP_ENV="production").auth_rate_limit_value == "5 per 15 minutes"
    assert _settings(APP_ENV="test").auth_rate_limit_value == "5 per 15 minutes"
    assert _settings(AUTH_RATE_LIMIT="2 per minute").auth_rate_limit_value == "2 per minute"


def test_settings_defaults_and_cors_parsing() -> None:
    settings = _settings(CORS_ORIGINS="https://a.example.com, ,https://b.example.com", COOKIE_SECURE="true")

    assert settings.cors_origin_list() == ["https://a.example.com", "https://b.example.com"]
    assert settings.cookie_secure is True
    assert settings.cookie_max_age == 7 * 24 * 60 * 60
    assert settings.jwt_algorithm == "HS256"


def test_production_flag() -> None:
    assert _settings(APP_ENV="production").is_production is True
    assert _settings(APP_ENV="development").is_production is False


def test_token_round_trip_carries_user_and_email() -> None:
    settings = _settings()
    user_id = uuid.uuid4()

    payload = decode_access_token(settings, create_access_token(settings, user_id, "alice@example.com"))

    assert payload.user_id == user_id
    assert payload.email == "alice@example.com"


def test_expired_or_foreign_tokens_are_unauthorized() -> None:
    settings = _settings()
    past = datetime.now(timezone.utc) - timedelta(minutes=5)
    expired = jwt.encode({"sub": str(uuid.uuid4()), "exp": past}, settings.jwt_secret_key, algorithm="HS256")
    with pytest.raises(UnauthorizedError):
        decode_access_token(settings, expired)

    foreign = create_access_token(_settings(JWT_SECRET_KEY="another-secret-that-is-also-long-enough-2"), uuid.uuid4())
    with pytest.raises(UnauthorizedError):
        decode_access_token(settings, foreign)

    no_subject = jwt.encode({"email": "x@example.com"}, settings.jwt_secret_key, algorithm="HS256")
    with pytest.raises(UnauthorizedError):
        decode_access_token(settings, no_subject)


def test_password_hashing() -> None:
    hashed = hash_password("password123")
    assert hashed != "password123"
    assert verify_password("password123", hashed)
    assert not verify_password("password124", hashed)
    assert not verify_password("password123", "test-hash")


def test_pagination_helpers() -> None:
    assert validate_pagination(1, 10) == 0
    assert validate_pagination(3, 25) == 50
    assert total_pages(0, 10) == 0
    assert total_pages(21, 10) == 3
