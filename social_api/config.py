"""
Runtime configuration helpers for the FastAPI application.

Loads DATABASE_URL, the JWT secret and cookie options from the environment,
falling back to the .env file located in the project root.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Final, Literal

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve the project root
BASE_DIR = Path(__file__).resolve().parents[1]

# Absolute path to .env
ENV_PATH = BASE_DIR / ".env"

# Load .env defaults without overriding environment variables provided by the platform
load_dotenv(dotenv_path=ENV_PATH, override=False)

_PLACEHOLDER_SECRETS: Final[set[str]] = {
    "changeme",
    "change-me",
    "placeholder",
    "example",
    "sample",
    "your-key-here",
}

MIN_JWT_SECRET_LENGTH = 32


def is_placeholder(value: str | None) -> bool:
    if not value:
        return True
    normalized = value.strip().lower()
    return not normalized or normalized in _PLACEHOLDER_SECRETS


class Settings(BaseSettings):
    # Required fields, read from the environment or .env
    database_url: str = Field(..., alias="DATABASE_URL")
    jwt_secret_key: str = Field(..., alias="JWT_SECRET_KEY")

    # Optional fields
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    jwt_expires_minutes: int = Field(default=7 * 24 * 60, alias="JWT_EXPIRES_MINUTES", gt=0)
    environment: Literal["development", "production", "test"] = Field(default="development", alias="APP_ENV")
    app_name: str = Field(default="Social Feed Backend", alias="APP_NAME")
    api_version: str = Field(default="1.0.0", alias="API_VERSION")
    server_port: int = Field(default=8000, alias="SERVER_PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    cookie_name: str = Field(default="token", alias="COOKIE_NAME")
    cookie_secure: bool = Field(default=False, alias="COOKIE_SECURE")
    cookie_samesite: Literal["lax", "strict", "none"] = Field(default="lax", alias="COOKIE_SAMESITE")
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")
    auth_rate_limit: str | None = Field(default=None, alias="AUTH_RATE_LIMIT")

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("jwt_secret_key")
    @classmethod
    def _reject_placeholder_secret(cls, value: str) -> str:
        if is_placeholder(value):
            raise ValueError("JWT_SECRET_KEY is required and must not use placeholder defaults")
        secret = value.strip()
        if len(secret) < MIN_JWT_SECRET_LENGTH:
            raise ValueError(f"JWT_SECRET_KEY must be at least {MIN_JWT_SECRET_LENGTH} characters long")
        return secret

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def auth_rate_limit_value(self) -> str:
        """Limit applied per client to the login and register routes."""
        if self.auth_rate_limit:
            return self.auth_rate_limit
        return "100 per 15 minutes" if self.environment == "development" else "5 per 15 minutes"

    @property
    def cookie_max_age(self) -> int:
        return self.jwt_expires_minutes * 60

    def cors_origin_list(self) -> list[str]:
        origins = [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
        return origins or ["*"]


@lru_cache()
def get_settings() -> Settings:
    return Settings()


__all__ = ["MIN_JWT_SECRET_LENGTH", "Settings", "get_settings", "is_placeholder"]
