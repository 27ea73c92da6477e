"""Configuration models for the toolkit."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SearchConfig(BaseModel):
    """Default options applied by the search index."""

    default_limit: int = Field(default=10, ge=1)
    default_threshold: float = Field(default=1)


class RateLimitConfig(BaseModel):
    """Fixed-window quota: `limit` requests per `window_seconds`."""

    limit: int = Field(gt=0)
    window_seconds: int = Field(gt=0)


class RateLimits:
    """Named quota tiers used by the API routes."""

    # 100 requests per minute
    standard: ClassVar[RateLimitConfig] = RateLimitConfig(limit=100, window_seconds=60)
    # expensive operations, 20 requests per minute
    strict: ClassVar[RateLimitConfig] = RateLimitConfig(limit=20, window_seconds=60)
    # cheap operations, 300 requests per minute
    generous: ClassVar[RateLimitConfig] = RateLimitConfig(limit=300, window_seconds=60)


class Settings(BaseSettings):
    """Process settings, read from `TXTX_*` environment variables or `.env`."""

    _ALLOWED_APP_ENVS: ClassVar[set[str]] = {"local", "staging", "production"}

    app_env: str = "local"
    log_level: str = "INFO"
    api_version: str = "1.0.0"
    rate_limit_cleanup_seconds: int = Field(default=60, gt=0)

    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        if value not in cls._ALLOWED_APP_ENVS:
            allowed = ", ".join(sorted(cls._ALLOWED_APP_ENVS))
            raise ValueError(f"app_env must be one of: {allowed}")
        return value

    model_config = SettingsConfigDict(
        env_prefix="TXTX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
