"""Environment-based configuration using pydantic-settings.

Provides type-safe, validated configuration from environment variables
with sensible defaults. Supports .env files and nested configuration.

Example:
    >>> from futurekit.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.retry.max_attempts
    3
    >>> settings.logging.level
    'INFO'

    # Or with environment variables:
    # FUTUREKIT_RETRY_MAX_ATTEMPTS=5
    # FUTUREKIT_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, PositiveFloat, computed_field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FUTUREKIT_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"
    colors: bool | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class RetrySettings(BaseSettings):
    """Default retry configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FUTUREKIT_RETRY_",
        extra="ignore",
    )

    max_attempts: Annotated[int, Field(ge=1, le=100)] = 3
    strategy: Literal["constant", "linear", "exponential"] = "exponential"
    base_delay: PositiveFloat = Field(default=1.0, description="Base delay in seconds")
    max_delay: PositiveFloat = Field(default=30.0, description="Maximum delay in seconds")
    multiplier: PositiveFloat = Field(default=2.0, description="Growth factor (exponential) or increment (linear)")

    @model_validator(mode="after")
    def _check_bounds(self) -> RetrySettings:
        if self.base_delay > self.max_delay:
            raise ValueError(f"base_delay ({self.base_delay}) exceeds max_delay ({self.max_delay})")
        return self


class FuturekitSettings(BaseSettings):
    """Root settings for futurekit.

    Loads configuration from environment variables with FUTUREKIT_ prefix.

    Example environment variables:
        FUTUREKIT_DEBUG=true
        FUTUREKIT_LOG_LEVEL=DEBUG
        FUTUREKIT_LOG_FORMAT=json
        FUTUREKIT_RETRY_MAX_ATTEMPTS=5
        FUTUREKIT_RETRY_STRATEGY=linear
    """

    model_config = SettingsConfigDict(
        env_prefix="FUTUREKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")
    environment: Literal["development", "staging", "production"] = "development"

    # Nested settings (loaded with FUTUREKIT_LOG_, FUTUREKIT_RETRY_)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    retry: RetrySettings = Field(default_factory=RetrySettings)

    @field_validator("environment", mode="before")
    @classmethod
    def _normalize_env(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v

    @computed_field
    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache(maxsize=1)
def get_settings() -> FuturekitSettings:
    """Get the global settings instance (cached)."""
    return FuturekitSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
