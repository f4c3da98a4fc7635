"""Runtime settings loaded from environment variables and ``.env`` files."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ShoberSettings(BaseSettings):
    """Settings for the shobergen API server.

    Environment Variables:
        SHOBER_HOST: Interface the API binds to (default: 127.0.0.1)
        SHOBER_PORT: Port the API binds to (default: 8000)
        SHOBER_RANDOM_SEED: Seed for a shared random source. Unset means
            the process-wide ``random`` module is used.
        SHOBER_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL (default: INFO)
        SHOBER_LOG_FORMAT: text or json (default: text)

    Example:
        >>> settings = ShoberSettings()  # Loads from environment
        >>> settings = ShoberSettings(_env_file=".env.test")
    """

    model_config = SettingsConfigDict(
        env_prefix="SHOBER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="127.0.0.1", description="Interface to bind")
    port: int = Field(default=8000, ge=1, le=65535, description="Port to bind")
    random_seed: int | None = Field(
        default=None,
        description="Seed for deterministic breeding and generation",
    )
    log_level: str = Field(default="INFO", description="Log level name")
    log_format: Literal["text", "json"] = Field(default="text", description="Log output format")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Upper-case the level and accept WARN as an alias."""
        level = str(v).upper()
        if level == "WARN":
            level = "WARNING"
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: Any) -> str:
        return str(v).lower()

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for ``log_level``."""
        return logging.getLevelNamesMapping()[self.log_level]


@lru_cache
def get_settings() -> ShoberSettings:
    """Get cached settings singleton.

    To reload settings, call ``get_settings.cache_clear()`` first.
    """
    settings = ShoberSettings()
    logger.info(
        "Loaded settings: host=%s port=%d seeded=%s",
        settings.host,
        settings.port,
        settings.random_seed is not None,
    )
    return settings
