"""
Package configuration using Pydantic Settings.

Settings are read from ``OUTCOME_``-prefixed environment variables and an
optional ``.env`` file. They only affect diagnostics; the behavior of the
containers themselves is not configurable.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class OutcomeSettings(BaseSettings):
    """Diagnostic settings for the outcome package."""

    model_config = SettingsConfigDict(
        env_prefix="OUTCOME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Minimum log level"
    )
    json_logs: bool = Field(default=False, description="Render logs as JSON")
    log_events: bool = Field(
        default=False,
        description="Emit debug events for captured exceptions and failed unwraps",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


@lru_cache
def get_settings() -> OutcomeSettings:
    """
    Get cached package settings.

    Returns:
        Configured OutcomeSettings instance.
    """
    return OutcomeSettings()
