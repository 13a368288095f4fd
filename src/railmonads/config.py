"""
Configuration — typed, validated settings loaded from environment/.env.

Uses pydantic-settings to:
  - Load from environment variables prefixed with RAILMONADS_
  - Fall back to a .env file in the working directory
  - Validate values once, when the settings are first requested

The containers themselves are pure; settings only govern observability
(what gets logged when an exception is captured) and how much of a failure
payload is rendered into or_throw() error messages.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MonadSettings(BaseSettings):
    """
    Library-wide settings.

    Load order (highest priority first):
      1. Environment variables (RAILMONADS_LOG_LEVEL, ...)
      2. .env file
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="RAILMONADS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", description="Level passed to configure_structlog")
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="console for humans, json for log shippers",
    )
    log_captured_exceptions: bool = Field(
        default=True,
        description="Emit exception_captured debug events from the catching operations",
    )
    render_payloads: bool = Field(
        default=True,
        description="Include the failure payload repr in or_throw() messages",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Reject names the stdlib logging module does not know."""
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> MonadSettings:
    """Return the process-wide settings; call get_settings.cache_clear() to reload."""
    return MonadSettings()


def library_settings() -> MonadSettings:
    """
    Settings as seen by the container operations.

    An environment that does not validate yields the defaults here, so a bad
    RAILMONADS_* value cannot escape a catching operation or or_throw().
    get_settings() and configure_structlog() still raise the ValidationError.
    """
    try:
        return get_settings()
    except ValidationError:
        return MonadSettings.model_construct()


def render_payload(payload: object) -> str:
    """Render a failure payload for an error message, honouring render_payloads."""
    if library_settings().render_payloads:
        return repr(payload)
    return f"<{type(payload).__name__}>"
