"""Runtime configuration modeled with Pydantic settings."""
from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mulaw_codec.codec.breakpoints import DEFAULT_START, DEFAULT_STOP

_ENV_CONFIG = SettingsConfigDict(env_file=(".env",), env_file_encoding="utf-8", extra="ignore")


class BreakpointSettings(BaseSettings):
    """Sample range scanned when reporting the round-trip breakpoint table."""

    model_config = _ENV_CONFIG

    start: int = Field(DEFAULT_START, alias="MULAW_RANGE_START")
    stop: int = Field(DEFAULT_STOP, alias="MULAW_RANGE_STOP")


class LoggingSettings(BaseSettings):
    """Logging controls for structlog + stdlib logging."""

    model_config = _ENV_CONFIG

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(None, alias="MULAW_LOG_FILE")


class Settings(BaseSettings):
    """Top-level settings object composed of domain-specific sections."""

    model_config = _ENV_CONFIG

    breakpoints: BreakpointSettings = Field(default_factory=BreakpointSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load settings once per process to avoid repeated disk reads."""

    return Settings()
