"""Process-wide settings for pullstream."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, Field, field_validator

from pullstream.kernel.trace import Trace

ENV_PREFIX = "PULLSTREAM_"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """Library defaults.

    Attributes:
        channel_maxsize: Buffer bound for channels created without one (0 = unbounded).
        trace_enabled: Whether traces built by new_trace() record events.
        log_level: Level applied to the package logger by configure_logging().
    """

    channel_maxsize: int = Field(default=0, ge=0)
    trace_enabled: bool = True
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from PULLSTREAM_* variables, defaults for the rest."""
        environ = os.environ if environ is None else environ
        values = {
            name: environ[ENV_PREFIX + name.upper()]
            for name in cls.model_fields
            if ENV_PREFIX + name.upper() in environ
        }
        return cls.model_validate(values)

    def new_trace(self) -> Trace:
        return Trace(enabled=self.trace_enabled)


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the active settings, loading them from the environment once."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def set_settings(settings: Settings | None) -> None:
    """Replace the active settings. None reloads from the environment on next use."""
    global _settings
    _settings = settings


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured level to the package logger."""
    settings = settings or get_settings()
    logging.getLogger("pullstream").setLevel(settings.log_level)
