"""Library configuration via environment variables.

Uses pydantic-settings to load config from env vars with SLOTSIGNAL_ prefix.
Only ambient concerns live here (logging, tracing). Signal behavior itself
is configured per instance in code, never from the environment.
"""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """All library configuration. Set via SLOTSIGNAL_* env vars."""

    # Logging
    log_level: str = "INFO"
    log_json: bool = False  # JSON lines instead of console output

    # Emit signal.emit_started / signal.emit_finished debug events
    trace_emissions: bool = False

    model_config = {"env_prefix": "SLOTSIGNAL_"}

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept any standard level name, case-insensitive."""
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(
                f"SLOTSIGNAL_LOG_LEVEL must be a standard level name, got {value!r}"
            )
        return level


# Singleton — import this everywhere
settings = Settings()
