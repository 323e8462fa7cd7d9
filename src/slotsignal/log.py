"""Logging setup — structlog with a level filter and console/JSON output.

Learn: the library only ever calls structlog.get_logger() and logs events
named "component.event" with keyword context. Nothing is configured on
import; applications that want our events filtered or rendered as JSON
call configure_logging() once at startup.
"""

import logging
from typing import Optional

import structlog

from slotsignal.config import Settings, settings as default_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog from settings (defaults to the env-loaded singleton)."""
    settings = settings or default_settings
    level = logging.getLevelName(settings.log_level)

    if settings.log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )
