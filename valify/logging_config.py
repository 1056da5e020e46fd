"""Structured logging setup.

The library only ever calls ``structlog.get_logger()``; applications opt in to
rendering by calling ``configure_logging()`` once at startup.
"""

import logging
from typing import Optional

import structlog

from valify.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog processors and the minimum level from settings.

    Args:
        settings: Explicit settings. If None, uses the cached environment settings.
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.LOG_LEVEL.upper())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
