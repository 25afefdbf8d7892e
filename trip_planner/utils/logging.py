"""
Logging utilities for the Trip Planner backend.

Module loggers share one stream handler and take their level from
settings.LOG_LEVEL, so `LOG_LEVEL=DEBUG` in .env turns on parser and
upstream detail everywhere at once.

SECURITY RULES:
- NEVER log the upstream API key or the Authorization header
- NEVER log full prompts (they carry user travel details); use preview()

Acceptable logging:
- High-level events (e.g., "POST /api/chat called", "Upstream returned 200")
- Upstream error bodies (they come from the provider, not the user)
- Parser decisions (e.g., "Parsed 4 recommendations from plain text")
"""

import logging
from typing import Optional, Union

from trip_planner.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PREVIEW_LENGTH = 50

_handler: Optional[logging.Handler] = None


def _shared_handler() -> logging.Handler:
    global _handler

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    return _handler


def resolve_level(level: Union[int, str, None]) -> int:
    """Turn a level name ("debug", "INFO") or number into a logging level."""
    if level is None:
        level = settings.LOG_LEVEL
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def get_logger(name: str, level: Union[int, str, None] = None) -> logging.Logger:
    """
    Get a logger for a trip_planner module.

    Args:
        name: Module name (typically __name__)
        level: Optional override; defaults to settings.LOG_LEVEL

    Usage:
        >>> from trip_planner.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Relaying prompt upstream")
    """
    logger = logging.getLogger(name)
    logger.setLevel(resolve_level(level))

    handler = _shared_handler()
    if handler not in logger.handlers:
        logger.addHandler(handler)
    # The root logger configured in main.py would print every line twice
    logger.propagate = False

    return logger


def preview(text: str, length: int = PREVIEW_LENGTH) -> str:
    """Return a short, single-line preview of user text for log messages."""
    flat = " ".join(text.split())
    if len(flat) > length:
        return flat[:length] + "..."
    return flat
