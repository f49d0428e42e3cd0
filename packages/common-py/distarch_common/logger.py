"""
distarch Logging

Thin wrapper around the standard library ``logging`` module so every distarch
module logs through the same ``distarch`` logger hierarchy and format.

Usage:
    from distarch_common.logger import get_logger

    logger = get_logger(__name__)
    logger.debug("translated requirement", extra={"package": "perl-moose"})
"""

import logging
from typing import Optional, Union

from .config import Settings, get_settings

ROOT_LOGGER_NAME = "distarch"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _resolve_level(level: Union[int, str, None], settings: Settings) -> int:
    """Resolve a level from the argument, then the settings, then INFO."""
    if isinstance(level, int):
        return level
    for candidate in (level, settings.log_level):
        if isinstance(candidate, str) and candidate.strip():
            resolved = logging.getLevelName(candidate.strip().upper())
            if isinstance(resolved, int):
                return resolved
    if settings.debug:
        return logging.DEBUG
    return logging.INFO


class DistArchLogger(logging.LoggerAdapter):
    """Logger adapter that merges per-call ``extra`` into the bound context."""

    def process(self, msg, kwargs):
        extra = dict(self.extra or {})
        extra.update(kwargs.get("extra") or {})
        kwargs["extra"] = extra
        return msg, kwargs


def configure_logging(
    level: Union[int, str, None] = None, settings: Optional[Settings] = None
) -> int:
    """
    Configure the ``distarch`` logger hierarchy.

    Adds a stream handler once; later calls only change the level.

    Args:
        level: Explicit level name or number
        settings: Source of ``log_level`` and ``debug`` (read from the
            environment if omitted)

    Returns:
        The numeric level that was applied
    """
    resolved = _resolve_level(level, settings or get_settings())
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(resolved)
    return resolved


def get_logger(name: Optional[str] = None, **context) -> DistArchLogger:
    """
    Get a logger under the ``distarch`` hierarchy.

    Args:
        name: Usually ``__name__`` of the calling module
        **context: Fields bound to every record logged through the adapter
    """
    if not name:
        logger_name = ROOT_LOGGER_NAME
    elif name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        logger_name = name
    else:
        logger_name = f"{ROOT_LOGGER_NAME}.{name}"
    return DistArchLogger(logging.getLogger(logger_name), context)
