"""Logging for myfinance.

The CLI calls ``configure_logging`` once at startup. Everything else gets its
logger from ``get_logger`` and stays silent until then. Records go to stderr
because stdout carries the stdio tool transport.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

_PKG_LOGGER_NAME = "myfinance"
_CONFIGURED = False

LOG_LEVEL_ENV = "MYFINANCE_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _parse_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
        return logging.INFO
    env_val = os.getenv(LOG_LEVEL_ENV)
    if env_val:
        return _parse_level(env_val)
    return logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Send myfinance log records to ``stream`` at ``level``.

    ``level`` may be a number or a level name. When it is None the
    MYFINANCE_LOG_LEVEL environment variable decides, and INFO is the
    fallback. Later calls do nothing.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)

    # The NullHandler from get_logger is no longer needed
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    level_no = _parse_level(level)
    handler = logging.StreamHandler(stream)
    handler.setLevel(level_no)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))

    logger.setLevel(level_no)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return the named logger; unconfigured, the package logs nowhere."""
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
