"""Log level and handler setup for the ``rhyme_lexicon`` logger tree."""

from __future__ import annotations

import logging
import os
from typing import IO, Optional

LOG_LEVEL_ENV = "RHYME_LEXICON_LOG_LEVEL"
PACKAGE_LOGGER = "rhyme_lexicon"

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_handler: Optional[logging.Handler] = None


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    try:
        return int(level)
    except ValueError:
        return getattr(logging, level.strip().upper(), logging.INFO)


def apply_environment_level() -> Optional[int]:
    """Set the package logger level from ``RHYME_LEXICON_LOG_LEVEL``.

    Runs when :mod:`rhyme_lexicon` is imported. Leaves the level alone when
    the variable is unset or empty.
    """

    raw = os.environ.get(LOG_LEVEL_ENV)
    if not raw:
        return None
    level = _resolve_level(raw)
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
    return level


def configure_logging(
    level: Optional[str | int] = None,
    *,
    stream: Optional[IO[str]] = None,
) -> logging.Handler:
    """Send ``rhyme_lexicon`` records to ``stream`` (stderr by default).

    Only the package logger gets the handler, so the host's root logging is
    untouched. Repeated calls adjust the level and reuse the first handler.
    """

    global _handler

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is None:
        _handler = logging.StreamHandler(stream)
        _handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
        logger.addHandler(_handler)

    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV) or logging.INFO
    logger.setLevel(_resolve_level(level))
    return _handler


__all__ = ["LOG_LEVEL_ENV", "PACKAGE_LOGGER", "apply_environment_level", "configure_logging"]
