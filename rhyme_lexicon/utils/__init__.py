"""Utility helpers shared across the :mod:`rhyme_lexicon` package."""

from __future__ import annotations

from .logging_config import apply_environment_level, configure_logging
from .observability import (
    StructuredLoggerAdapter,
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    observe_query,
    record_exception,
    start_span,
)

__all__ = [
    "apply_environment_level",
    "configure_logging",
    "StructuredLoggerAdapter",
    "add_span_attributes",
    "create_counter",
    "create_histogram",
    "get_logger",
    "observe_query",
    "record_exception",
    "start_span",
]
