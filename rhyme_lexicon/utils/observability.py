"""Logging, metrics and tracing helpers shared by the lexicon components.

Metrics are Prometheus collectors registered on the default registry and
spans come from the globally configured OpenTelemetry tracer provider, so
both stay inert until the host application exports them.
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, Optional

from opentelemetry import trace
from prometheus_client import REGISTRY, Counter, Histogram

_TRACER_NAME = "rhyme_lexicon"


class StructuredLoggerAdapter(logging.LoggerAdapter):
    """Simple adapter that renders structured context inline with messages."""

    def bind(self, **context: Any) -> "StructuredLoggerAdapter":
        merged = dict(self.extra)
        merged.update(context)
        return StructuredLoggerAdapter(self.logger, merged)

    def process(self, msg: str, kwargs: Dict[str, Any]):
        event_context: Dict[str, Any] = dict(self.extra)
        provided = kwargs.pop("context", None)
        if isinstance(provided, dict):
            event_context.update(provided)
        if event_context:
            try:
                payload = json.dumps(event_context, sort_keys=True, default=str)
            except TypeError:
                payload = json.dumps({k: str(v) for k, v in event_context.items()})
            msg = f"{msg} | {payload}"
        return msg, kwargs


def get_logger(name: str, **context: Any) -> StructuredLoggerAdapter:
    """Return a project logger with optional bound context."""

    base_logger = logging.getLogger(name)
    return StructuredLoggerAdapter(base_logger, context)


def _registered(name: str, factory, *args, **kwargs):
    try:
        return factory(name, *args, **kwargs)
    except ValueError:
        # Already registered, e.g. when the module is re-imported under pytest.
        collector = REGISTRY._names_to_collectors.get(name)  # type: ignore[attr-defined]
        if collector is None:
            raise
        return collector


def create_counter(
    name: str,
    documentation: str,
    label_names: Optional[Iterable[str]] = None,
) -> Counter:
    """Create (or reuse) a Prometheus counter on the default registry."""

    return _registered(name, Counter, documentation, labelnames=tuple(label_names or ()))


def create_histogram(
    name: str,
    documentation: str,
    label_names: Optional[Iterable[str]] = None,
) -> Histogram:
    """Create (or reuse) a Prometheus histogram on the default registry."""

    return _registered(name, Histogram, documentation, labelnames=tuple(label_names or ()))


QUERY_COUNTER = create_counter(
    "rhyme_lexicon_queries_total",
    "Lexicon queries executed, by operation.",
    ("operation",),
)
QUERY_LATENCY = create_histogram(
    "rhyme_lexicon_query_seconds",
    "Wall-clock time spent scanning the lexicon, by operation.",
    ("operation",),
)
ENTRIES_LOADED = create_counter(
    "rhyme_lexicon_entries_loaded_total",
    "Pronunciation entries loaded into memory.",
)


@contextmanager
def observe_query(operation: str) -> Iterator[None]:
    """Count ``operation`` and record how long its body takes."""

    QUERY_COUNTER.labels(operation=operation).inc()
    start = time.perf_counter()
    try:
        yield
    finally:
        QUERY_LATENCY.labels(operation=operation).observe(time.perf_counter() - start)


@contextmanager
def start_span(name: str, attributes: Optional[Dict[str, Any]] = None):
    """Start an OpenTelemetry span, recording and re-raising any exception."""

    tracer = trace.get_tracer(_TRACER_NAME)
    with tracer.start_as_current_span(name, record_exception=False) as span:
        if attributes:
            add_span_attributes(span, attributes)
        try:
            yield span
        except Exception as error:
            record_exception(span, error)
            raise


def add_span_attributes(span: Any, attributes: Dict[str, Any]) -> None:
    """Attach ``attributes`` to ``span``."""

    if span is None:
        return
    for key, value in attributes.items():
        if not isinstance(key, str) or value is None:
            continue
        span.set_attribute(key, value)


def record_exception(span: Any, error: BaseException) -> None:
    """Log an exception to an active span."""

    if span is None:
        return
    span.record_exception(error)
    span.set_attribute("error", True)


__all__ = [
    "StructuredLoggerAdapter",
    "get_logger",
    "create_counter",
    "create_histogram",
    "observe_query",
    "start_span",
    "add_span_attributes",
    "record_exception",
    "QUERY_COUNTER",
    "QUERY_LATENCY",
    "ENTRIES_LOADED",
]
