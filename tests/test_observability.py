import io
import logging

import pytest
from prometheus_client import REGISTRY

from rhyme_lexicon.utils import (
    apply_environment_level,
    configure_logging,
    create_counter,
    get_logger,
)
from rhyme_lexicon.utils import logging_config
from rhyme_lexicon.utils.observability import QUERY_COUNTER


def _query_count(operation: str) -> float:
    value = REGISTRY.get_sample_value(
        "rhyme_lexicon_queries_total", {"operation": operation}
    )
    return value or 0.0


def test_structured_logger_renders_bound_context(caplog):
    logger = get_logger("rhyme_lexicon.tests").bind(component="probe")
    caplog.set_level(logging.INFO, logger="rhyme_lexicon.tests")

    logger.info("Probe finished", context={"matches": 3})

    assert caplog.records[-1].getMessage() == (
        'Probe finished | {"component": "probe", "matches": 3}'
    )


def test_queries_are_counted_per_operation(lexicon):
    before_search = _query_count("search")
    before_rhymes = _query_count("rhymes")

    lexicon.rhymes("cat")
    lexicon.search("AE1")

    # A rhyme lookup runs one search per pronunciation.
    assert _query_count("rhymes") == before_rhymes + 1
    assert _query_count("search") == before_search + 2


def test_query_logging_at_debug(caplog, lexicon):
    caplog.set_level(logging.DEBUG, logger="rhyme_lexicon")

    lexicon.search_stresses("01")

    messages = [record.getMessage() for record in caplog.records]
    assert any(
        "Lexicon scan finished" in message and '"operation": "search_stresses"' in message
        for message in messages
    )


def test_create_counter_reuses_registered_collector():
    assert create_counter("rhyme_lexicon_queries_total", "duplicate", ("operation",)) is QUERY_COUNTER


@pytest.fixture
def package_logger(monkeypatch):
    logger = logging.getLogger(logging_config.PACKAGE_LOGGER)
    monkeypatch.setattr(logging_config, "_handler", None)
    logger.setLevel(logging.NOTSET)
    yield logger
    if logging_config._handler is not None:
        logger.removeHandler(logging_config._handler)
    logger.setLevel(logging.NOTSET)


def test_apply_environment_level_sets_package_logger(monkeypatch, package_logger):
    monkeypatch.setenv(logging_config.LOG_LEVEL_ENV, "debug")

    assert apply_environment_level() == logging.DEBUG
    assert package_logger.level == logging.DEBUG


def test_apply_environment_level_without_variable(monkeypatch, package_logger):
    monkeypatch.delenv(logging_config.LOG_LEVEL_ENV, raising=False)

    assert apply_environment_level() is None
    assert package_logger.level == logging.NOTSET


def test_configure_logging_attaches_one_package_handler(monkeypatch, package_logger):
    monkeypatch.delenv(logging_config.LOG_LEVEL_ENV, raising=False)
    stream = io.StringIO()

    handler = configure_logging(stream=stream)
    assert configure_logging("WARNING") is handler

    assert package_logger.handlers.count(handler) == 1
    assert package_logger.level == logging.WARNING
    assert handler not in logging.getLogger().handlers

    get_logger("rhyme_lexicon.tests").warning("Scan slow", context={"entries": 2})

    assert "WARNING | rhyme_lexicon.tests | Scan slow | {\"entries\": 2}" in stream.getvalue()
