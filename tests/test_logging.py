"""Tests for logging setup and structured events."""

from __future__ import annotations

import json
import logging

from gloss_word.config import LoggingConfig
from gloss_word.logging_utils import JsonlFormatter, log_event, setup_logging


def test_file_logging_writes_jsonl_events(tmp_path):
    cfg = LoggingConfig(level="DEBUG", console=False, file=True, format="jsonl", filename="gloss.jsonl")
    logger = setup_logging(cfg, tmp_path)

    log_event(logger, "Cache hit", event="cache_hit", word="atavism")
    for handler in logger.handlers:
        handler.flush()

    lines = (tmp_path / "gloss.jsonl").read_text(encoding="utf-8").splitlines()
    payload = json.loads(lines[-1])
    assert payload["message"] == "Cache hit"
    assert payload["event"] == "cache_hit"
    assert payload["word"] == "atavism"
    assert payload["level"] == "INFO"


def test_level_filters_events(tmp_path):
    cfg = LoggingConfig(level="WARNING", console=False, file=True, filename="gloss.log", format="plain")
    logger = setup_logging(cfg, tmp_path)

    log_event(logger, "quiet", event="debug_only")
    log_event(logger, "loud", logging.WARNING, event="warning")
    for handler in logger.handlers:
        handler.flush()

    text = (tmp_path / "gloss.log").read_text(encoding="utf-8")
    assert "loud" in text
    assert "quiet" not in text


def test_no_handlers_configured_falls_back_to_null_handler():
    logger = setup_logging(LoggingConfig(console=False, file=False), None)
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.NullHandler)


def test_log_event_ignores_missing_logger():
    log_event(None, "nothing happens", event="noop")


def test_jsonl_formatter_keeps_extras_only():
    record = logging.LogRecord("gloss_word", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    record.event = "greeting"
    payload = json.loads(JsonlFormatter().format(record))

    assert payload["message"] == "hello world"
    assert payload["event"] == "greeting"
    assert "lineno" not in payload
