"""
Tests for logging setup.

Covers the JSON and text formatters, structured fields passed through
get_logger(), and handler selection from settings.
"""

import json
import logging

from assess_api.core.config import Settings
from assess_api.core.logging import (
    StructuredFormatter,
    TextFormatter,
    build_handlers,
    get_logger,
)


def make_record(extra_data=None) -> logging.LogRecord:
    record = logging.LogRecord(
        name="assess_api.services.scoring_service",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Scored %d questions",
        args=(3,),
        exc_info=None,
    )
    if extra_data is not None:
        record.extra_data = extra_data
    return record


def test_structured_formatter_fields():
    """Test that JSON lines carry service, environment and structured fields"""
    formatter = StructuredFormatter("Assessment Scoring API", "staging")

    entry = json.loads(formatter.format(make_record({"num_questions": 3, "percentage": 25.0})))

    assert entry["service"] == "Assessment Scoring API"
    assert entry["environment"] == "staging"
    assert entry["level"] == "INFO"
    assert entry["message"] == "Scored 3 questions"
    assert entry["num_questions"] == 3
    assert entry["percentage"] == 25.0
    assert entry["timestamp"].endswith("+00:00")


def test_structured_formatter_serializes_unknown_values():
    """Test that non-JSON values are written as strings"""
    formatter = StructuredFormatter("svc", "test")

    entry = json.loads(formatter.format(make_record({"indices": {5}, "key": object})))

    assert entry["indices"] == "{5}"
    assert "object" in entry["key"]


def test_text_formatter_appends_fields():
    """Test that text lines end with sorted key=value fields"""
    line = TextFormatter().format(make_record({"tolerance": 0.5, "num_questions": 3}))

    assert "Scored 3 questions" in line
    assert line.endswith("num_questions=3 tolerance=0.5")


def test_text_formatter_without_fields():
    """Test that a record without fields is left as is"""
    line = TextFormatter().format(make_record())

    assert line.endswith("Scored 3 questions")


def test_get_logger_merges_context(caplog):
    """Test that bound context and per-call fields both reach the record"""
    logger = get_logger("assess_api.tests", submission="s-1")

    with caplog.at_level(logging.INFO, logger="assess_api.tests"):
        logger.info("Scoring submission", extra_data={"num_questions": 3})

    record = caplog.records[-1]
    assert record.extra_data == {"submission": "s-1", "num_questions": 3}


def test_build_handlers_json_console_only():
    """Test that the default settings give one JSON console handler"""
    handlers = build_handlers(Settings(LOG_FORMAT="json", LOG_FILE=None))

    assert len(handlers) == 1
    assert isinstance(handlers[0].formatter, StructuredFormatter)


def test_build_handlers_with_log_file(tmp_path):
    """Test that LOG_FILE adds a file handler with the same formatter"""
    log_file = tmp_path / "logs" / "scoring.log"

    handlers = build_handlers(Settings(LOG_FORMAT="text", LOG_FILE=str(log_file)))

    try:
        assert len(handlers) == 2
        assert isinstance(handlers[1], logging.FileHandler)
        assert all(isinstance(h.formatter, TextFormatter) for h in handlers)
        assert log_file.parent.is_dir()
    finally:
        for handler in handlers:
            handler.close()
