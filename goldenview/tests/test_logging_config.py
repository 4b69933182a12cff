"""
Tests for logging setup.
"""

import json
import logging

from goldenview.logging_config import TraceIDFilter, build_formatter, get_logger, setup_logging


def make_record(**extra):
    record = logging.LogRecord("goldenview.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_format_fields():
    record = make_record(trace_id="run1")
    out = json.loads(build_formatter("json").format(record))
    assert out["message"] == "hello world"
    assert out["level"] == "INFO"
    assert out["logger"] == "goldenview.test"
    assert out["trace_id"] == "run1"


def test_text_format():
    record = make_record(trace_id="run1")
    out = build_formatter("text").format(record)
    assert "hello world" in out
    assert "[trace_id=run1]" in out


def test_trace_id_filter_defaults():
    record = make_record()
    assert TraceIDFilter().filter(record)
    assert record.trace_id == "N/A"


def test_setup_logging_env(monkeypatch):
    monkeypatch.setenv("GOLDENVIEW_LOG_LEVEL", "debug")
    monkeypatch.setenv("GOLDENVIEW_LOG_FORMAT", "json")
    logger = setup_logging()
    try:
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        # Calling again replaces the handler instead of stacking another one.
        setup_logging(level="bogus", log_format="text")
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
    finally:
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


def test_get_logger_trace_id():
    adapter = get_logger("goldenview.x", trace_id="abc")
    assert adapter.extra == {"trace_id": "abc"}
    assert get_logger("goldenview.x").extra == {"trace_id": "N/A"}
