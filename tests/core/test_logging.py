"""Tests for JSON logging."""

import json
import logging
import sys
from io import StringIO

from astrovogue.core.logging import _JsonFormatter, get_logger, setup_logging


def test_setup_logging_installs_one_json_handler():
    """Calling setup_logging twice leaves a single JSON handler."""
    root = logging.getLogger()
    setup_logging()
    setup_logging()
    json_handlers = [h for h in root.handlers if isinstance(h.formatter, _JsonFormatter)]
    assert len(json_handlers) == 1


def test_setup_logging_accepts_level_name():
    setup_logging("WARNING")
    assert logging.getLogger().level == logging.WARNING
    setup_logging(logging.INFO)


def test_get_logger_returns_logger():
    """Test that get_logger returns a logger instance."""
    logger = get_logger("test")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "test"


def test_json_formatter_produces_json():
    """Test that logs are formatted as JSON."""
    logger = get_logger("test.json")
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(_JsonFormatter())
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    try:
        logger.info("Burç: Aslan")
    finally:
        logger.removeHandler(handler)

    parsed = json.loads(stream.getvalue().strip())
    assert parsed["level"] == "INFO"
    assert parsed["logger"] == "test.json"
    assert parsed["msg"] == "Burç: Aslan"


def test_json_formatter_includes_exception():
    formatter = _JsonFormatter()
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord(
            "test.exc", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
        )
    parsed = json.loads(formatter.format(record))
    assert parsed["msg"] == "failed"
    assert "RuntimeError: boom" in parsed["exc_info"]
