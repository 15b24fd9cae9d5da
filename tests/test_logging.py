"""
Tests for logging configuration.
"""

import json
import logging
from pathlib import Path
from typing import Iterator

import pytest

from geocoord.core.coords import parse
from geocoord.core.logging_config import (
    ColoredFormatter,
    JSONFormatter,
    LogContext,
    add_log_context,
    get_log_level,
    get_logger,
    setup_logging,
)


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def _make_record(msg: str = "Test message", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="geocoord.test",
        level=level,
        pathname="/path/to/file.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestLoggingConfig:
    """Tests for logging configuration."""

    def test_get_log_level(self):
        """Test log level name conversion."""
        assert get_log_level("DEBUG") == logging.DEBUG
        assert get_log_level("INFO") == logging.INFO
        assert get_log_level("WARNING") == logging.WARNING
        assert get_log_level("ERROR") == logging.ERROR
        assert get_log_level("CRITICAL") == logging.CRITICAL
        assert get_log_level("invalid") == logging.INFO

    def test_get_log_level_case_insensitive(self):
        """Test log level is case insensitive."""
        assert get_log_level("debug") == logging.DEBUG
        assert get_log_level("DeBuG") == logging.DEBUG

    def test_setup_logging_console_only(self, restore_root_logger):
        """Test logging setup with console handler only."""
        setup_logging(log_level="DEBUG", enable_console=True, json_logs=False)

        logger = logging.getLogger()
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_setup_logging_json_file(self, restore_root_logger, tmp_path: Path):
        """Test parser records reach a JSON log file."""
        log_file = tmp_path / "logs" / "geocoord.log"
        setup_logging(log_level="DEBUG", log_file=log_file, json_logs=True, enable_console=False)

        with LogContext(request_id="abc123"):
            parse("19.856, 99.817")

        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        records = [json.loads(line) for line in lines]

        assert records[0]["message"].startswith("Logging initialized")
        parse_records = [r for r in records if r["logger"].startswith("geocoord.core.coords")]
        assert parse_records
        assert all(r["request_id"] == "abc123" for r in parse_records)

    def test_log_context(self):
        """Test LogContext context manager."""
        old_factory = logging.getLogRecordFactory()

        with LogContext(request_id="123", coordinate="47N 500000 2200000"):
            factory = logging.getLogRecordFactory()
            record = factory(
                name="test",
                level=logging.INFO,
                pathname="",
                lineno=0,
                msg="test",
                args=(),
                exc_info=None,
                func=None,
                sinfo=None,
            )
            assert record.request_id == "123"
            assert record.coordinate == "47N 500000 2200000"

        assert logging.getLogRecordFactory() == old_factory

    def test_add_log_context(self):
        """Test add_log_context helper function."""
        context = add_log_context(request_id="abc", operation="parse")
        assert isinstance(context, LogContext)
        assert context.context == {"request_id": "abc", "operation": "parse"}

    def test_get_logger(self):
        """Test get_logger returns a named logger."""
        assert get_logger("geocoord.core.coords").name == "geocoord.core.coords"


class TestJSONFormatter:
    """Tests for JSON log formatter."""

    def test_json_formatter_basic(self):
        """Test JSON formatter with basic record."""
        data = json.loads(JSONFormatter().format(_make_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "geocoord.test"
        assert data["message"] == "Test message"
        assert data["line"] == 42

    def test_json_formatter_with_extra_fields(self):
        """Test JSON formatter with extra fields."""
        record = _make_record()
        record.detected_format = "utm"
        record.zone = 47

        data = json.loads(JSONFormatter().format(record))

        assert data["detected_format"] == "utm"
        assert data["zone"] == 47

    def test_json_formatter_with_exception(self):
        """Test exception info is included."""
        try:
            raise ValueError("boom")
        except ValueError:
            import sys

            record = logging.LogRecord(
                name="geocoord.test",
                level=logging.ERROR,
                pathname="",
                lineno=0,
                msg="failed",
                args=(),
                exc_info=sys.exc_info(),
            )

        data = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in data["exception"]


class TestColoredFormatter:
    """Tests for the development console formatter."""

    def test_levelname_restored(self):
        """Test the record is left uncolored for other handlers."""
        record = _make_record(level=logging.WARNING)
        formatted = ColoredFormatter("%(levelname)s %(message)s").format(record)

        assert "\033[33m" in formatted
        assert record.levelname == "WARNING"
