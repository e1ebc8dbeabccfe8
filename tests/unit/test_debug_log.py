"""Unit tests for debug logging."""

from __future__ import annotations

import logging

import pytest

from herotype import debug_log
from herotype.debug_log import (
    DebugLogHandler,
    HerotypeLogger,
    LogBuffer,
    LogEntry,
    LogSource,
    log_buffer,
)
from herotype.limits import MAX_LOG_MESSAGE_LENGTH

pytestmark = pytest.mark.unit


class TestLogTruncation:
    """Tests for log message truncation."""

    def test_log_truncates_oversized_messages(self):
        """Very large log messages should be truncated to prevent memory bloat."""
        log_buffer.clear()
        logger = HerotypeLogger()
        large_message = "x" * 10000

        logger.info(large_message)

        assert len(log_buffer) == 1
        logged_message = log_buffer[0].message
        assert len(logged_message) <= MAX_LOG_MESSAGE_LENGTH + 20
        assert "... [truncated]" in logged_message

    def test_log_preserves_small_messages(self):
        log_buffer.clear()
        logger = HerotypeLogger()

        logger.info("Typewriter mounted")

        assert len(log_buffer) == 1
        assert log_buffer[0].message == "Typewriter mounted"

    def test_log_truncates_at_exact_boundary(self):
        """Messages exactly at the limit should not be truncated."""
        log_buffer.clear()
        exact_message = "y" * MAX_LOG_MESSAGE_LENGTH

        HerotypeLogger().info(exact_message)

        assert log_buffer[0].message == exact_message


class TestHerotypeLogger:
    def test_keyword_arguments_rendered(self):
        log_buffer.clear()

        HerotypeLogger().debug("Typewriter mounted", phrases=3)

        entry = log_buffer[0]
        assert entry.message == "Typewriter mounted phrases=3"
        assert entry.level == "DEBUG"
        assert entry.source is LogSource.TEXTUAL

    def test_call_logs_at_info(self):
        log_buffer.clear()

        HerotypeLogger()("hello")

        assert log_buffer[0].level == "INFO"


class TestDebugLogHandler:
    def test_captures_python_logging(self):
        log_buffer.clear()
        logger = logging.getLogger("herotype.tests.capture")
        handler = DebugLogHandler()
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        try:
            logger.warning("Resize burst settled at width %s", 640)
        finally:
            logger.removeHandler(handler)

        entry = log_buffer[-1]
        assert entry.level == "WARNING"
        assert entry.source is LogSource.LOGGING
        assert entry.message == "herotype.tests.capture: Resize burst settled at width 640"


class TestSetupDebugLogging:
    def test_is_idempotent(self, monkeypatch: pytest.MonkeyPatch):
        package_logger = logging.getLogger("herotype")
        monkeypatch.setattr(debug_log, "_debug_logging_initialized", False)
        monkeypatch.setattr(package_logger, "handlers", [])

        debug_log.setup_debug_logging()
        debug_log.setup_debug_logging()

        handlers = [h for h in package_logger.handlers if isinstance(h, DebugLogHandler)]
        assert len(handlers) == 1


class TestBufferManagement:
    def test_clear_bumps_generation(self):
        generation = log_buffer.generation
        HerotypeLogger().info("something")

        log_buffer.clear()

        assert len(log_buffer) == 0
        assert log_buffer.generation == generation + 1

    def test_export_writes_entries(self, tmp_path):
        log_buffer.clear()
        logger = HerotypeLogger()
        logger.info("first")
        logger.error("second")

        out = tmp_path / "logs" / "export.log"
        count = log_buffer.export(out)

        assert count == 2
        content = out.read_text(encoding="utf-8")
        assert "# Total entries: 2" in content
        assert "[TX] [INFO] first" in content
        assert "[TX] [ERROR] second" in content


class TestLogBuffer:
    def test_since_returns_entries_after_offset(self):
        buffer = LogBuffer()
        for name in ("a", "b", "c"):
            buffer.append(LogEntry("INFO", name, 0.0, LogSource.TEXTUAL))

        assert [entry.message for entry in buffer.since(1)] == ["b", "c"]
        assert buffer.since(3) == []

    def test_bounded(self):
        buffer = LogBuffer(maxlen=2)
        for name in ("a", "b", "c"):
            buffer.append(LogEntry("INFO", name, 0.0, LogSource.LOGGING))

        assert [entry.message for entry in buffer] == ["b", "c"]
        assert buffer[0].tag == "[PY]"
