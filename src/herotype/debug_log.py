"""In-app debug log.

Entries from the ``log`` helper (which also forwards to Textual's devtools
console) and from stdlib ``logging`` under the ``herotype`` logger land in one
bounded ``LogBuffer``. The F12 modal tails it.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

from herotype.limits import MAX_LOG_LINES, MAX_LOG_MESSAGE_LENGTH

if TYPE_CHECKING:
    from collections.abc import Iterator


class LogSource(Enum):
    TEXTUAL = "TEXTUAL"
    LOGGING = "LOGGING"


@dataclass(slots=True)
class LogEntry:
    level: str
    message: str
    timestamp: float
    source: LogSource

    @property
    def tag(self) -> str:
        return "[PY]" if self.source is LogSource.LOGGING else "[TX]"


def _truncate(message: str) -> str:
    if len(message) > MAX_LOG_MESSAGE_LENGTH:
        return message[:MAX_LOG_MESSAGE_LENGTH] + "... [truncated]"
    return message


class LogBuffer:
    """Ring of the most recent entries.

    ``generation`` is bumped on every clear so a viewer holding a read offset
    can tell that its offset no longer applies.
    """

    def __init__(self, maxlen: int = MAX_LOG_LINES) -> None:
        self._entries: deque[LogEntry] = deque(maxlen=maxlen)
        self.generation = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> LogEntry:
        return self._entries[index]

    def append(self, entry: LogEntry) -> None:
        self._entries.append(entry)

    def clear(self) -> None:
        self._entries.clear()
        self.generation += 1

    def since(self, offset: int) -> list[LogEntry]:
        """Entries after the first ``offset``."""
        return list(self._entries)[offset:]

    def export(self, file_path: str | Path) -> int:
        """Write every entry to ``file_path`` and return how many were written."""
        output_path = Path(file_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        entries = list(self._entries)
        with output_path.open("w", encoding="utf-8") as f:
            f.write("# Herotype Debug Log Export\n")
            f.write(f"# Total entries: {len(entries)}\n")
            f.write(f"# Buffer generation: {self.generation}\n\n")
            for entry in entries:
                ts = datetime.fromtimestamp(entry.timestamp).strftime("%Y-%m-%d %H:%M:%S.%f")
                f.write(f"{ts[:-3]} {entry.tag} [{entry.level}] {entry.message}\n")
        return len(entries)


log_buffer = LogBuffer()


class HerotypeLogger:
    """``log.info("Typewriter mounted", phrases=3)`` style logger for the TUI."""

    def __call__(self, *args: object, **kwargs: Any) -> None:
        self.info(*args, **kwargs)

    def _log(self, level: str, *args: object, **kwargs: Any) -> None:
        output = " ".join(str(arg) for arg in args)
        if kwargs:
            fields = " ".join(f"{key}={value!r}" for key, value in kwargs.items())
            output = f"{output} {fields}" if output else fields

        log_buffer.append(LogEntry(level, _truncate(output), time.time(), LogSource.TEXTUAL))

        # No-op outside a running app
        from textual import log as textual_log

        textual_log(output)

    def debug(self, *args: object, **kwargs: Any) -> None:
        self._log("DEBUG", *args, **kwargs)

    def info(self, *args: object, **kwargs: Any) -> None:
        self._log("INFO", *args, **kwargs)

    def warning(self, *args: object, **kwargs: Any) -> None:
        self._log("WARNING", *args, **kwargs)

    def error(self, *args: object, **kwargs: Any) -> None:
        self._log("ERROR", *args, **kwargs)


class DebugLogHandler(logging.Handler):
    """Copies stdlib log records into ``log_buffer``."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            entry = LogEntry(
                record.levelname,
                _truncate(self.format(record)),
                record.created,
                LogSource.LOGGING,
            )
        except Exception:
            self.handleError(record)
            return
        log_buffer.append(entry)


_debug_logging_initialized: bool = False


def setup_debug_logging(level: int = logging.DEBUG) -> None:
    """Route the ``herotype`` logger tree (engine timing, resizes) into the buffer.

    Idempotent.
    """
    global _debug_logging_initialized

    if _debug_logging_initialized:
        return

    handler = DebugLogHandler()
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    package_logger = logging.getLogger("herotype")
    package_logger.addHandler(handler)
    package_logger.setLevel(level)

    _debug_logging_initialized = True
    log.info("Debug logging initialized - press F12 to view logs")


log = HerotypeLogger()
