"""F12 debug log viewer."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Footer, Label, RichLog, Rule

from herotype.debug_log import LogEntry, LogSource, log_buffer
from herotype.keybindings import DEBUG_LOG_BINDINGS
from herotype.paths import ensure_directories, get_debug_log_path

if TYPE_CHECKING:
    from textual.app import ComposeResult

_LEVEL_STYLES = {
    "DEBUG": "dim",
    "INFO": "blue",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold red",
}

REFRESH_INTERVAL = 0.5


def format_entry(entry: LogEntry) -> str:
    """Markup line for one entry. Message brackets are escaped."""
    ts = datetime.fromtimestamp(entry.timestamp).strftime("%H:%M:%S")
    style = _LEVEL_STYLES.get(entry.level, "white")
    source = " [PY]" if entry.source is LogSource.LOGGING else ""
    message = entry.message.replace("[", r"\[")
    return f"[{style}]{ts} [{entry.level}]{source}[/{style}] {message}"


class DebugLogModal(ModalScreen[None]):
    """Tails the debug log buffer while open."""

    BINDINGS = DEBUG_LOG_BINDINGS

    DEFAULT_CSS = """
    DebugLogModal {
        align: center middle;
    }
    #debug-log-container {
        width: 90%;
        height: 80%;
        border: round $accent;
        background: $surface;
        padding: 0 1;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self._offset = 0
        self._generation = log_buffer.generation

    @property
    def line_count(self) -> int:
        return self._offset

    def compose(self) -> ComposeResult:
        with Vertical(id="debug-log-container"):
            yield Label("Debug Logs", classes="modal-title")
            yield Label(
                "[dim]F12 or Escape to close | c to clear | s to save[/dim]",
                classes="modal-subtitle",
            )
            yield Rule()
            yield RichLog(id="debug-log", markup=True, auto_scroll=True, wrap=True)
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_log()
        self.set_interval(REFRESH_INTERVAL, self._refresh_log)

    def _refresh_log(self) -> None:
        rich_log = self.query_one("#debug-log", RichLog)
        if log_buffer.generation != self._generation or len(log_buffer) < self._offset:
            # Cleared since the last refresh
            self._generation = log_buffer.generation
            self._offset = 0
            rich_log.clear()
        for entry in log_buffer.since(self._offset):
            rich_log.write(format_entry(entry))
        self._offset = len(log_buffer)

    def action_close(self) -> None:
        self.dismiss(None)

    def action_clear_logs(self) -> None:
        log_buffer.clear()
        self._generation = log_buffer.generation
        self._offset = 0
        rich_log = self.query_one("#debug-log", RichLog)
        rich_log.clear()
        rich_log.write("[dim]Logs cleared[/dim]")

    def action_save_logs(self) -> None:
        rich_log = self.query_one("#debug-log", RichLog)
        log_path = get_debug_log_path()
        try:
            ensure_directories()
            count = log_buffer.export(log_path)
        except OSError as e:
            rich_log.write(f"[red]✗ Failed to export logs: {e}[/red]")
            return
        rich_log.write(f"[green]✓ Exported {count} log entries to {log_path}[/green]")
