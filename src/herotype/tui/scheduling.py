"""Textual-backed scheduler and viewport adapters."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from textual.message_pump import MessagePump
    from textual.timer import Timer


class TextualScheduler:
    """Schedule engine steps as one-shot Textual timers on ``owner``.

    Timers die with their owner, so an unmounted widget leaves nothing behind.
    """

    def __init__(self, owner: MessagePump) -> None:
        self._owner = owner

    def schedule_after(self, delay_ms: float, callback: Callable[[], None]) -> Timer:
        return self._owner.set_timer(max(0.0, delay_ms) / 1000, callback)

    def cancel(self, handle: Timer | None) -> None:
        if handle is not None:
            handle.stop()


class TerminalViewport:
    """Viewport measured in width units: terminal columns times ``cell_width``."""

    def __init__(self, columns: int, cell_width: int = 8) -> None:
        self.columns = columns
        self.cell_width = cell_width
        self._subscribers: list[Callable[[float], None]] = []

    def current_width(self) -> float:
        return float(self.columns * self.cell_width)

    def on_resize(self, callback: Callable[[float], None]) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def resize(self, columns: int) -> None:
        """Record a new terminal width and notify subscribers."""
        self.columns = columns
        width = self.current_width()
        for callback in list(self._subscribers):
            callback(width)
