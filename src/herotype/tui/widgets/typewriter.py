"""Typewriter label widget."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text
from textual.widgets import Static

from herotype.debug_log import log
from herotype.engine.typewriter import TypewriterEngine
from herotype.limits import CARET_BLINK_INTERVAL_MS
from herotype.tui.scheduling import TextualScheduler

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from textual.timer import Timer

    from herotype.config import ResponsiveConfig, TypewriterConfig
    from herotype.engine.responsive import Viewport
    from herotype.engine.scheduling import Scheduler
    from herotype.engine.sink import ResponsiveStyle


class TypewriterLabel(Static):
    """Static that types and deletes phrases in rotation.

    The widget is the engine's text sink. The engine starts on mount and
    stops on unmount.
    """

    DEFAULT_CSS = """
    TypewriterLabel {
        width: auto;
        max-width: 100%;
        height: auto;
        padding: 0 1;
        border-right: blank;
    }
    TypewriterLabel.-desktop {
        text-style: bold;
    }
    TypewriterLabel.-caret-on {
        border-right: outer $accent;
    }
    """

    def __init__(
        self,
        phrases: Sequence[str],
        *,
        config: TypewriterConfig | Mapping[str, Any] | None = None,
        responsive: ResponsiveConfig | Mapping[str, Any] | None = None,
        viewport: Viewport | None = None,
        scheduler: Scheduler | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__("", **kwargs)
        self._phrases = list(phrases)
        self._config = config
        self._responsive = responsive
        self._viewport = viewport
        self._scheduler = scheduler
        self._blink_timer: Timer | None = None
        self.engine: TypewriterEngine | None = None
        self.shown_text = ""
        self.caret_active = False
        self.style_record: ResponsiveStyle | None = None

    def on_mount(self) -> None:
        self.engine = TypewriterEngine(
            self._phrases,
            self,
            self._scheduler or TextualScheduler(self),
            self._config,
            responsive=self._responsive,
        )
        if self._viewport is not None:
            self.engine.bind_viewport(self._viewport)
        self.engine.start()
        log.debug("Typewriter mounted", phrases=len(self._phrases))

    def on_unmount(self) -> None:
        if self.engine is not None:
            self.engine.stop()
        self._stop_blink()

    def restart(self) -> None:
        if self.engine is not None:
            self.engine.restart()

    # TextSink

    def set_text(self, text: str) -> None:
        self.shown_text = text
        self.update(self._render_text())

    def apply_style(self, style: ResponsiveStyle) -> None:
        self.style_record = style
        self.set_class(not style.wraps, "-desktop")
        self.set_class(style.wraps, "-mobile")
        self.update(self._render_text())

    def set_caret(self, active: bool) -> None:
        if active == self.caret_active:
            return
        self.caret_active = active
        if active:
            self.add_class("-caret-on")
            self._blink_timer = self.set_interval(
                CARET_BLINK_INTERVAL_MS / 1000, self._toggle_caret
            )
        else:
            self._stop_blink()

    def _toggle_caret(self) -> None:
        self.toggle_class("-caret-on")

    def _stop_blink(self) -> None:
        if self._blink_timer is not None:
            self._blink_timer.stop()
            self._blink_timer = None
        self.remove_class("-caret-on")

    def _render_text(self) -> Text:
        wraps = self.style_record.wraps if self.style_record is not None else True
        return Text(self.shown_text, no_wrap=not wraps, overflow="fold" if wraps else "crop")
