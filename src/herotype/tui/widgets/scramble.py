"""Scramble headline widget."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from textual.widgets import Static

from herotype.engine.scramble import ScrambleEffect
from herotype.tui.scheduling import TextualScheduler

if TYPE_CHECKING:
    import random
    from collections.abc import Mapping

    from herotype.config import ScrambleConfig
    from herotype.engine.scheduling import Scheduler


class ScrambleLabel(Static):
    """Static whose text settles out of random symbols.

    On mount it scrambles its own text into itself, so the headline animates
    once on load without changing.
    """

    DEFAULT_CSS = """
    ScrambleLabel {
        width: auto;
        height: auto;
        text-style: bold;
    }
    """

    def __init__(
        self,
        text: str,
        *,
        config: ScrambleConfig | Mapping[str, Any] | None = None,
        scheduler: Scheduler | None = None,
        rng: random.Random | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(text, markup=False, **kwargs)
        self.target_text = text
        self.shown_text = text
        self._config = config
        self._scheduler = scheduler
        self._rng = rng
        self.effect: ScrambleEffect | None = None

    def on_mount(self) -> None:
        self.effect = ScrambleEffect(
            self,
            self._scheduler or TextualScheduler(self),
            self._config,
            text=self.target_text,
            rng=self._rng,
        )
        self.effect.set_text(self.target_text)

    def on_unmount(self) -> None:
        if self.effect is not None:
            self.effect.stop()

    def scramble_to(self, text: str) -> None:
        """Scramble from the current headline to ``text``."""
        self.target_text = text
        if self.effect is not None:
            self.effect.set_text(text)

    def set_text(self, text: str) -> None:
        self.shown_text = text
        self.update(text)
