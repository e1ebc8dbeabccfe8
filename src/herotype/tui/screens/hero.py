"""Hero screen: scrambled headline, typewriter line and a delayed tagline."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.containers import Center, Vertical
from textual.screen import Screen
from textual.widgets import Footer, Static

from herotype.debug_log import log
from herotype.keybindings import HERO_BINDINGS
from herotype.tui.scheduling import TerminalViewport
from herotype.tui.widgets import ScrambleLabel, TypewriterLabel

if TYPE_CHECKING:
    import random

    from textual import events
    from textual.app import ComposeResult

    from herotype.config import HerotypeConfig
    from herotype.engine.scheduling import Scheduler


class HeroScreen(Screen):
    """Landing screen hosting the text animations."""

    BINDINGS = HERO_BINDINGS

    DEFAULT_CSS = """
    HeroScreen {
        align: center middle;
    }
    #hero {
        width: 100%;
        height: auto;
        align: center middle;
    }
    #hero-headline {
        margin-bottom: 1;
        color: $accent;
    }
    #hero-tagline {
        margin-top: 1;
        color: $text-muted;
        visibility: hidden;
    }
    #hero-tagline.-shown {
        visibility: visible;
    }
    """

    def __init__(
        self,
        config: HerotypeConfig,
        *,
        scheduler: Scheduler | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__()
        self.config = config
        self._scheduler = scheduler
        self._rng = rng
        self.viewport: TerminalViewport | None = None

    def compose(self) -> ComposeResult:
        self.viewport = TerminalViewport(self.app.size.width, self.config.responsive.cell_width)
        with Vertical(id="hero"):
            with Center():
                yield ScrambleLabel(
                    self.config.hero.headline,
                    config=self.config.scramble,
                    scheduler=self._scheduler,
                    rng=self._rng,
                    id="hero-headline",
                )
            with Center():
                yield TypewriterLabel(
                    self.config.hero.phrases,
                    config=self.config.typewriter,
                    responsive=self.config.responsive,
                    viewport=self.viewport,
                    scheduler=self._scheduler,
                    id="hero-typewriter",
                )
            with Center():
                yield Static(self.config.hero.tagline, markup=False, id="hero-tagline")
        yield Footer()

    def on_mount(self) -> None:
        delay_ms = self.config.hero.reveal_delay_ms
        if self._scheduler is not None:
            self._scheduler.schedule_after(delay_ms, self._reveal_tagline)
        else:
            self.set_timer(delay_ms / 1000, self._reveal_tagline)

    def on_resize(self, event: events.Resize) -> None:
        if self.viewport is not None:
            self.viewport.resize(event.size.width)

    def _reveal_tagline(self) -> None:
        self.query_one("#hero-tagline", Static).add_class("-shown")

    def action_restart_typewriter(self) -> None:
        log.info("Typewriter restart requested")
        self.query_one("#hero-typewriter", TypewriterLabel).restart()

    def action_rescramble(self) -> None:
        headline = self.query_one("#hero-headline", ScrambleLabel)
        headline.scramble_to(headline.target_text)
