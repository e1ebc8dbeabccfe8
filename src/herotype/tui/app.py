"""Main Herotype TUI application."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from textual.app import App

from herotype.config import HerotypeConfig
from herotype.debug_log import log, setup_debug_logging
from herotype.keybindings import APP_BINDINGS
from herotype.tui.modals import DebugLogModal
from herotype.tui.screens import HeroScreen

if TYPE_CHECKING:
    import random

    from herotype.engine.scheduling import Scheduler


class HerotypeApp(App):
    """Herotype TUI Application - animated hero screen."""

    TITLE = "HEROTYPE"

    BINDINGS = APP_BINDINGS

    def __init__(
        self,
        config: HerotypeConfig | None = None,
        config_path: str | Path | None = None,
        *,
        scheduler: Scheduler | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__()
        self.config_path = Path(config_path) if config_path else None
        self.config = config if config is not None else HerotypeConfig.load(self.config_path)
        self._scheduler = scheduler
        self._rng = rng

    async def on_mount(self) -> None:
        setup_debug_logging()
        log.info("Config loaded", path=str(self.config_path or "<default>"))
        await self.push_screen(HeroScreen(self.config, scheduler=self._scheduler, rng=self._rng))

    def action_toggle_debug_log(self) -> None:
        """Toggle the debug log viewer (F12). Disabled in production builds."""
        from herotype.limits import DEBUG_BUILD

        if isinstance(self.screen, DebugLogModal):
            self.screen.dismiss(None)
            return
        if not DEBUG_BUILD:
            self.notify("Debug log disabled in production builds", severity="warning")
            return
        self.push_screen(DebugLogModal())
