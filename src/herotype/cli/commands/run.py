"""Run the hero screen TUI."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ._options import config_option, load_config_or_exit

if TYPE_CHECKING:
    from pathlib import Path


@click.command()
@config_option
def run(config_path: Path | None) -> None:
    """Run the animated hero screen."""
    from herotype.tui.app import HerotypeApp

    config = load_config_or_exit(config_path)
    app = HerotypeApp(config=config, config_path=config_path)
    app.run()
