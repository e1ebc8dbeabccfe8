"""Config file commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from herotype.config import HerotypeConfig
from herotype.paths import get_config_path

from ._options import config_option, load_config_or_exit

if TYPE_CHECKING:
    from pathlib import Path


@click.group()
def config() -> None:
    """Create or inspect config.toml."""


@config.command("init")
@config_option
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
def init(config_path: Path | None, force: bool) -> None:
    """Write the default configuration."""
    path = config_path or get_config_path()
    if path.exists() and not force:
        click.secho(f"{path} already exists (use --force to overwrite)", fg="yellow")
        return
    HerotypeConfig().save(path)
    click.secho(f"Wrote {path}", fg="green")


@config.command("show")
@config_option
def show(config_path: Path | None) -> None:
    """Print the effective configuration as TOML."""
    click.echo(load_config_or_exit(config_path).to_toml(), nl=False)
