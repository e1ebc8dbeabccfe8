"""Options and helpers shared by CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from herotype.config import HerotypeConfig
from herotype.engine.errors import ConfigError

config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config.toml (defaults to the platform config dir)",
)


def load_config_or_exit(config_path: Path | None) -> HerotypeConfig:
    """Load config, reporting errors in red and exiting 1."""
    try:
        return HerotypeConfig.load(config_path)
    except ConfigError as exc:
        click.secho(f"Invalid configuration: {exc}", fg="red", err=True)
        sys.exit(1)
