"""Root CLI command registration."""

from __future__ import annotations

import click

from herotype import __version__

from .config import config
from .run import run
from .scramble import scramble
from .timeline import timeline


@click.group(invoke_without_command=True)
@click.option("--version", is_flag=True, help="Show version and exit")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """Typewriter and scramble text animations for the terminal."""
    if version:
        click.echo(f"herotype {__version__}")
        ctx.exit(0)

    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


cli.add_command(run)
cli.add_command(timeline)
cli.add_command(scramble)
cli.add_command(config)
