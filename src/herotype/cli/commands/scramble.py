"""Print the frames of a scramble transition."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

import click

from herotype.engine.scheduling import VirtualScheduler
from herotype.engine.scramble import ScrambleEffect
from herotype.engine.sink import RecordingSink

from ._options import config_option, load_config_or_exit

if TYPE_CHECKING:
    from pathlib import Path


@click.command()
@click.argument("old")
@click.argument("new")
@config_option
@click.option("--seed", type=int, default=None, help="Seed for a reproducible scramble")
@click.option("--frames/--final", default=True, help="Print every frame or only the result")
def scramble(
    old: str, new: str, config_path: Path | None, seed: int | None, frames: bool
) -> None:
    """Scramble OLD into NEW and print the frames."""
    config = load_config_or_exit(config_path)
    scheduler = VirtualScheduler()
    sink = RecordingSink()
    effect = ScrambleEffect(
        sink, scheduler, config.scramble, text=old, rng=random.Random(seed)
    )
    effect.set_text(new)
    scheduler.run_until_idle()

    if frames:
        for index, frame in enumerate(sink.frames):
            click.echo(f"{index:>3}  {frame}")
    else:
        click.echo(sink.text)
