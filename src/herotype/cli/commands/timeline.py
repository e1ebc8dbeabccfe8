"""Print the typewriter's step timeline without a terminal UI."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from herotype.engine.responsive import apply_responsive_style
from herotype.engine.scheduling import VirtualScheduler
from herotype.engine.sink import RecordingSink
from herotype.engine.typewriter import Step, TypewriterEngine

from ._options import config_option, load_config_or_exit

if TYPE_CHECKING:
    from pathlib import Path


def format_step(at_ms: float, step: Step) -> str:
    caret = "▌" if step.caret else " "
    return (
        f"{at_ms:>9.0f}ms  #{step.message_index:<2} {step.transition.phase.value:<8} "
        f"+{step.delay_ms:<6g} {step.rendered}{caret}"
    )


@click.command()
@config_option
@click.option("--width", type=float, default=None, help="Viewport width in width units")
@click.option("--steps", type=click.IntRange(min=1), default=60, show_default=True)
def timeline(config_path: Path | None, width: float | None, steps: int) -> None:
    """Print the deterministic typewriter timeline for the configured phrases."""
    config = load_config_or_exit(config_path)
    scheduler = VirtualScheduler()
    sink = RecordingSink()
    lines: list[str] = []

    engine = TypewriterEngine(
        config.hero.phrases,
        sink,
        scheduler,
        config.typewriter,
        responsive=config.responsive,
        on_step=lambda step: lines.append(format_step(scheduler.now, step)),
    )
    if width is not None:
        style = apply_responsive_style(sink, width, config.responsive)
        click.echo(
            f"viewport={style.viewport.value} font-size={style.font_size} "
            f"white-space={style.white_space} word-break={style.word_break}"
        )

    engine.start()
    for _ in range(steps):
        scheduler.run_next()
    engine.stop()

    for line in lines:
        click.echo(line)
