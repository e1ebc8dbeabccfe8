"""Scramble effect: cells flicker through random symbols before settling."""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from herotype.config import ScrambleConfig

if TYPE_CHECKING:
    from collections.abc import Callable

    from herotype.engine.scheduling import Scheduler
    from herotype.engine.sink import TextTarget

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ScrambleRecord:
    """Transition of a single character position."""

    from_char: str
    to_char: str
    start_frame: int
    end_frame: int
    char: str = ""

    def settled(self, frame: int) -> bool:
        return frame >= self.end_frame


def build_scramble_queue(
    old: str,
    new: str,
    rng: random.Random,
    max_start: int = 20,
    max_duration: int = 20,
) -> list[ScrambleRecord]:
    """One record per position across the longer of ``old`` and ``new``.

    The shorter text contributes empty characters for the excess positions.
    """
    queue = []
    for i in range(max(len(old), len(new))):
        start = rng.randrange(max_start)
        end = start + rng.randrange(max_duration)
        queue.append(
            ScrambleRecord(
                from_char=old[i] if i < len(old) else "",
                to_char=new[i] if i < len(new) else "",
                start_frame=start,
                end_frame=end,
            )
        )
    return queue


def render_frame(
    queue: list[ScrambleRecord],
    frame: int,
    rng: random.Random,
    symbols: str,
    probability: float,
) -> tuple[str, int]:
    """Render ``frame`` and return ``(text, settled_count)``.

    A scrambling record keeps its last symbol unless it has none yet or the
    ``probability`` draw picks a new one.
    """
    output = []
    complete = 0
    for record in queue:
        if record.settled(frame):
            complete += 1
            output.append(record.to_char)
        elif frame >= record.start_frame:
            if not record.char or rng.random() < probability:
                record.char = rng.choice(symbols)
            output.append(record.char)
        else:
            output.append(record.from_char)
    return "".join(output), complete


class ScrambleEffect:
    """Frame loop that scrambles a sink from its current text to a new one."""

    def __init__(
        self,
        sink: TextTarget,
        scheduler: Scheduler,
        config: ScrambleConfig | Mapping[str, Any] | None = None,
        *,
        text: str = "",
        rng: random.Random | None = None,
        on_done: Callable[[str], None] | None = None,
    ) -> None:
        self.config = ScrambleConfig.coerce(config)
        self.sink = sink
        self.scheduler = scheduler
        self.text = text
        self.queue: list[ScrambleRecord] = []
        self.frame = 0
        self.frames_rendered = 0
        self._rng = rng or random.Random()
        self._on_done = on_done
        self._handle: Any = None
        self._generation = 0
        self._done = True

    @property
    def done(self) -> bool:
        return self._done

    @property
    def last_frame(self) -> int:
        """Frame on which every record has settled."""
        return max((record.end_frame for record in self.queue), default=0)

    def set_text(self, new_text: str) -> None:
        """Scramble from the current text to ``new_text``, rendering frame 0 now."""
        self.stop()
        self.queue = build_scramble_queue(
            self.text,
            new_text,
            self._rng,
            self.config.max_start_frame,
            self.config.max_duration_frames,
        )
        self.text = new_text
        self.frame = 0
        self.frames_rendered = 0
        self._done = False
        logger.debug("Scramble to %r over %d frames", new_text, self.last_frame + 1)
        self._update(self._generation)

    def stop(self) -> None:
        """Cancel the pending frame. The sink keeps whatever it last showed."""
        self._generation += 1
        self.scheduler.cancel(self._handle)
        self._handle = None
        self._done = True

    def _update(self, generation: int) -> None:
        if generation != self._generation:
            return
        self._handle = None
        output, complete = render_frame(
            self.queue,
            self.frame,
            self._rng,
            self.config.symbols,
            self.config.change_probability,
        )
        self.sink.set_text(output)
        self.frames_rendered += 1
        if complete == len(self.queue):
            self._done = True
            if self._on_done is not None:
                self._on_done(output)
            return
        self.frame += 1
        self._handle = self.scheduler.schedule_after(
            self.config.frame_interval_ms, lambda: self._update(generation)
        )
