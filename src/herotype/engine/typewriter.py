"""Typewriter engine: cycle a text sink through phrases by typing and deleting.

Each phrase runs Typing -> Holding -> Deleting -> advance, forever, until the
engine is stopped. One step runs per timer firing and each step schedules the
next, so exactly one callback is pending while the engine runs.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from herotype.config import ResponsiveConfig, TypewriterConfig
from herotype.engine.errors import ConfigError
from herotype.engine.responsive import (
    ResizeDebouncer,
    apply_responsive_style,
    viewport_class,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from herotype.engine.responsive import Viewport
    from herotype.engine.scheduling import Scheduler
    from herotype.engine.sink import TextSink, ViewportClass

logger = logging.getLogger(__name__)


class Phase(StrEnum):
    """Where the engine is within one phrase's cycle."""

    TYPING = "typing"
    HOLDING = "holding"
    DELETING = "deleting"


class Transition(StrEnum):
    """What a step did to the cursor."""

    TYPE = "type"
    DELETE = "delete"
    HOLD = "hold"
    ADVANCE = "advance"

    @property
    def phase(self) -> Phase:
        match self:
            case Transition.DELETE:
                return Phase.DELETING
            case Transition.HOLD:
                return Phase.HOLDING
            case _:
                return Phase.TYPING


@dataclass(slots=True)
class AnimationCursor:
    """Position within the phrase rotation."""

    message_index: int = 0
    char_index: int = 0
    is_deleting: bool = False

    def reset(self) -> None:
        self.message_index = 0
        self.char_index = 0
        self.is_deleting = False


@dataclass(frozen=True, slots=True)
class Step:
    """Outcome of one step: the transition taken and the delay before the next."""

    message_index: int
    transition: Transition
    delay_ms: float
    rendered: str
    caret: bool


def effective_speeds(phrase: str, config: TypewriterConfig) -> tuple[float, float]:
    """Return ``(typing_ms, deleting_ms)`` for ``phrase``.

    Phrases longer than the threshold run faster by the configured multiplier.
    """
    typing = config.typing_speed_ms
    deleting = config.deleting_speed_ms
    if len(phrase) > config.long_phrase_length_threshold:
        typing *= config.long_phrase_speed_multiplier
        deleting *= config.long_phrase_speed_multiplier
    return typing, deleting


def caret_active(cursor: AnimationCursor, phrase: str) -> bool:
    """The caret blinks while characters are being typed or deleted."""
    if cursor.is_deleting:
        return cursor.char_index > 0
    return cursor.char_index < len(phrase)


def next_transition(cursor: AnimationCursor, phrase: str, phrase_count: int) -> Transition:
    """Apply one transition to ``cursor`` in place and return which one it was."""
    if not cursor.is_deleting and cursor.char_index < len(phrase):
        cursor.char_index += 1
        return Transition.TYPE
    if cursor.is_deleting and cursor.char_index > 0:
        cursor.char_index -= 1
        return Transition.DELETE
    if not cursor.is_deleting:
        cursor.is_deleting = True
        return Transition.HOLD
    cursor.is_deleting = False
    cursor.message_index = (cursor.message_index + 1) % phrase_count
    return Transition.ADVANCE


class TypewriterEngine:
    """One typewriter loop bound to one sink and one scheduler.

    The engine owns its cursor, config and the single pending step handle.
    ``stop`` both cancels the handle and bumps a generation counter, so a
    callback the host already dequeued still cannot touch the cursor or sink.
    """

    def __init__(
        self,
        phrases: Sequence[str],
        sink: TextSink,
        scheduler: Scheduler,
        config: TypewriterConfig | Mapping[str, Any] | None = None,
        *,
        responsive: ResponsiveConfig | Mapping[str, Any] | None = None,
        on_step: Callable[[Step], None] | None = None,
    ) -> None:
        if isinstance(phrases, str):
            raise ConfigError("phrases must be a sequence of strings, not a single string")
        phrases = tuple(phrases)
        if not phrases:
            raise ConfigError("phrases must not be empty")
        self.config = TypewriterConfig.coerce(config)
        self.responsive = ResponsiveConfig.coerce(responsive)
        self.phrases: tuple[str, ...] = phrases
        self.sink = sink
        self.scheduler = scheduler
        self.cursor = AnimationCursor()
        self._on_step = on_step
        self._handle: Any = None
        self._generation = 0
        self._running = False
        self._phase = Phase.TYPING
        self._viewport_class: ViewportClass | None = None
        self._debouncer: ResizeDebouncer | None = None
        self._unsubscribe: Callable[[], None] | None = None

    @property
    def running(self) -> bool:
        return self._running

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def current_phrase(self) -> str:
        return self.phrases[self.cursor.message_index]

    def start(self) -> None:
        """Schedule the first step after the initial delay. No-op while running."""
        if self._running:
            return
        self._running = True
        logger.debug("Typewriter started with %d phrases", len(self.phrases))
        self._schedule(self.config.initial_delay_ms)

    def stop(self) -> None:
        """Cancel the pending step and any pending resize. Idempotent."""
        self._cancel_pending()
        if self._debouncer is not None:
            self._debouncer.cancel()
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        if self._running:
            logger.debug("Typewriter stopped at %s", self.cursor)
        self._running = False

    def restart(self) -> None:
        """Cancel, reset the cursor to zero and step immediately."""
        self._cancel_pending()
        self.cursor.reset()
        self._phase = Phase.TYPING
        self._running = True
        logger.debug("Typewriter restarted")
        self._step(self._generation)

    def reflow(self, width: float) -> None:
        """Restyle for ``width`` and restart, as one operation.

        The cursor reset and the new style land before the next render, so a
        half-typed phrase is never shown in the previous viewport's style.
        """
        self._cancel_pending()
        self.cursor.reset()
        style = apply_responsive_style(self.sink, width, self.responsive)
        self._viewport_class = style.viewport
        self.restart()

    def handle_resize(self, width: float) -> None:
        """Apply a settled resize: restyle, and restart only across the breakpoint."""
        new_class = viewport_class(width, self.responsive.breakpoint)
        if new_class is self._viewport_class:
            apply_responsive_style(self.sink, width, self.responsive)
            return
        logger.debug("Viewport class %s -> %s", self._viewport_class, new_class)
        self.reflow(width)

    def bind_viewport(self, viewport: Viewport) -> None:
        """Style for the viewport's current width and follow its resizes, debounced."""
        if self._unsubscribe is not None:
            self._unsubscribe()
        style = apply_responsive_style(self.sink, viewport.current_width(), self.responsive)
        self._viewport_class = style.viewport
        if self._debouncer is None:
            self._debouncer = ResizeDebouncer(
                self.scheduler, self.handle_resize, self.responsive.debounce_ms
            )
        self._unsubscribe = viewport.on_resize(self._debouncer.trigger)

    def _cancel_pending(self) -> None:
        self._generation += 1
        self.scheduler.cancel(self._handle)
        self._handle = None

    def _schedule(self, delay_ms: float) -> None:
        generation = self._generation
        self._handle = self.scheduler.schedule_after(delay_ms, lambda: self._step(generation))

    def _step(self, generation: int) -> None:
        if generation != self._generation or not self._running:
            return
        self._handle = None
        phrase = self.current_phrase
        typing_ms, deleting_ms = effective_speeds(phrase, self.config)

        rendered = phrase[: self.cursor.char_index]
        caret = caret_active(self.cursor, phrase)
        self.sink.set_text(rendered)
        self.sink.set_caret(caret)

        message_index = self.cursor.message_index
        transition = next_transition(self.cursor, phrase, len(self.phrases))
        self._phase = transition.phase
        match transition:
            case Transition.DELETE:
                delay = deleting_ms
            case Transition.HOLD:
                delay = self.config.hold_full_ms
            case _:
                delay = typing_ms
        self._schedule(delay)

        if self._on_step is not None:
            self._on_step(Step(message_index, transition, delay, rendered, caret))


def start(
    phrases: Sequence[str],
    target: TextSink,
    config: TypewriterConfig | Mapping[str, Any] | None = None,
    *,
    scheduler: Scheduler,
    responsive: ResponsiveConfig | Mapping[str, Any] | None = None,
) -> TypewriterEngine:
    """Create a typewriter on ``target`` and schedule its first step.

    Raises:
        ConfigError: If ``phrases`` is empty or ``config`` is invalid. Nothing
            is scheduled in that case.
    """
    try:
        engine = TypewriterEngine(phrases, target, scheduler, config, responsive=responsive)
    except ConfigError as exc:
        logger.warning("Typewriter not started: %s", exc)
        raise
    engine.start()
    return engine


def stop(handle: TypewriterEngine) -> None:
    handle.stop()


def restart(handle: TypewriterEngine) -> None:
    handle.restart()
