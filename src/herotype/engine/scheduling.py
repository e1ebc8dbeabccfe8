"""Scheduler abstraction the animation loops run on.

An engine never sleeps: every wait is a callback scheduled on a
``Scheduler``. Hosts provide one (Textual timers, an asyncio loop); tests and
the ``timeline`` command drive a ``VirtualScheduler`` whose clock only moves
when told to.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol, TypeAlias

from herotype.limits import MAX_VIRTUAL_STEPS

if TYPE_CHECKING:
    from collections.abc import Callable

    Callback: TypeAlias = Callable[[], None]


class Scheduler(Protocol):
    """Schedule-after-delay / cancel facility."""

    def schedule_after(self, delay_ms: float, callback: Callback) -> Any:
        """Run ``callback`` once after ``delay_ms`` milliseconds and return a handle."""
        ...

    def cancel(self, handle: Any) -> None:
        """Cancel a pending callback. No-op for fired, cancelled or None handles."""
        ...


@dataclass(order=True, slots=True)
class VirtualTimer:
    """A callback pending on a ``VirtualScheduler``."""

    due: float
    seq: int
    callback: Callback = field(compare=False)
    cancelled: bool = field(default=False, compare=False)
    fired: bool = field(default=False, compare=False)

    @property
    def live(self) -> bool:
        return not (self.cancelled or self.fired)


class VirtualScheduler:
    """Deterministic scheduler over a virtual millisecond clock.

    Callbacks due at the same instant fire in the order they were scheduled.
    ``scheduled`` and ``cancelled`` count calls so tests can assert on how a
    loop uses its timer.
    """

    def __init__(self, start_ms: float = 0.0) -> None:
        self._now = float(start_ms)
        self._queue: list[VirtualTimer] = []
        self._seq = itertools.count()
        self.scheduled = 0
        self.cancelled = 0

    @property
    def now(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        """Number of callbacks still waiting to fire."""
        return sum(1 for timer in self._queue if timer.live)

    def schedule_after(self, delay_ms: float, callback: Callback) -> VirtualTimer:
        timer = VirtualTimer(self._now + max(0.0, float(delay_ms)), next(self._seq), callback)
        heapq.heappush(self._queue, timer)
        self.scheduled += 1
        return timer

    def cancel(self, handle: VirtualTimer | None) -> None:
        if handle is None or not handle.live:
            return
        handle.cancelled = True
        self.cancelled += 1

    def next_due(self) -> float | None:
        """Virtual time of the next live callback, if any."""
        self._drop_dead()
        return self._queue[0].due if self._queue else None

    def run_next(self) -> bool:
        """Jump the clock to the next callback and fire it.

        Returns:
            False when nothing is pending.
        """
        self._drop_dead()
        if not self._queue:
            return False
        timer = heapq.heappop(self._queue)
        self._now = max(self._now, timer.due)
        timer.fired = True
        timer.callback()
        return True

    def advance(self, ms: float) -> int:
        """Move the clock forward by ``ms``, firing everything that falls due.

        Returns:
            Number of callbacks fired.
        """
        target = self._now + ms
        fired = 0
        while (due := self.next_due()) is not None and due <= target:
            self.run_next()
            fired += 1
        self._now = target
        return fired

    def run_until_idle(self, limit: int = MAX_VIRTUAL_STEPS) -> int:
        """Fire callbacks until none are pending.

        Raises:
            RuntimeError: If more than ``limit`` callbacks fire (a loop that never idles).
        """
        fired = 0
        while self.run_next():
            fired += 1
            if fired >= limit:
                raise RuntimeError(f"Scheduler still busy after {limit} callbacks")
        return fired

    def _drop_dead(self) -> None:
        while self._queue and not self._queue[0].live:
            heapq.heappop(self._queue)


class AsyncioScheduler:
    """Scheduler backed by ``loop.call_later`` for headless asyncio hosts."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop or asyncio.get_running_loop()

    def schedule_after(self, delay_ms: float, callback: Callback) -> asyncio.TimerHandle:
        return self._loop.call_later(max(0.0, delay_ms) / 1000, callback)

    def cancel(self, handle: asyncio.TimerHandle | None) -> None:
        if handle is not None:
            handle.cancel()
