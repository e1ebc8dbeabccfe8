from __future__ import annotations

from typing import TYPE_CHECKING

from herotype.engine.scheduling import VirtualScheduler

if TYPE_CHECKING:
    from herotype.engine.scheduling import VirtualTimer


class LeakyScheduler(VirtualScheduler):
    """Scheduler whose cancel never reaches the host timer.

    Models a callback that was already dequeued when ``stop`` ran.
    """

    def cancel(self, handle: VirtualTimer | None) -> None:
        if handle is not None and handle.live:
            self.cancelled += 1
