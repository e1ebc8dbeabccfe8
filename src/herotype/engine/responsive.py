"""Viewport-driven styling and resize debouncing."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

from herotype.config import ResponsiveConfig
from herotype.engine.sink import ResponsiveStyle, ViewportClass

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from herotype.engine.scheduling import Scheduler
    from herotype.engine.sink import TextSink

logger = logging.getLogger(__name__)


class Viewport(Protocol):
    """Host viewport: current width plus resize notifications."""

    def current_width(self) -> float: ...

    def on_resize(self, callback: Callable[[float], None]) -> Callable[[], None]:
        """Subscribe to resizes; returns a callable that unsubscribes."""
        ...


def viewport_class(width: float, breakpoint: float) -> ViewportClass:
    return ViewportClass.MOBILE if width < breakpoint else ViewportClass.DESKTOP


def responsive_style(
    width: float, config: ResponsiveConfig | Mapping[str, Any] | None = None
) -> ResponsiveStyle:
    """Select the style for ``width``. Pure: same width, same record."""
    config = ResponsiveConfig.coerce(config)
    if viewport_class(width, config.breakpoint) is ViewportClass.MOBILE:
        return ResponsiveStyle(
            viewport=ViewportClass.MOBILE,
            font_size=config.mobile_font_size,
            white_space="normal",
            word_break="break-word",
        )
    return ResponsiveStyle(
        viewport=ViewportClass.DESKTOP,
        font_size=config.desktop_font_size,
        white_space="nowrap",
        word_break="normal",
    )


def apply_responsive_style(
    target: TextSink,
    width: float,
    config: ResponsiveConfig | Mapping[str, Any] | None = None,
) -> ResponsiveStyle:
    """Compute the style for ``width``, apply it to ``target`` and return it."""
    style = responsive_style(width, config)
    target.apply_style(style)
    return style


class ResizeDebouncer:
    """Collapse a burst of resize events into one call with the last width.

    Runs on its own timer, separate from any animation timer on the same
    scheduler.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        callback: Callable[[float], None],
        delay_ms: float = 250,
    ) -> None:
        self._scheduler = scheduler
        self._callback = callback
        self._delay_ms = delay_ms
        self._handle: Any = None
        self._width: float | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def trigger(self, width: float) -> None:
        """Record ``width`` and (re)start the quiet-period timer."""
        self._width = width
        self._scheduler.cancel(self._handle)
        self._handle = self._scheduler.schedule_after(self._delay_ms, self._fire)

    def cancel(self) -> None:
        self._scheduler.cancel(self._handle)
        self._handle = None
        self._width = None

    def _fire(self) -> None:
        width = self._width
        self._handle = None
        self._width = None
        if width is None:
            return
        logger.debug("Resize burst settled at width %s", width)
        self._callback(width)
