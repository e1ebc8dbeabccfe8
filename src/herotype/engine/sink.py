"""Text sink protocol and the style record engines apply to it."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

from herotype.limits import MAX_RECORDED_FRAMES


class ViewportClass(StrEnum):
    """Size class of the viewport relative to the breakpoint."""

    MOBILE = "mobile"
    DESKTOP = "desktop"


@dataclass(frozen=True, slots=True)
class ResponsiveStyle:
    """Display style selected for a viewport width."""

    viewport: ViewportClass
    font_size: str
    white_space: str
    word_break: str

    @property
    def wraps(self) -> bool:
        return self.white_space != "nowrap"


class TextTarget(Protocol):
    """Anything whose displayed text can be replaced."""

    def set_text(self, text: str) -> None: ...


class TextSink(TextTarget, Protocol):
    """Target an engine renders into. Single writer: one engine per sink."""

    def apply_style(self, style: ResponsiveStyle) -> None: ...

    def set_caret(self, active: bool) -> None: ...


class RecordingSink:
    """In-memory sink keeping a bounded history of rendered text."""

    def __init__(self, max_frames: int = MAX_RECORDED_FRAMES) -> None:
        self.text = ""
        self.caret_active = False
        self.style: ResponsiveStyle | None = None
        self.frames: deque[str] = deque(maxlen=max_frames)
        self.styles: list[ResponsiveStyle] = []

    def set_text(self, text: str) -> None:
        self.text = text
        self.frames.append(text)

    def apply_style(self, style: ResponsiveStyle) -> None:
        self.style = style
        self.styles.append(style)

    def set_caret(self, active: bool) -> None:
        self.caret_active = active
