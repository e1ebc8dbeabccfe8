"""Host-agnostic animation engine."""

from herotype.engine.errors import ConfigError, HerotypeError
from herotype.engine.responsive import (
    ResizeDebouncer,
    Viewport,
    apply_responsive_style,
    responsive_style,
    viewport_class,
)
from herotype.engine.scheduling import AsyncioScheduler, Scheduler, VirtualScheduler
from herotype.engine.scramble import ScrambleEffect, ScrambleRecord, build_scramble_queue
from herotype.engine.sink import (
    RecordingSink,
    ResponsiveStyle,
    TextSink,
    TextTarget,
    ViewportClass,
)
from herotype.engine.typewriter import (
    AnimationCursor,
    Phase,
    Step,
    Transition,
    TypewriterEngine,
    restart,
    start,
    stop,
)

__all__ = [
    "AnimationCursor",
    "AsyncioScheduler",
    "ConfigError",
    "HerotypeError",
    "Phase",
    "RecordingSink",
    "ResizeDebouncer",
    "ResponsiveStyle",
    "Scheduler",
    "ScrambleEffect",
    "ScrambleRecord",
    "Step",
    "TextSink",
    "TextTarget",
    "Transition",
    "TypewriterEngine",
    "Viewport",
    "ViewportClass",
    "VirtualScheduler",
    "apply_responsive_style",
    "build_scramble_queue",
    "responsive_style",
    "restart",
    "start",
    "stop",
    "viewport_class",
]
