"""Herotype: typewriter and scramble text animations for terminal hero screens."""

from herotype.engine import (
    ConfigError,
    ScrambleEffect,
    TypewriterEngine,
    apply_responsive_style,
    restart,
    start,
    stop,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "ScrambleEffect",
    "TypewriterEngine",
    "apply_responsive_style",
    "restart",
    "start",
    "stop",
]
