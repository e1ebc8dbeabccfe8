"""Exceptions raised by the animation engine."""

from __future__ import annotations


class HerotypeError(Exception):
    """Base class for Herotype errors."""


class ConfigError(HerotypeError, ValueError):
    """Raised when an engine is configured with unusable input.

    Raised before any timer is scheduled or cursor mutated, so a failed
    ``start`` leaves nothing behind.
    """
