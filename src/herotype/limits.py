"""Numeric limits and timing defaults - no circular dependencies."""

from __future__ import annotations

import os


def _is_debug_build() -> bool:
    """Check if this is a debug/beta build.

    Debug mode is enabled when:
    1. HEROTYPE_DEBUG env var is set to "1" or "true" (explicit override)
    2. Version contains a pre-release marker ("dev", "a", "b", "rc")

    Production releases (e.g., "0.1.0") have debug disabled by default.
    """
    env_debug = os.environ.get("HEROTYPE_DEBUG", "").lower()
    if env_debug in ("1", "true"):
        return True
    if env_debug in ("0", "false"):
        return False

    try:
        from importlib.metadata import version

        pkg_version = version("herotype")
    except Exception:
        pkg_version = "dev"

    version_lower = pkg_version.lower()
    return any(indicator in version_lower for indicator in ("dev", "a", "b", "rc"))


DEBUG_BUILD: bool = _is_debug_build()
"""True for beta/dev builds, False for production releases."""


MAX_LOG_MESSAGE_LENGTH = 4096
MAX_LOG_LINES = 2000

# Frames kept by RecordingSink before the oldest are dropped
MAX_RECORDED_FRAMES = 10000

# Guard for VirtualScheduler.run_until_idle on loops that never go idle
MAX_VIRTUAL_STEPS = 100_000

# Caret blink half-period (0.75s step-end cycle)
CARET_BLINK_INTERVAL_MS = 375
