"""Keybindings for the Herotype TUI application.

Uses Textual's native Binding class directly.
"""

from __future__ import annotations

from textual.binding import Binding, BindingType

# =============================================================================
# App Bindings
# =============================================================================

APP_BINDINGS: list[BindingType] = [
    Binding("q", "quit", "Quit"),
    Binding("f12", "toggle_debug_log", "Debug", show=False),
]

# =============================================================================
# Hero Bindings
# =============================================================================

HERO_BINDINGS: list[BindingType] = [
    Binding("r", "restart_typewriter", "Restart"),
    Binding("s", "rescramble", "Scramble"),
]

# =============================================================================
# Modal Bindings
# =============================================================================

DEBUG_LOG_BINDINGS: list[BindingType] = [
    Binding("escape", "close", "Close"),
    Binding("f12", "close", "Close", show=False),
    Binding("c", "clear_logs", "Clear"),
    Binding("s", "save_logs", "Save"),
]
