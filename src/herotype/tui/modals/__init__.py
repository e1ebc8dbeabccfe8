from herotype.tui.modals.debug_log import DebugLogModal

__all__ = ["DebugLogModal"]
