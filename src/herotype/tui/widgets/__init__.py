from herotype.tui.widgets.scramble import ScrambleLabel
from herotype.tui.widgets.typewriter import TypewriterLabel

__all__ = ["ScrambleLabel", "TypewriterLabel"]
