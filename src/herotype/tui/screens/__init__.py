from herotype.tui.screens.hero import HeroScreen

__all__ = ["HeroScreen"]
