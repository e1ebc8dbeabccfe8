"""Textual host for the animation engine."""
