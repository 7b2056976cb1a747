"""Mixins for the TUI application."""

from textdiff.tui.mixins.focus_cycle import FocusCycleMixin

__all__ = [
    "FocusCycleMixin",
]
