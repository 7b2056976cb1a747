"""TUI views for the diff workbench."""

from textdiff.tui.views.workbench_screen import WorkbenchScreen

__all__ = ["WorkbenchScreen"]
