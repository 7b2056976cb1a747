"""TUI widgets for the diff workbench."""

from textdiff.tui.widgets.diff_view import DiffView
from textdiff.tui.widgets.text_pane import PLACEHOLDER, TextPane

__all__ = [
    # Editable and result panes
    "TextPane",
    "PLACEHOLDER",
    # Diff message area
    "DiffView",
]
