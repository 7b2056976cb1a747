"""
DiffView widget for the wrapped, colorized diff message area.

Shows the output of the last Compare below the help bar. The content is
already wrapped to the terminal width by the workbench, so the widget
only displays it.
"""

from __future__ import annotations

from typing import Any

from rich.text import Text
from textual.widgets import Static


EMPTY_MESSAGE = "Press ctrl+r to compare the two panes."


class DiffView(Static):
    """Message area showing the rendered diff."""

    DEFAULT_CSS = """
    DiffView {
        width: 100%;
        height: auto;
    }

    DiffView.empty {
        color: $text-muted;
    }
    """

    def __init__(self, **kwargs: Any) -> None:
        """Initialize the diff view with the empty-state hint.

        Args:
            **kwargs: Additional arguments passed to Static.
        """
        super().__init__(EMPTY_MESSAGE, classes="empty", **kwargs)
        self._diff_plain = ""

    def show_diff(self, diff: Text) -> None:
        """Display a wrapped diff, or the hint when there is none yet.

        Args:
            diff: The wrapped diff from RenderPlan.diff.
        """
        self._diff_plain = diff.plain
        if diff.plain:
            self.remove_class("empty")
            self.update(diff)
        else:
            self.add_class("empty")
            self.update(EMPTY_MESSAGE)

    @property
    def rendered_text(self) -> str:
        """Plain text of the diff currently shown (empty when none)."""
        return self._diff_plain
