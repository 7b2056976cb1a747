"""Text pane widget wrapping Textual's TextArea for the workbench inputs."""

from __future__ import annotations

from typing import Any

from textual.widgets import TextArea


PLACEHOLDER = "Type something"


class TextPane(TextArea):
    """A bordered text editor for one workbench pane.

    Input panes are editable; the result pane is read-only but can still
    take focus so its content can be scrolled.
    """

    DEFAULT_CSS = """
    TextPane {
        height: 1fr;
    }

    TextPane.focused {
        border: round $secondary;
    }

    TextPane.blurred {
        border: hidden;
    }

    TextPane.focused > .text-area--cursor-line {
        background: $primary-darken-2;
        color: $text;
    }
    """

    def __init__(
        self,
        pane_index: int,
        text: str = "",
        read_only: bool = False,
        **kwargs: Any,
    ) -> None:
        """Initialize the text pane.

        Args:
            pane_index: Index of the workbench buffer this pane shows.
            text: Initial content.
            read_only: Whether the user may edit the pane.
            **kwargs: Additional arguments passed to TextArea.
        """
        super().__init__(
            text,
            read_only=read_only,
            show_line_numbers=True,
            **kwargs,
        )
        self.pane_index = pane_index
        self.placeholder = PLACEHOLDER
        self.add_class("blurred")

    def set_active(self, active: bool) -> None:
        """Swap the focused/blurred classes that drive the border style."""
        self.set_class(active, "focused")
        self.set_class(not active, "blurred")
