"""
Main Textual application for the Diff Workbench.

This is the entry point for the TUI that lets you type two texts side by
side and compare them with a colorized character-level diff.

Key Bindings:
    - tab / shift+tab: Focus the next / previous pane
    - ctrl+r: Compare the two input panes
    - esc / ctrl+c: Quit
"""

from __future__ import annotations

import argparse
import sys

from textual.app import App

from textdiff.diffing import GRANULARITIES, THEMES, get_theme
from textdiff.tui.views.workbench_screen import WorkbenchScreen
from textdiff.tui.workbench import HELP_HEIGHT, RESULT_HEIGHT, WorkbenchConfig


class DiffWorkbenchApp(App):
    """A Textual app for comparing two typed texts."""

    TITLE = "Diff Workbench"

    CSS = """
    Screen {
        background: $surface;
    }

    Static {
        width: 100%;
    }
    """

    def __init__(self, config: WorkbenchConfig | None = None):
        """Initialize the app.

        Args:
            config: Workbench settings. Uses the defaults if not provided.
        """
        super().__init__()
        self.config = config or WorkbenchConfig()

    def on_mount(self) -> None:
        """Push the workbench screen."""
        self.push_screen(WorkbenchScreen(self.config))


def _non_negative_int(value: str) -> int:
    """Argparse type for row counts."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be zero or more: {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Type two texts side by side and compare them in a terminal UI."
    )
    parser.add_argument(
        "--granularity",
        "-g",
        choices=GRANULARITIES,
        default="char",
        help="Diff granularity (default: char)",
    )
    parser.add_argument(
        "--theme",
        "-t",
        choices=sorted(THEMES),
        default="default",
        help="Diff color theme (default: default)",
    )
    parser.add_argument(
        "--result-height",
        type=_non_negative_int,
        default=RESULT_HEIGHT,
        help=f"Rows of the result pane (default: {RESULT_HEIGHT})",
    )
    parser.add_argument(
        "--help-height",
        type=_non_negative_int,
        default=HELP_HEIGHT,
        help=f"Rows reserved for the help area (default: {HELP_HEIGHT})",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> WorkbenchConfig:
    """Build the workbench settings from parsed arguments."""
    return WorkbenchConfig(
        result_height=args.result_height,
        help_height=args.help_height,
        granularity=args.granularity,
        theme=get_theme(args.theme),
    )


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run the application."""
    args = build_parser().parse_args(argv)

    app = DiffWorkbenchApp(config_from_args(args))
    try:
        app.run()
    except Exception as e:
        print(f"Error while running program: {e}", file=sys.stderr)
        sys.exit(1)
    if app.return_code:
        sys.exit(app.return_code)


if __name__ == "__main__":
    main()
