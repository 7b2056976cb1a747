"""
Workbench state machine for the diff TUI.

Owns the two editable input buffers and the read-only result buffer,
tracks which pane has focus, runs the diff pipeline on Compare and keeps
pane geometry in step with the viewport. The host UI feeds it one command
at a time and draws the RenderPlan returned by render().

Pane Layout:
    - panes 0 and 1: editable inputs, side by side, splitting the width
    - pane 2: read-only result, full width, fixed height
    - help bar and diff message area below
"""

from __future__ import annotations

from dataclasses import dataclass, field

from rich.text import Text

from textdiff.diffing import (
    DEFAULT_THEME,
    ColorizedDiff,
    DiffSequence,
    DiffTheme,
    colorize,
    compute_diff,
    wrap,
    wrap_text,
)
from textdiff.tui.commands import (
    Command,
    Compare,
    Edit,
    NextFocus,
    PrevFocus,
    Quit,
    Resize,
)


PANE_COUNT = 3
RESULT_HEIGHT = 5
HELP_HEIGHT = 5


@dataclass(frozen=True)
class WorkbenchConfig:
    """Immutable settings for a Workbench."""

    pane_count: int = PANE_COUNT
    result_height: int = RESULT_HEIGHT
    help_height: int = HELP_HEIGHT
    granularity: str = "char"
    theme: DiffTheme = DEFAULT_THEME

    @property
    def result_index(self) -> int:
        """Index of the read-only result pane (always the last one)."""
        return self.pane_count - 1


@dataclass
class TextBuffer:
    """Content of one pane."""

    text: str = ""
    editable: bool = True
    focused: bool = False

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False


@dataclass(frozen=True)
class PaneSize:
    """Allotted size of a pane in terminal cells."""

    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class PaneView:
    """What the host draws for one pane."""

    text: str
    size: PaneSize
    focused: bool
    editable: bool


@dataclass(frozen=True)
class RenderPlan:
    """Everything the host needs to draw one frame."""

    inputs: tuple[PaneView, ...]
    result: PaneView
    diff: Text
    diff_plain: str
    focus: int


@dataclass
class Workbench:
    """The single mutable state record of the diff workbench.

    Commands are applied one at a time through dispatch(). Nothing here
    can fail: focus moves modulo the pane count and the diff pipeline is
    total over its inputs.
    """

    config: WorkbenchConfig = field(default_factory=WorkbenchConfig)
    buffers: list[TextBuffer] = field(default_factory=list)
    focus: int = 0
    ops: DiffSequence = ()
    diff: ColorizedDiff = field(default_factory=ColorizedDiff)
    width: int = 0
    height: int = 0
    sizes: list[PaneSize] = field(default_factory=list)
    running: bool = True

    def __post_init__(self) -> None:
        if not self.buffers:
            self.buffers = [
                TextBuffer(editable=idx != self.config.result_index)
                for idx in range(self.config.pane_count)
            ]
        self.buffers[self.focus].focus()
        self._size_panes()

    @property
    def focused_buffer(self) -> TextBuffer:
        return self.buffers[self.focus]

    @property
    def result_buffer(self) -> TextBuffer:
        return self.buffers[self.config.result_index]

    def dispatch(self, command: Command) -> bool:
        """
        Apply one command to the workbench.

        Args:
            command: One of the command types in textdiff.tui.commands.

        Returns:
            True if the state changed, False if the command was ignored.

        Raises:
            TypeError: If ``command`` is not a workbench command.
        """
        match command:
            case NextFocus():
                self._move_focus(1)
            case PrevFocus():
                self._move_focus(-1)
            case Compare():
                self._compare()
            case Resize(width=width, height=height):
                self.width = width
                self.height = height
                self._size_panes()
            case Edit(pane=pane, text=text):
                return self._edit(pane, text)
            case Quit():
                for buffer in self.buffers:
                    buffer.blur()
                self.running = False
            case _:
                raise TypeError(f"Not a workbench command: {command!r}")
        return True

    def _move_focus(self, step: int) -> None:
        self.focused_buffer.blur()
        self.focus = (self.focus + step) % len(self.buffers)
        self.focused_buffer.focus()

    def _compare(self) -> None:
        """Diff panes 0 and 1 verbatim, whichever pane has focus."""
        self.ops = compute_diff(
            self.buffers[0].text,
            self.buffers[1].text,
            granularity=self.config.granularity,
        )
        self.diff = colorize(self.ops, self.config.theme)
        self.result_buffer.text = self.diff.plain

    def _edit(self, pane: int, text: str) -> bool:
        """Accept an edit only for the focused, editable pane."""
        if pane != self.focus:
            return False
        buffer = self.buffers[pane]
        if not buffer.editable or buffer.text == text:
            return False
        buffer.text = text
        return True

    def _size_panes(self) -> None:
        """Recompute pane sizes from the viewport dimensions."""
        inputs = len(self.buffers) - 1
        input_height = max(
            0, (self.height - self.config.help_height - self.config.result_height) // 2
        )
        input_size = PaneSize(width=self.width // inputs, height=input_height)
        self.sizes = [input_size] * inputs + [
            PaneSize(width=self.width, height=self.config.result_height)
        ]

    def _pane_view(self, idx: int) -> PaneView:
        buffer = self.buffers[idx]
        return PaneView(
            text=buffer.text,
            size=self.sizes[idx],
            focused=buffer.focused,
            editable=buffer.editable,
        )

    def render(self) -> RenderPlan:
        """Build the frame for the current state, wrapping the diff to the width."""
        result_index = self.config.result_index
        return RenderPlan(
            inputs=tuple(self._pane_view(idx) for idx in range(result_index)),
            result=self._pane_view(result_index),
            diff=wrap_text(self.diff.to_text(), self.width),
            diff_plain=wrap(self.diff.plain, self.width),
            focus=self.focus,
        )
