"""
Focus Cycle Mixin for moving focus around the workbench panes.

Provides consistent pane switching behavior for screens backed by a
Workbench:
- action_next_focus(): Focus the next pane (tab)
- action_prev_focus(): Focus the previous pane (shift+tab)
- action_compare(): Diff the two input panes (ctrl+r)
- action_quit(): Blur every pane and exit (esc / ctrl+c)
- _update_pane_styles(): Update focused/blurred CSS classes on panes
- _focus_active_widget(): Move Textual focus to the workbench's pane

Usage:
    class MyScreen(FocusCycleMixin, Screen):
        BINDINGS = FocusCycleMixin.FOCUS_CYCLE_BINDINGS + [...]

        def _apply(self, command: Command) -> bool:
            ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual import events
from textual.binding import Binding

from textdiff.tui.commands import Compare, NextFocus, PrevFocus, Quit
from textdiff.tui.widgets.text_pane import TextPane

if TYPE_CHECKING:
    from textdiff.tui.commands import Command
    from textdiff.tui.workbench import Workbench


class FocusCycleMixin:
    """Mixin for screens that cycle focus through workbench panes.

    The Workbench owns the focus index; Textual focus follows it. A pane
    that gains Textual focus any other way (e.g. a mouse click) hands
    focus back to the workbench's pane.

    Subclasses must provide a ``workbench`` attribute and implement
    _apply() to dispatch a command and redraw.

    Class Attributes:
        FOCUS_CYCLE_BINDINGS: Priority bindings, so the text editors never
            consume tab, escape or ctrl+r themselves.
    """

    FOCUS_CYCLE_BINDINGS = [
        Binding("tab", "next_focus", "next", priority=True),
        Binding("shift+tab", "prev_focus", "prev", priority=True),
        Binding("escape", "quit", "quit", priority=True),
        Binding("ctrl+c", "quit", "quit", show=False, priority=True),
        Binding("ctrl+r", "compare", "compare", priority=True),
    ]

    workbench: Workbench

    def action_next_focus(self) -> None:
        """Focus the next pane, wrapping to the first."""
        self._apply(NextFocus())
        self._focus_active_widget()

    def action_prev_focus(self) -> None:
        """Focus the previous pane, wrapping to the last."""
        self._apply(PrevFocus())
        self._focus_active_widget()

    def action_compare(self) -> None:
        """Diff the two input panes regardless of which one has focus."""
        self._apply(Compare())

    def action_quit(self) -> None:
        """Blur every pane and exit the application."""
        self._apply(Quit())
        self._update_pane_styles()
        self.app.exit()

    def on_descendant_focus(self, event: events.DescendantFocus) -> None:
        """Keep Textual focus on the pane the workbench has focused."""
        widget = event.widget
        if isinstance(widget, TextPane) and widget.pane_index != self.workbench.focus:
            self._focus_active_widget()

    def _update_pane_styles(self) -> None:
        """Update focused/blurred CSS classes on every pane."""
        for pane in self.query(TextPane):
            pane.set_active(self.workbench.buffers[pane.pane_index].focused)

    def _focus_active_widget(self) -> None:
        """Move Textual focus to the pane at the workbench's focus index."""
        if not self.workbench.running:
            return
        for pane in self.query(TextPane):
            if pane.pane_index == self.workbench.focus:
                pane.focus()
                break
        self._update_pane_styles()

    def _apply(self, command: Command) -> bool:
        """Dispatch a command to the workbench and redraw.

        Subclasses must implement this method.
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement _apply()"
        )
