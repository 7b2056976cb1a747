"""
Workbench Screen for typing two texts and comparing them.

Displays two editable panes side by side, a read-only result pane below
them, the key binding help bar and the wrapped, colorized diff message
area. Every key action, edit and resize is turned into a Workbench
command; the resulting RenderPlan is then applied to the widgets.
"""

from __future__ import annotations

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, TextArea

from textdiff.diffing import diff_summary
from textdiff.tui.commands import Command, Compare, Edit, Resize
from textdiff.tui.mixins import FocusCycleMixin
from textdiff.tui.widgets import DiffView, TextPane
from textdiff.tui.workbench import RenderPlan, Workbench, WorkbenchConfig


class WorkbenchScreen(FocusCycleMixin, Screen):
    """Side-by-side text input with diff output.

    The left and right panes hold the two texts. ctrl+r compares them and
    writes the colorized diff into the result pane and the message area.
    """

    CSS_PATH = "../styles/base.tcss"

    BINDINGS = FocusCycleMixin.FOCUS_CYCLE_BINDINGS

    def __init__(
        self,
        config: WorkbenchConfig | None = None,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the WorkbenchScreen.

        Args:
            config: Workbench settings. Uses the defaults if not provided.
            name: Optional name for the screen.
            id: Optional ID for the screen.
            classes: Optional CSS classes for the screen.
        """
        super().__init__(name=name, id=id, classes=classes)
        self.workbench = Workbench(config=config or WorkbenchConfig())

    def compose(self) -> ComposeResult:
        """Compose the screen layout with input, result and diff areas."""
        result_index = self.workbench.config.result_index
        with Horizontal(id="inputs-container"):
            for idx in range(result_index):
                yield TextPane(idx, id=f"pane-{idx}")
        yield TextPane(result_index, read_only=True, id="result-pane")
        yield Footer()
        with VerticalScroll(id="diff-container"):
            yield DiffView(id="diff-view")

    def on_mount(self) -> None:
        """Size the panes for the current terminal and focus the first pane."""
        self._apply(Resize(self.app.size.width, self.app.size.height))
        self._focus_active_widget()

    def on_resize(self, event: events.Resize) -> None:
        """Recompute pane geometry when the terminal is resized."""
        self._apply(Resize(event.size.width, event.size.height))

    def on_text_area_changed(self, message: TextArea.Changed) -> None:
        """Forward edits of an input pane to the workbench.

        An edit the workbench rejects (the pane is not the focused one) is
        undone in the widget, so the pane always shows its buffer's text.
        """
        pane = message.text_area
        if not isinstance(pane, TextPane) or pane.read_only:
            return
        if self._apply(Edit(pane.pane_index, pane.text)):
            return
        buffer_text = self.workbench.buffers[pane.pane_index].text
        if pane.text != buffer_text:
            pane.load_text(buffer_text)
            self.notify(
                f"Pane {pane.pane_index + 1} is not focused; edit discarded",
                severity="warning",
            )

    def action_compare(self) -> None:
        """Compare the two inputs and report a short summary."""
        super().action_compare()
        summary = diff_summary(self.workbench.ops)
        if not summary["added"] and not summary["removed"]:
            self.notify("No differences")
        else:
            self.notify(
                f"{summary['added']} added, {summary['removed']} removed, "
                f"{summary['unchanged']} unchanged"
            )

    def _apply(self, command: Command) -> bool:
        """Dispatch a command and redraw if the state changed."""
        changed = self.workbench.dispatch(command)
        if changed:
            self._render_plan(
                self.workbench.render(), refresh_result=isinstance(command, Compare)
            )
        return changed

    def _render_plan(self, plan: RenderPlan, refresh_result: bool = False) -> None:
        """Apply pane sizes, result text and the wrapped diff to the widgets.

        Args:
            plan: The frame returned by Workbench.render().
            refresh_result: Reload the result pane's text (after Compare).
        """
        for idx, view in enumerate(plan.inputs):
            pane = self.query_one(f"#pane-{idx}", TextPane)
            pane.styles.width = view.size.width
            pane.styles.height = view.size.height

        result_pane = self.query_one("#result-pane", TextPane)
        result_pane.styles.width = plan.result.size.width
        result_pane.styles.height = plan.result.size.height
        if refresh_result:
            result_pane.load_text(plan.result.text)

        self.query_one("#diff-view", DiffView).show_diff(plan.diff)
