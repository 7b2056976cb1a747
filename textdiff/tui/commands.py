"""
Commands delivered to the Workbench by the host UI.

The set is closed: Workbench.dispatch() matches on exactly these types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class NextFocus:
    """Move focus to the next pane, wrapping to the first."""


@dataclass(frozen=True)
class PrevFocus:
    """Move focus to the previous pane, wrapping to the last."""


@dataclass(frozen=True)
class Compare:
    """Diff the two input panes and store the rendered result."""


@dataclass(frozen=True)
class Quit:
    """Blur every pane and stop the workbench."""


@dataclass(frozen=True)
class Resize:
    """New viewport dimensions in terminal cells."""

    width: int
    height: int


@dataclass(frozen=True)
class Edit:
    """New content of a pane after the host editor changed it."""

    pane: int
    text: str


Command = Union[NextFocus, PrevFocus, Compare, Quit, Resize, Edit]
