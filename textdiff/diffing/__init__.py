"""
Text diffing module for the diff workbench.

This module computes character- or line-level edit scripts between two
texts, colorizes them and wraps the rendered result to a column limit.

Usage:
    from textdiff.diffing import colorize, compute_diff, wrap_text

    ops = compute_diff("Hello", "Hello Go bro ")
    rendered = colorize(ops).to_text()
    print(wrap_text(rendered, 80))
"""

from textdiff.diffing.base import (
    DiffKind,
    DiffOp,
    DiffSequence,
    diff_summary,
    merge_ops,
    new_text,
    old_text,
)
from textdiff.diffing.colorizer import (
    DEFAULT_THEME,
    MONO_THEME,
    THEMES,
    ColorizedDiff,
    DiffTheme,
    StyledSegment,
    StyleTag,
    colorize,
    get_theme,
)
from textdiff.diffing.myers import GRANULARITIES, compute_diff
from textdiff.diffing.wrapper import wrap, wrap_text

__all__ = [
    # Diff types
    "DiffKind",
    "DiffOp",
    "DiffSequence",
    "diff_summary",
    "merge_ops",
    "new_text",
    "old_text",
    # Engine
    "GRANULARITIES",
    "compute_diff",
    # Colorizer
    "ColorizedDiff",
    "DiffTheme",
    "StyledSegment",
    "StyleTag",
    "DEFAULT_THEME",
    "MONO_THEME",
    "THEMES",
    "colorize",
    "get_theme",
    # Wrapper
    "wrap",
    "wrap_text",
]
