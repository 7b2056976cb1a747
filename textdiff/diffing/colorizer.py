"""
Diff colorizer: maps diff spans to styled segments.

Each span is emitted with a semantic style tag and terminated by a single
newline, so a multi-line span stays one output "line" followed by one
line break. The wrapper later reflows on whitespace and consumes those
newlines.

Style Tags:
    - insertion: text only present in the second input
    - deletion: text only present in the first input
    - unchanged: text common to both inputs
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from rich.text import Text

from textdiff.diffing.base import DiffKind, DiffOp


class StyleTag(Enum):
    """Semantic style of a rendered segment."""

    INSERTION = "insertion"
    DELETION = "deletion"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class DiffTheme:
    """Rich style strings used for each style tag."""

    insertion: str = "#00ff00"
    deletion: str = "#ff0000"
    unchanged: str = ""

    def style_for(self, tag: StyleTag) -> str:
        """Return the rich style string for a tag."""
        if tag is StyleTag.INSERTION:
            return self.insertion
        if tag is StyleTag.DELETION:
            return self.deletion
        return self.unchanged


DEFAULT_THEME = DiffTheme()

# For terminals without color support
MONO_THEME = DiffTheme(insertion="bold underline", deletion="strike dim", unchanged="")

THEMES: dict[str, DiffTheme] = {
    "default": DEFAULT_THEME,
    "mono": MONO_THEME,
}

KIND_TAGS: dict[DiffKind, StyleTag] = {
    DiffKind.INSERT: StyleTag.INSERTION,
    DiffKind.DELETE: StyleTag.DELETION,
    DiffKind.EQUAL: StyleTag.UNCHANGED,
}


def get_theme(name: str) -> DiffTheme:
    """
    Look up a theme by name.

    Args:
        name: A key of THEMES.

    Returns:
        The matching DiffTheme.

    Raises:
        ValueError: If no theme has that name.
    """
    try:
        return THEMES[name]
    except KeyError:
        raise ValueError(
            f"Unknown theme: {name!r} (expected one of {', '.join(THEMES)})"
        ) from None


@dataclass(frozen=True)
class StyledSegment:
    """A text span paired with its style tag."""

    text: str
    tag: StyleTag


@dataclass(frozen=True)
class ColorizedDiff:
    """An ordered sequence of styled segments forming the rendered diff."""

    segments: tuple[StyledSegment, ...] = ()
    theme: DiffTheme = DEFAULT_THEME

    @property
    def plain(self) -> str:
        """The rendered diff without styles."""
        return "".join(segment.text for segment in self.segments)

    @property
    def is_empty(self) -> bool:
        return not self.segments

    def to_text(self) -> Text:
        """Build a rich Text with the theme's style applied to each segment."""
        text = Text()
        for segment in self.segments:
            text.append(segment.text, style=self.theme.style_for(segment.tag))
        return text


def colorize(ops: Sequence[DiffOp], theme: DiffTheme = DEFAULT_THEME) -> ColorizedDiff:
    """
    Convert diff spans into styled segments, one line break per span.

    The newline is appended once per span, never once per line embedded in
    the span's text.

    Args:
        ops: A DiffSequence from compute_diff().
        theme: Styles to render each tag with.

    Returns:
        The ColorizedDiff. Empty when ops is empty.

    Examples:
        >>> colorize(compute_diff("Hello", "Hello Go bro ")).plain
        'Hello\\n Go bro \\n'
    """
    segments: list[StyledSegment] = []
    for op in ops:
        segments.append(StyledSegment(op.text, KIND_TAGS[op.kind]))
        segments.append(StyledSegment("\n", StyleTag.UNCHANGED))
    return ColorizedDiff(tuple(segments), theme)
