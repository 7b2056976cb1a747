"""
Greedy word wrapper for the rendered diff.

Text is split on whitespace, so every existing line break is dropped and
the words are packed onto lines no wider than the limit. A word is never
split; a word wider than the limit sits alone on its own line.
"""

from __future__ import annotations

import re
from typing import Iterator, Sequence

from rich.cells import cell_len
from rich.text import Text


WORD_PATTERN = re.compile(r"\S+")


def _layout(widths: Sequence[int], limit: int) -> Iterator[str]:
    """
    Yield the separator placed before each word.

    The first word gets "", every later word gets " " when it still fits
    on the current line and "\\n" otherwise.

    Args:
        widths: Display width of each word, in order.
        limit: Maximum line width.
    """
    remain = 0
    for idx, width in enumerate(widths):
        if idx == 0:
            yield ""
            remain = limit - width
        elif width + 1 > remain:
            yield "\n"
            remain = limit - width
        else:
            yield " "
            remain -= width + 1


def wrap(text: str, limit: int) -> str:
    """
    Reflow text into lines of at most ``limit`` cells.

    Widths are terminal cells, not code points: a combining mark adds no
    width, so a line may hold more than ``limit`` characters.

    Args:
        text: The text to reflow. Existing newlines are treated as
            ordinary whitespace.
        limit: Maximum line width. Zero or negative puts every word on its
            own line.

    Returns:
        The wrapped text, or ``text`` unchanged if it contains no words.

    Examples:
        >>> wrap("aa bb ccccccc", 5)
        'aa bb\\nccccccc'
    """
    words = text.split()
    if not words:
        return text

    separators = _layout([cell_len(word) for word in words], limit)
    return "".join(sep + word for sep, word in zip(separators, words))


def wrap_text(text: Text, limit: int) -> Text:
    """
    Reflow a rich Text exactly like wrap(), keeping each word's styles.

    Args:
        text: Styled text, typically ColorizedDiff.to_text().
        limit: Maximum line width.

    Returns:
        A new Text, or a copy of ``text`` if it contains no words.
    """
    spans = [match.span() for match in WORD_PATTERN.finditer(text.plain)]
    if not spans:
        return text.copy()

    words = [text[start:end] for start, end in spans]
    wrapped = Text()
    for sep, word in zip(_layout([word.cell_len for word in words], limit), words):
        wrapped.append(sep)
        wrapped.append_text(word)
    return wrapped
