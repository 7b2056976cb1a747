"""
Core diff types shared by the engine, colorizer and wrapper.

A diff is an ordered, immutable sequence of DiffOp spans. Concatenating the
old-side spans (EQUAL + DELETE) yields the first text; concatenating the
new-side spans (EQUAL + INSERT) yields the second text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence


class DiffKind(Enum):
    """Classification of a diff span."""

    EQUAL = "equal"
    INSERT = "insert"
    DELETE = "delete"


@dataclass(frozen=True)
class DiffOp:
    """A contiguous span of text classified as unchanged, inserted or deleted."""

    kind: DiffKind
    text: str


DiffSequence = tuple[DiffOp, ...]


def old_text(ops: Sequence[DiffOp]) -> str:
    """Rebuild the first text from the EQUAL and DELETE spans."""
    return "".join(op.text for op in ops if op.kind is not DiffKind.INSERT)


def new_text(ops: Sequence[DiffOp]) -> str:
    """Rebuild the second text from the EQUAL and INSERT spans."""
    return "".join(op.text for op in ops if op.kind is not DiffKind.DELETE)


def merge_ops(steps: Iterable[tuple[DiffKind, str]]) -> DiffSequence:
    """
    Coalesce a token-level edit script into spans.

    Runs of EQUAL tokens become one EQUAL span. Every run of non-equal
    tokens becomes at most one DELETE span followed by at most one INSERT
    span, so the result never fragments a change region.

    Args:
        steps: (kind, token) pairs in script order.

    Returns:
        The merged DiffSequence.

    Examples:
        >>> ops = merge_ops([(DiffKind.EQUAL, "a"), (DiffKind.INSERT, "b"),
        ...                  (DiffKind.DELETE, "c"), (DiffKind.INSERT, "d")])
        >>> [(op.kind.value, op.text) for op in ops]
        [('equal', 'a'), ('delete', 'c'), ('insert', 'bd')]
    """
    merged: list[DiffOp] = []
    equal: list[str] = []
    deleted: list[str] = []
    inserted: list[str] = []

    def flush_changes() -> None:
        if deleted:
            merged.append(DiffOp(DiffKind.DELETE, "".join(deleted)))
            deleted.clear()
        if inserted:
            merged.append(DiffOp(DiffKind.INSERT, "".join(inserted)))
            inserted.clear()

    for kind, token in steps:
        if not token:
            continue
        if kind is DiffKind.EQUAL:
            flush_changes()
            equal.append(token)
            continue

        if equal:
            merged.append(DiffOp(DiffKind.EQUAL, "".join(equal)))
            equal.clear()
        if kind is DiffKind.DELETE:
            deleted.append(token)
        else:
            inserted.append(token)

    flush_changes()
    if equal:
        merged.append(DiffOp(DiffKind.EQUAL, "".join(equal)))

    return tuple(merged)


def diff_summary(ops: Sequence[DiffOp]) -> dict[str, int]:
    """
    Get a summary of character counts by diff kind.

    Args:
        ops: A DiffSequence from compute_diff().

    Returns:
        A dictionary with counts for "unchanged", "added" and "removed".

    Examples:
        >>> diff_summary(compute_diff("Hello", "Hello Go bro "))
        {'unchanged': 5, 'added': 8, 'removed': 0}
    """
    summary = {
        "unchanged": 0,
        "added": 0,
        "removed": 0,
    }

    for op in ops:
        if op.kind is DiffKind.EQUAL:
            summary["unchanged"] += len(op.text)
        elif op.kind is DiffKind.INSERT:
            summary["added"] += len(op.text)
        else:
            summary["removed"] += len(op.text)

    return summary
