"""
Myers shortest-edit-script diff between two texts.

Implements the linear-space refinement from "An O(ND) Difference
Algorithm and Its Variations" (Myers, 1986): the forward and reverse
greedy searches run towards each other, the path is split where they
meet, and both halves are solved recursively. Time is O((N + M) * D) and
memory O(N + M) where D is the size of the shortest edit script.

Granularity:
    - char: both texts are flat character sequences; newlines are ordinary
      characters.
    - line: tokens are lines with their line endings kept.
"""

from __future__ import annotations

from typing import Sequence

from textdiff.diffing.base import DiffKind, DiffOp, DiffSequence, merge_ops


GRANULARITIES = ("char", "line")


def compute_diff(old: str, new: str, granularity: str = "char") -> DiffSequence:
    """
    Compute a shortest edit script turning ``old`` into ``new``.

    The result is deterministic: the same inputs always produce the same
    sequence. Adjacent spans of the same kind are merged, and each change
    region is reported as one DELETE followed by one INSERT.

    Args:
        old: The first text.
        new: The second text.
        granularity: "char" (default) or "line".

    Returns:
        The DiffSequence. Empty when both texts are empty.

    Raises:
        ValueError: If granularity is not one of GRANULARITIES.

    Examples:
        >>> [(op.kind.value, op.text) for op in compute_diff("Hello", "Hello Go bro ")]
        [('equal', 'Hello'), ('insert', ' Go bro ')]
    """
    if granularity not in GRANULARITIES:
        raise ValueError(
            f"Unknown granularity: {granularity!r} "
            f"(expected one of {', '.join(GRANULARITIES)})"
        )

    if old == new:
        return (DiffOp(DiffKind.EQUAL, old),) if old else ()
    if not old:
        return (DiffOp(DiffKind.INSERT, new),)
    if not new:
        return (DiffOp(DiffKind.DELETE, old),)

    a = _tokenize(old, granularity)
    b = _tokenize(new, granularity)

    prefix = _common_prefix(a, b)
    suffix = _common_suffix(a[prefix:], b[prefix:])
    middle_a = a[prefix : len(a) - suffix]
    middle_b = b[prefix : len(b) - suffix]

    steps: list[tuple[DiffKind, str]] = [(DiffKind.EQUAL, t) for t in a[:prefix]]
    steps.extend(_edit_script(middle_a, middle_b))
    steps.extend((DiffKind.EQUAL, t) for t in a[len(a) - suffix :])

    return merge_ops(steps)


def _tokenize(text: str, granularity: str) -> list[str]:
    if granularity == "line":
        return text.splitlines(keepends=True)
    return list(text)


def _common_prefix(a: Sequence[str], b: Sequence[str]) -> int:
    """Return the length of the common prefix of two token lists."""
    limit = min(len(a), len(b))
    idx = 0
    while idx < limit and a[idx] == b[idx]:
        idx += 1
    return idx


def _common_suffix(a: Sequence[str], b: Sequence[str]) -> int:
    """Return the length of the common suffix of two token lists."""
    limit = min(len(a), len(b))
    idx = 0
    while idx < limit and a[len(a) - 1 - idx] == b[len(b) - 1 - idx]:
        idx += 1
    return idx


def _edit_script(a: Sequence[str], b: Sequence[str]) -> list[tuple[DiffKind, str]]:
    """
    Return the token-level edit script for ``a`` -> ``b`` in forward order.

    Splits the problem at the middle snake of the shortest edit path and
    recurses on the two halves, so only two frontiers are held at a time.

    Args:
        a: Old-side tokens.
        b: New-side tokens.

    Returns:
        (kind, token) pairs covering every token of both sides exactly once.
    """
    if not a:
        return [(DiffKind.INSERT, t) for t in b]
    if not b:
        return [(DiffKind.DELETE, t) for t in a]

    prefix = _common_prefix(a, b)
    suffix = _common_suffix(a[prefix:], b[prefix:])
    if prefix or suffix:
        script = [(DiffKind.EQUAL, t) for t in a[:prefix]]
        script.extend(
            _edit_script(a[prefix : len(a) - suffix], b[prefix : len(b) - suffix])
        )
        script.extend((DiffKind.EQUAL, t) for t in a[len(a) - suffix :])
        return script

    # No shared token: the whole of a goes, the whole of b comes.
    if set(a).isdisjoint(b):
        return _replace_all(a, b)

    split = _middle_snake(a, b)
    if split is None:
        return _replace_all(a, b)
    x, y = split
    return _edit_script(a[:x], b[:y]) + _edit_script(a[x:], b[y:])


def _replace_all(a: Sequence[str], b: Sequence[str]) -> list[tuple[DiffKind, str]]:
    script = [(DiffKind.DELETE, t) for t in a]
    script.extend((DiffKind.INSERT, t) for t in b)
    return script


def _middle_snake(a: Sequence[str], b: Sequence[str]) -> tuple[int, int] | None:
    """
    Find a point (x, y) on a shortest edit path from (0, 0) to (len(a), len(b)).

    Runs the forward search from the top-left corner and the reverse search
    from the bottom-right corner in lockstep until their frontiers overlap.
    Each frontier maps diagonal k = x - y to the furthest x reached on it,
    stored in a flat list offset by ``max_d``.

    Returns:
        The split point, or None when no overlap was found.
    """
    n = len(a)
    m = len(b)
    max_d = (n + m + 1) // 2
    offset = max_d
    size = 2 * max_d
    forward = [-1] * size
    forward[offset + 1] = 0
    reverse = [-1] * size
    reverse[offset + 1] = 0

    delta = n - m
    # With an odd delta the paths meet during a forward step, otherwise reverse.
    front = delta % 2 != 0

    # Diagonals that ran off the grid are skipped on later rounds.
    k1_start = k1_end = k2_start = k2_end = 0

    for d in range(max_d):
        for k1 in range(-d + k1_start, d + 1 - k1_end, 2):
            k1_idx = offset + k1
            if k1 == -d or (k1 != d and forward[k1_idx - 1] < forward[k1_idx + 1]):
                x1 = forward[k1_idx + 1]
            else:
                x1 = forward[k1_idx - 1] + 1
            y1 = x1 - k1
            while x1 < n and y1 < m and a[x1] == b[y1]:
                x1 += 1
                y1 += 1
            forward[k1_idx] = x1

            if x1 > n:
                k1_end += 2
            elif y1 > m:
                k1_start += 2
            elif front:
                k2_idx = offset + delta - k1
                if 0 <= k2_idx < size and reverse[k2_idx] != -1:
                    if x1 >= n - reverse[k2_idx]:
                        return x1, y1

        for k2 in range(-d + k2_start, d + 1 - k2_end, 2):
            k2_idx = offset + k2
            if k2 == -d or (k2 != d and reverse[k2_idx - 1] < reverse[k2_idx + 1]):
                x2 = reverse[k2_idx + 1]
            else:
                x2 = reverse[k2_idx - 1] + 1
            y2 = x2 - k2
            while x2 < n and y2 < m and a[n - 1 - x2] == b[m - 1 - y2]:
                x2 += 1
                y2 += 1
            reverse[k2_idx] = x2

            if x2 > n:
                k2_end += 2
            elif y2 > m:
                k2_start += 2
            elif not front:
                k1_idx = offset + delta - k2
                if 0 <= k1_idx < size and forward[k1_idx] != -1:
                    x1 = forward[k1_idx]
                    y1 = offset + x1 - k1_idx
                    if x1 >= n - x2:
                        return x1, y1

    return None
