"""Tests for the Myers diff engine and diff span helpers."""

from __future__ import annotations

import random

import pytest

from conftest import TEXT_PAIRS
from textdiff.diffing import (
    DiffKind,
    DiffOp,
    compute_diff,
    diff_summary,
    merge_ops,
    new_text,
    old_text,
)


def lcs_length(a: str, b: str) -> int:
    """Reference LCS length by dynamic programming."""
    prev = [0] * (len(b) + 1)
    for char_a in a:
        curr = [0]
        for j, char_b in enumerate(b):
            if char_a == char_b:
                curr.append(prev[j] + 1)
            else:
                curr.append(max(prev[j + 1], curr[j]))
        prev = curr
    return prev[-1]


def edit_size(ops) -> int:
    """Number of inserted plus deleted characters in a diff."""
    return sum(len(op.text) for op in ops if op.kind is not DiffKind.EQUAL)


def as_pairs(ops) -> list[tuple[str, str]]:
    return [(op.kind.value, op.text) for op in ops]


class TestComputeDiffReconstruction:
    """Old and new texts must be recoverable from every diff."""

    @pytest.mark.parametrize("old,new", TEXT_PAIRS)
    def test_old_side_rebuilds_old(self, old, new):
        """EQUAL + DELETE spans should rebuild the first text."""
        assert old_text(compute_diff(old, new)) == old

    @pytest.mark.parametrize("old,new", TEXT_PAIRS)
    def test_new_side_rebuilds_new(self, old, new):
        """EQUAL + INSERT spans should rebuild the second text."""
        assert new_text(compute_diff(old, new)) == new

    @pytest.mark.parametrize("old,new", TEXT_PAIRS)
    def test_deterministic(self, old, new):
        """Repeated calls should return identical results."""
        assert compute_diff(old, new) == compute_diff(old, new)

    def test_random_texts_rebuild(self):
        """Random texts over a small alphabet should always rebuild."""
        rng = random.Random(1234)
        for _ in range(200):
            old = "".join(rng.choice("ab\n ") for _ in range(rng.randint(0, 30)))
            new = "".join(rng.choice("ab\n ") for _ in range(rng.randint(0, 30)))
            ops = compute_diff(old, new)
            assert old_text(ops) == old
            assert new_text(ops) == new


class TestComputeDiffMinimality:
    """The edit script must be a shortest one."""

    @pytest.mark.parametrize("old,new", TEXT_PAIRS)
    def test_edit_size_matches_lcs(self, old, new):
        """Inserted + deleted characters should equal n + m - 2 * LCS."""
        ops = compute_diff(old, new)
        expected = len(old) + len(new) - 2 * lcs_length(old, new)
        assert edit_size(ops) == expected

    def test_random_texts_are_minimal(self):
        """Random texts should always produce a shortest script."""
        rng = random.Random(42)
        for _ in range(200):
            old = "".join(rng.choice("abc") for _ in range(rng.randint(0, 25)))
            new = "".join(rng.choice("abc") for _ in range(rng.randint(0, 25)))
            ops = compute_diff(old, new)
            assert edit_size(ops) == len(old) + len(new) - 2 * lcs_length(old, new)

    def test_longer_random_texts_are_minimal(self):
        """Texts long enough to split several times should stay shortest."""
        rng = random.Random(7)
        for _ in range(5):
            old = "".join(rng.choice("abcd\n") for _ in range(300))
            new = "".join(rng.choice("abcd\n") for _ in range(300))
            ops = compute_diff(old, new)
            assert old_text(ops) == old
            assert new_text(ops) == new
            assert edit_size(ops) == len(old) + len(new) - 2 * lcs_length(old, new)


class TestComputeDiffLargeInputs:
    """Tests for inputs a few thousand characters long."""

    def test_repeated_disjoint_chars(self):
        """Two unrelated runs should become one DELETE and one INSERT."""
        old = "a" * 2000
        new = "b" * 2000
        ops = compute_diff(old, new)
        assert as_pairs(ops) == [("delete", old), ("insert", new)]

    def test_random_disjoint_alphabets(self):
        """Texts sharing no character should rebuild with every char edited."""
        rng = random.Random(99)
        old = "".join(rng.choice("abcdefgh \n") for _ in range(2000))
        new = "".join(rng.choice("ABCDEFGH\t") for _ in range(2000))
        ops = compute_diff(old, new)
        assert old_text(ops) == old
        assert new_text(ops) == new
        assert edit_size(ops) == 4000

    def test_scattered_edits_in_long_text(self):
        """A long text with a few edits should rebuild and stay small."""
        rng = random.Random(2024)
        old = "".join(rng.choice("abcdefghij \n") for _ in range(2000))
        chars = list(old)
        for _ in range(20):
            chars[rng.randrange(len(chars))] = "#"
        new = "".join(chars)
        ops = compute_diff(old, new)
        assert old_text(ops) == old
        assert new_text(ops) == new
        assert edit_size(ops) <= 40


class TestComputeDiffEdgeCases:
    """Tests for empty and identical inputs."""

    def test_both_empty(self):
        """Two empty texts should produce no spans."""
        assert compute_diff("", "") == ()

    def test_empty_old_is_single_insert(self):
        """Empty first text should produce one INSERT of the second."""
        assert compute_diff("", "abc\ndef") == (DiffOp(DiffKind.INSERT, "abc\ndef"),)

    def test_empty_new_is_single_delete(self):
        """Empty second text should produce one DELETE of the first."""
        assert compute_diff("abc\ndef", "") == (DiffOp(DiffKind.DELETE, "abc\ndef"),)

    def test_identical_is_single_equal(self):
        """Identical texts should produce one EQUAL span."""
        assert compute_diff("same\ntext", "same\ntext") == (
            DiffOp(DiffKind.EQUAL, "same\ntext"),
        )

    def test_hello_scenario(self):
        """Appending text should be one EQUAL then one INSERT."""
        assert as_pairs(compute_diff("Hello", "Hello Go bro ")) == [
            ("equal", "Hello"),
            ("insert", " Go bro "),
        ]

    def test_single_substitution(self):
        """A changed middle character should be DELETE then INSERT."""
        assert as_pairs(compute_diff("abc", "axc")) == [
            ("equal", "a"),
            ("delete", "b"),
            ("insert", "x"),
            ("equal", "c"),
        ]

    def test_newlines_are_characters(self):
        """Character granularity should diff newlines like any character."""
        assert as_pairs(compute_diff("a\nb", "a b")) == [
            ("equal", "a"),
            ("delete", "\n"),
            ("insert", " "),
            ("equal", "b"),
        ]

    def test_unknown_granularity_raises(self):
        """Unknown granularity should raise ValueError."""
        with pytest.raises(ValueError, match="granularity"):
            compute_diff("a", "b", granularity="word")


class TestComputeDiffMerging:
    """Spans should never be fragmented."""

    @pytest.mark.parametrize("old,new", TEXT_PAIRS)
    def test_no_adjacent_same_kind(self, old, new):
        """Neighbouring spans should always differ in kind."""
        ops = compute_diff(old, new)
        for first, second in zip(ops, ops[1:]):
            assert first.kind is not second.kind

    @pytest.mark.parametrize("old,new", TEXT_PAIRS)
    def test_delete_precedes_insert(self, old, new):
        """An INSERT should never be directly followed by a DELETE."""
        ops = compute_diff(old, new)
        for first, second in zip(ops, ops[1:]):
            assert not (first.kind is DiffKind.INSERT and second.kind is DiffKind.DELETE)

    @pytest.mark.parametrize("old,new", TEXT_PAIRS)
    def test_no_empty_spans(self, old, new):
        """Every span should carry text."""
        assert all(op.text for op in compute_diff(old, new))


class TestLineGranularity:
    """Tests for line-level diffs."""

    def test_changed_line(self):
        """A replaced line should be one DELETE and one INSERT of whole lines."""
        ops = compute_diff("a\nb\nc\n", "a\nx\nc\n", granularity="line")
        assert as_pairs(ops) == [
            ("equal", "a\n"),
            ("delete", "b\n"),
            ("insert", "x\n"),
            ("equal", "c\n"),
        ]

    def test_missing_final_newline(self):
        """The last line without a newline should still be a token."""
        ops = compute_diff("a\nb", "a\nb\n", granularity="line")
        assert old_text(ops) == "a\nb"
        assert new_text(ops) == "a\nb\n"
        assert as_pairs(ops) == [("equal", "a\n"), ("delete", "b"), ("insert", "b\n")]

    @pytest.mark.parametrize("old,new", TEXT_PAIRS)
    def test_line_mode_rebuilds(self, old, new):
        """Line granularity should rebuild both texts too."""
        ops = compute_diff(old, new, granularity="line")
        assert old_text(ops) == old
        assert new_text(ops) == new


class TestMergeOps:
    """Tests for merge_ops function."""

    def test_merges_equal_runs(self):
        """Consecutive EQUAL tokens should become one span."""
        steps = [(DiffKind.EQUAL, "a"), (DiffKind.EQUAL, "b")]
        assert merge_ops(steps) == (DiffOp(DiffKind.EQUAL, "ab"),)

    def test_groups_change_region(self):
        """Interleaved edits should become one DELETE then one INSERT."""
        steps = [
            (DiffKind.EQUAL, "a"),
            (DiffKind.INSERT, "b"),
            (DiffKind.DELETE, "c"),
            (DiffKind.INSERT, "d"),
            (DiffKind.DELETE, "e"),
            (DiffKind.EQUAL, "f"),
        ]
        assert as_pairs(merge_ops(steps)) == [
            ("equal", "a"),
            ("delete", "ce"),
            ("insert", "bd"),
            ("equal", "f"),
        ]

    def test_skips_empty_tokens(self):
        """Empty tokens should not produce spans."""
        assert merge_ops([(DiffKind.INSERT, ""), (DiffKind.EQUAL, "")]) == ()


class TestDiffSummary:
    """Tests for diff_summary function."""

    def test_counts_characters(self):
        """Summary should count characters per kind."""
        summary = diff_summary(compute_diff("Hello", "Hello Go bro "))
        assert summary == {"unchanged": 5, "added": 8, "removed": 0}

    def test_empty(self):
        """Empty diff should have zero counts."""
        assert diff_summary(()) == {"unchanged": 0, "added": 0, "removed": 0}
