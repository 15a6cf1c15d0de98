"""Tests for diff/classifier.py -- classify_lines().

Covers:
- Unchanged lines on the alignment
- Positional pairing of unaligned lines into Changed operations
- Surplus lines before an anchor (Deleted / Added)
- Tail handling after the last anchor
- Line numbering on both sides
"""

from docdiff.diff.classifier import classify_lines
from docdiff.diff.lcs import align_lines
from docdiff.diff.merger import merge_operations
from docdiff.diff.models import Added, Changed, Deleted, Unchanged
from docdiff.diff.reporter import to_rows


def _classify(old, new):
    return classify_lines(old, new, align_lines(old, new))


class TestClassifyLines:
    """Tests for classify_lines()."""

    def test_all_unchanged(self):
        ops = _classify(["a", "b"], ["a", "b"])
        assert ops == [
            Unchanged(content="a", old_line_no=1, new_line_no=1),
            Unchanged(content="b", old_line_no=2, new_line_no=2),
        ]

    def test_both_empty(self):
        assert classify_lines([], [], []) == []

    def test_changed_between_anchors(self):
        ops = _classify(["a", "b", "c"], ["a", "x", "c"])
        assert ops[1] == Changed(
            deleted_content="b",
            added_content="x",
            old_line_no=2,
            new_line_no=2,
        )

    def test_positional_pairing_with_old_surplus(self):
        """Three unaligned old lines and one new line before an anchor.

        The first old line pairs with the new line by position; the other
        two become deletions.
        """
        ops = _classify(["x1", "x2", "x3", "keep"], ["y", "keep"])
        assert ops == [
            Changed(
                deleted_content="x1",
                added_content="y",
                old_line_no=1,
                new_line_no=1,
            ),
            Deleted(content="x2", old_line_no=2),
            Deleted(content="x3", old_line_no=3),
            Unchanged(content="keep", old_line_no=4, new_line_no=2),
        ]

    def test_positional_pairing_with_new_surplus(self):
        ops = _classify(["x", "keep"], ["y1", "y2", "keep"])
        assert ops == [
            Changed(
                deleted_content="x",
                added_content="y1",
                old_line_no=1,
                new_line_no=1,
            ),
            Added(content="y2", new_line_no=2),
            Unchanged(content="keep", old_line_no=2, new_line_no=3),
        ]

    def test_pairing_is_positional_not_semantic(self):
        """Unrelated lines are still paired when they share an anchor."""
        ops = _classify(
            ["# Title", "Completely different", "end"],
            ["# Title", "Nothing alike", "end"],
        )
        assert isinstance(ops[1], Changed)
        assert ops[1].deleted_content == "Completely different"
        assert ops[1].added_content == "Nothing alike"

    def test_pure_insertion_before_anchor(self):
        ops = _classify(["a"], ["new", "a"])
        assert ops == [
            Added(content="new", new_line_no=1),
            Unchanged(content="a", old_line_no=1, new_line_no=2),
        ]

    def test_pure_deletion_before_anchor(self):
        ops = _classify(["gone", "a"], ["a"])
        assert ops == [
            Deleted(content="gone", old_line_no=1),
            Unchanged(content="a", old_line_no=2, new_line_no=1),
        ]


class TestClassifyTail:
    """Lines after the last alignment pair."""

    def test_tail_additions(self):
        ops = _classify(["a"], ["a", "b", "c"])
        assert ops[1:] == [
            Added(content="b", new_line_no=2),
            Added(content="c", new_line_no=3),
        ]

    def test_tail_deletions(self):
        ops = _classify(["a", "b", "c"], ["a"])
        assert ops[1:] == [
            Deleted(content="b", old_line_no=2),
            Deleted(content="c", old_line_no=3),
        ]

    def test_tail_pairs_then_surplus(self):
        """Both sides past the last anchor pair up, then the longer side runs out."""
        ops = _classify(["a", "b", "c"], ["a", "x"])
        assert ops[1:] == [
            Changed(
                deleted_content="b",
                added_content="x",
                old_line_no=2,
                new_line_no=2,
            ),
            Deleted(content="c", old_line_no=3),
        ]

    def test_nothing_in_common(self):
        ops = _classify(["a", "b"], ["c"])
        assert ops == [
            Changed(
                deleted_content="a",
                added_content="c",
                old_line_no=1,
                new_line_no=1,
            ),
            Deleted(content="b", old_line_no=2),
        ]

    def test_tail_change_matches_deleted_added_output(self):
        """A tail Changed shows and merges like a Deleted+Added pair would."""
        ops = classify_lines(["a"], ["b"], [])
        assert ops == [
            Changed(
                deleted_content="a",
                added_content="b",
                old_line_no=1,
                new_line_no=1,
            )
        ]
        split = [
            Deleted(content="a", old_line_no=1),
            Added(content="b", new_line_no=1),
        ]
        assert to_rows(ops) == to_rows(split)
        assert merge_operations(ops) == merge_operations(split)

    def test_swapped_lines(self):
        """["a","b"] vs ["b","a"]: "a" moves from first to last."""
        ops = _classify(["a", "b"], ["b", "a"])
        assert ops == [
            Deleted(content="a", old_line_no=1),
            Unchanged(content="b", old_line_no=2, new_line_no=1),
            Added(content="a", new_line_no=2),
        ]


class TestLineNumbers:
    """1-based numbering stays consistent on both sides."""

    def test_numbers_are_contiguous(self):
        old = ["a", "b", "c", "d", "e"]
        new = ["a", "x", "c", "y", "z", "e", "f"]
        ops = _classify(old, new)

        old_numbers = [op.old_line_no for op in ops if op.old_line is not None]
        new_numbers = [op.new_line_no for op in ops if op.new_line is not None]
        assert old_numbers == list(range(1, len(old) + 1))
        assert new_numbers == list(range(1, len(new) + 1))

    def test_unchanged_count_matches_alignment(self):
        old = ["a", "b", "c", "d"]
        new = ["b", "c", "e", "d"]
        alignment = align_lines(old, new)
        ops = classify_lines(old, new, alignment)
        unchanged = [op for op in ops if isinstance(op, Unchanged)]
        assert len(unchanged) == len(alignment)
