"""Tests for diff/reporter.py -- rows, statistics, text and JSON output."""

import json

from docdiff.diff import compute_line_diff
from docdiff.diff.reporter import (
    DiffRow,
    DiffStats,
    format_diff_text,
    format_summary,
    report_to_json,
    summarize_operations,
    to_rows,
)

SCENARIO = ("line1\nline2\nline3", "line1\nlineX\nline3")


# ---------------------------------------------------------------------------
# to_rows tests
# ---------------------------------------------------------------------------


class TestToRows:
    """Tests for to_rows()."""

    def test_changed_splits_into_deleted_then_added(self):
        rows = to_rows(compute_line_diff(*SCENARIO))
        assert rows == [
            DiffRow(kind="unchanged", content="line1", old_line_no=1, new_line_no=1),
            DiffRow(kind="deleted", content="line2", old_line_no=2),
            DiffRow(kind="added", content="lineX", new_line_no=2),
            DiffRow(kind="unchanged", content="line3", old_line_no=3, new_line_no=3),
        ]

    def test_added_and_deleted_rows(self):
        rows = to_rows(compute_line_diff("a\nb", "a\nc\nd"))
        assert [r.kind for r in rows] == ["unchanged", "deleted", "added", "added"]

    def test_empty(self):
        assert to_rows([]) == []

    def test_signs(self):
        assert DiffRow(kind="unchanged", content="").sign == " "
        assert DiffRow(kind="added", content="").sign == "+"
        assert DiffRow(kind="deleted", content="").sign == "-"


# ---------------------------------------------------------------------------
# summarize_operations tests
# ---------------------------------------------------------------------------


class TestSummarizeOperations:
    """Tests for summarize_operations() and DiffStats."""

    def test_scenario_counts(self):
        stats = summarize_operations(compute_line_diff(*SCENARIO))
        assert stats.unchanged == 2
        assert stats.changed == 1
        assert stats.added == 0
        assert stats.deleted == 0
        assert stats.old_line_count == 3
        assert stats.new_line_count == 3
        assert stats.total_changes == 1
        assert stats.has_changes

    def test_line_counts_follow_sides(self):
        stats = summarize_operations(compute_line_diff("a", "a\nb\nc"))
        assert stats.old_line_count == 1
        assert stats.new_line_count == 3
        assert stats.added == 2

    def test_no_changes(self):
        stats = summarize_operations(compute_line_diff("a\nb", "a\nb"))
        assert not stats.has_changes
        assert stats.similarity == 1.0

    def test_every_operation_type_counted(self):
        ops = compute_line_diff("keep\nold\ngone\nend", "keep\nnew\nend\nextra")
        stats = summarize_operations(ops)
        assert stats.unchanged + stats.changed + stats.added + stats.deleted == len(ops)
        assert stats.changed == 1
        assert stats.deleted == 1
        assert stats.added == 1

    def test_similarity_uses_longer_side(self):
        stats = DiffStats(unchanged=1, added=3, old_line_count=1, new_line_count=4)
        assert stats.similarity == 0.25

    def test_empty_is_fully_similar(self):
        assert DiffStats().similarity == 1.0


# ---------------------------------------------------------------------------
# format_diff_text / format_summary tests
# ---------------------------------------------------------------------------


class TestFormatDiffText:
    """Tests for format_diff_text()."""

    def test_with_line_numbers(self):
        text = format_diff_text(compute_line_diff(*SCENARIO))
        assert text.split("\n") == [
            "   1    1   line1",
            "   2      - line2",
            "        2 + lineX",
            "   3    3   line3",
        ]

    def test_without_line_numbers(self):
        text = format_diff_text(
            compute_line_diff(*SCENARIO), show_line_numbers=False
        )
        assert text == "  line1\n- line2\n+ lineX\n  line3"

    def test_empty(self):
        assert format_diff_text([]) == ""


class TestFormatSummary:
    """Tests for format_summary()."""

    def test_no_changes(self):
        stats = summarize_operations(compute_line_diff("a\nb", "a\nb"))
        assert format_summary(stats, label="doc.md") == "doc.md: no changes (2 lines)"

    def test_with_changes(self):
        stats = summarize_operations(compute_line_diff(*SCENARIO))
        assert format_summary(stats) == (
            "diff: 0 added, 0 deleted, 1 changed, 2 unchanged (similarity 67%)"
        )


# ---------------------------------------------------------------------------
# report_to_json tests
# ---------------------------------------------------------------------------


class TestReportToJson:
    """Tests for report_to_json()."""

    def test_operations_tagged_by_type(self):
        report = report_to_json(compute_line_diff(*SCENARIO))
        assert [op["type"] for op in report["operations"]] == [
            "unchanged",
            "change",
            "unchanged",
        ]
        assert report["operations"][1] == {
            "type": "change",
            "deleted_content": "line2",
            "added_content": "lineX",
            "old_line_no": 2,
            "new_line_no": 2,
        }

    def test_absent_line_numbers_omitted(self):
        report = report_to_json(compute_line_diff("", "a"))
        assert report["operations"] == [
            {"type": "added", "content": "a", "new_line_no": 1}
        ]

    def test_stats_included(self):
        report = report_to_json(compute_line_diff(*SCENARIO))
        assert report["stats"]["changed"] == 1
        assert report["stats"]["total_changes"] == 1
        assert report["stats"]["similarity"] == 0.6667

    def test_json_serialisable(self):
        report = report_to_json(compute_line_diff("a\nb", "b\nc"))
        assert json.loads(json.dumps(report)) == report

    def test_explicit_stats_used(self):
        stats = DiffStats(added=9)
        report = report_to_json([], stats)
        assert report["stats"]["added"] == 9
