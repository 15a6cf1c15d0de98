"""Tests for diff/batch.py -- document pairs, tree collection and concurrent diffs."""

import pytest

from docdiff.diff.batch import (
    DocumentPair,
    collect_document_pairs,
    diff_document,
    diff_documents,
)
from docdiff.errors import InputTooLargeError


@pytest.fixture
def trees(tmp_path):
    """Two small doc trees: one modified, one added, one removed, one unchanged."""
    old = tmp_path / "old"
    new = tmp_path / "new"
    for root in (old, new):
        (root / "guide").mkdir(parents=True)
        (root / ".gitkeep").write_text("")

    (old / "index.md").write_text("# Home\nWelcome")
    (new / "index.md").write_text("# Home\nWelcome!")

    (old / "guide" / "setup.md").write_text("same")
    (new / "guide" / "setup.md").write_text("same")

    (old / "removed.md").write_text("bye")
    (new / "guide" / "added.md").write_text("hi")

    (new / "notes.txt").write_text("not markdown")
    return old, new


# ---------------------------------------------------------------------------
# diff_document tests
# ---------------------------------------------------------------------------


class TestDiffDocument:
    """Tests for diff_document()."""

    def test_modified(self):
        result = diff_document(DocumentPair(name="a.md", old_text="a", new_text="b"))
        assert result.name == "a.md"
        assert result.status == "modified"
        assert result.stats.changed == 1

    def test_unchanged(self):
        result = diff_document(DocumentPair(name="a.md", old_text="a", new_text="a"))
        assert result.status == "unchanged"

    def test_added(self):
        result = diff_document(DocumentPair(name="a.md", new_text="x\ny"))
        assert result.status == "added"
        assert result.stats.added == 2

    def test_deleted(self):
        result = diff_document(DocumentPair(name="a.md", old_text="x"))
        assert result.status == "deleted"
        assert result.stats.deleted == 1

    def test_max_lines(self):
        with pytest.raises(InputTooLargeError):
            diff_document(
                DocumentPair(name="a.md", old_text="1\n2\n3", new_text=""),
                max_lines=2,
            )


# ---------------------------------------------------------------------------
# diff_documents tests
# ---------------------------------------------------------------------------


class TestDiffDocuments:
    """Tests for the async diff_documents()."""

    async def test_preserves_input_order(self):
        pairs = [
            DocumentPair(name=f"doc{i}.md", old_text="a", new_text="a" * i)
            for i in range(10)
        ]
        results = await diff_documents(pairs, max_parallel=3)
        assert [r.name for r in results] == [p.name for p in pairs]

    async def test_results_match_sync(self):
        pairs = [
            DocumentPair(name="x.md", old_text="line1\nline2", new_text="line1\nlineX"),
        ]
        results = await diff_documents(pairs)
        assert results[0] == diff_document(pairs[0])

    async def test_empty(self):
        assert await diff_documents([]) == []

    async def test_error_propagates(self):
        pairs = [DocumentPair(name="big.md", old_text="1\n2\n3")]
        with pytest.raises(InputTooLargeError):
            await diff_documents(pairs, max_lines=1)


# ---------------------------------------------------------------------------
# collect_document_pairs tests
# ---------------------------------------------------------------------------


class TestCollectDocumentPairs:
    """Tests for collect_document_pairs()."""

    def test_pairs_by_relative_path(self, trees):
        old, new = trees
        pairs = collect_document_pairs(old, new)
        assert [p.name for p in pairs] == [
            "guide/added.md",
            "guide/setup.md",
            "index.md",
            "removed.md",
        ]

    def test_missing_side_is_none(self, trees):
        pairs = {p.name: p for p in collect_document_pairs(*trees)}
        assert pairs["guide/added.md"].old_text is None
        assert pairs["guide/added.md"].new_text == "hi"
        assert pairs["removed.md"].new_text is None

    def test_custom_pattern(self, trees):
        pairs = collect_document_pairs(*trees, pattern="*.txt")
        assert [p.name for p in pairs] == ["notes.txt"]

    def test_gitkeep_skipped(self, trees):
        pairs = collect_document_pairs(*trees, pattern="*")
        assert all(not p.name.endswith(".gitkeep") for p in pairs)

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(ValueError, match="Directory not found"):
            collect_document_pairs(tmp_path / "nope", tmp_path)

    async def test_tree_statuses(self, trees):
        results = await diff_documents(collect_document_pairs(*trees))
        assert {r.name: r.status for r in results} == {
            "guide/added.md": "added",
            "guide/setup.md": "unchanged",
            "index.md": "modified",
            "removed.md": "deleted",
        }
