"""Diff many document pairs, e.g. every Markdown file of two branch trees.

Pairs are matched by relative path.  A file present on one side only is
diffed against an empty text, so it shows up as fully added or deleted.
Each pair runs on a worker thread through ``DiffRunner``; results keep the
input order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Literal

from pydantic import BaseModel

from ..core.async_utils import DiffRunner
from ..file_handler import load_document
from .engine import compute_line_diff
from .models import LineOperation
from .reporter import DiffStats, summarize_operations

logger = logging.getLogger(__name__)

DocumentStatus = Literal["added", "deleted", "modified", "unchanged"]

_SKIPPED_NAMES = frozenset({".gitkeep"})


class DocumentPair(BaseModel):
    """Two revisions of one document.

    Attributes:
        name: Relative path or other identifier of the document.
        old_text: Old revision, ``None`` if the document did not exist.
        new_text: New revision, ``None`` if the document was removed.
    """

    name: str
    old_text: str | None = None
    new_text: str | None = None

    model_config = {"frozen": True}


class DocumentDiff(BaseModel):
    """Diff result for one document pair."""

    name: str
    status: DocumentStatus
    operations: list[LineOperation] = []
    stats: DiffStats

    model_config = {"frozen": True}


def _document_status(
    pair: DocumentPair, stats: DiffStats
) -> DocumentStatus:
    if pair.old_text is None and pair.new_text is not None:
        return "added"
    if pair.new_text is None and pair.old_text is not None:
        return "deleted"
    return "modified" if stats.has_changes else "unchanged"


def diff_document(
    pair: DocumentPair, max_lines: int | None = None
) -> DocumentDiff:
    """Diff a single document pair synchronously.

    Raises:
        InputTooLargeError: If either side exceeds *max_lines*.
    """
    operations = compute_line_diff(
        pair.old_text, pair.new_text, max_lines=max_lines
    )
    stats = summarize_operations(operations)
    return DocumentDiff(
        name=pair.name,
        status=_document_status(pair, stats),
        operations=operations,
        stats=stats,
    )


async def diff_documents(
    pairs: Sequence[DocumentPair],
    max_lines: int | None = None,
    max_parallel: int = 4,
) -> list[DocumentDiff]:
    """Diff *pairs* concurrently on worker threads.

    Args:
        pairs: Document pairs to diff.
        max_lines: Optional per-side line cap.
        max_parallel: Maximum number of diffs running at once.

    Returns:
        One ``DocumentDiff`` per pair, in input order.
    """
    runner = DiffRunner(max_parallel=max_parallel)
    logger.info(
        "Diffing %d documents (max_parallel=%d)", len(pairs), max_parallel
    )
    return await runner.gather(
        [runner.run(diff_document, pair, max_lines) for pair in pairs]
    )


# ---------------------------------------------------------------------------
# Tree collection
# ---------------------------------------------------------------------------


def _relative_files(root: Path, pattern: str) -> dict[str, Path]:
    if not root.is_dir():
        raise ValueError(f"Directory not found: {root}")
    return {
        path.relative_to(root).as_posix(): path
        for path in root.rglob(pattern)
        if path.is_file() and path.name not in _SKIPPED_NAMES
    }


def _read_optional(path: Path | None) -> str | None:
    if path is None:
        return None
    return load_document(path).text


def collect_document_pairs(
    old_root: Path, new_root: Path, pattern: str = "*.md"
) -> list[DocumentPair]:
    """Pair files matching *pattern* under two directory trees.

    Args:
        old_root: Root of the old tree.
        new_root: Root of the new tree.
        pattern: Glob applied recursively under each root.

    Returns:
        Pairs sorted by relative path.

    Raises:
        ValueError: If either root is not a directory.
    """
    old_files = _relative_files(old_root, pattern)
    new_files = _relative_files(new_root, pattern)
    names: Iterable[str] = sorted(old_files.keys() | new_files.keys())

    pairs = [
        DocumentPair(
            name=name,
            old_text=_read_optional(old_files.get(name)),
            new_text=_read_optional(new_files.get(name)),
        )
        for name in names
    ]
    logger.debug(
        "Collected %d document pairs from %s and %s",
        len(pairs),
        old_root,
        new_root,
    )
    return pairs
