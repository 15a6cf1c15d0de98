"""Diff report formatting functions.

Provides presentation-ready output for classified line operations:

- ``to_rows`` -- one display row per line, change pairs split in two.
- ``summarize_operations`` -- per-type counts and similarity.
- ``format_diff_text`` -- plain-text side-by-side line listing.
- ``format_summary`` -- one-line human summary.
- ``report_to_json`` -- structured dict for machine consumers.

Escaping and HTML wrapping are left to whoever renders the rows.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Literal

from pydantic import BaseModel

from .models import (
    Added,
    Changed,
    Deleted,
    LineOperation,
    OperationType,
    Unchanged,
    operations_adapter,
)

RowKind = Literal["unchanged", "added", "deleted"]

_SIGNS: dict[str, str] = {"unchanged": " ", "added": "+", "deleted": "-"}


class DiffRow(BaseModel):
    """One rendered line of a diff table.

    Attributes:
        kind: Row classification.
        content: Line text.
        old_line_no: Old-side line number, if the line exists there.
        new_line_no: New-side line number, if the line exists there.
    """

    kind: RowKind
    content: str
    old_line_no: int | None = None
    new_line_no: int | None = None

    model_config = {"frozen": True}

    @property
    def sign(self) -> str:
        return _SIGNS[self.kind]


class DiffStats(BaseModel):
    """Per-type counts for one diff.

    Attributes:
        added: Number of ``Added`` operations.
        deleted: Number of ``Deleted`` operations.
        changed: Number of ``Changed`` operations.
        unchanged: Number of ``Unchanged`` operations.
        old_line_count: Lines in the old text.
        new_line_count: Lines in the new text.
    """

    added: int = 0
    deleted: int = 0
    changed: int = 0
    unchanged: int = 0
    old_line_count: int = 0
    new_line_count: int = 0

    model_config = {"frozen": True}

    @property
    def total_changes(self) -> int:
        return self.added + self.deleted + self.changed

    @property
    def has_changes(self) -> bool:
        return self.total_changes > 0

    @property
    def similarity(self) -> float:
        """Share of unchanged lines relative to the longer side (0.0 to 1.0)."""
        total = max(self.old_line_count, self.new_line_count)
        if total == 0:
            return 1.0
        return self.unchanged / total


# ------------------------------------------------------------------
# Rows and statistics
# ------------------------------------------------------------------


def to_rows(operations: Iterable[LineOperation]) -> list[DiffRow]:
    """Expand operations into display rows.

    A ``Changed`` operation becomes a deleted row immediately followed by
    an added row.
    """
    rows: list[DiffRow] = []
    for op in operations:
        match op:
            case Unchanged():
                rows.append(
                    DiffRow(
                        kind="unchanged",
                        content=op.content,
                        old_line_no=op.old_line_no,
                        new_line_no=op.new_line_no,
                    )
                )
            case Changed():
                rows.append(
                    DiffRow(
                        kind="deleted",
                        content=op.deleted_content,
                        old_line_no=op.old_line_no,
                    )
                )
                rows.append(
                    DiffRow(
                        kind="added",
                        content=op.added_content,
                        new_line_no=op.new_line_no,
                    )
                )
            case Added():
                rows.append(
                    DiffRow(
                        kind="added",
                        content=op.content,
                        new_line_no=op.new_line_no,
                    )
                )
            case Deleted():
                rows.append(
                    DiffRow(
                        kind="deleted",
                        content=op.content,
                        old_line_no=op.old_line_no,
                    )
                )
    return rows


def summarize_operations(
    operations: Sequence[LineOperation],
) -> DiffStats:
    """Count operations by type."""
    counts = dict.fromkeys(OperationType, 0)
    old_count = 0
    new_count = 0
    for op in operations:
        counts[OperationType(op.type)] += 1
        if op.old_line is not None:
            old_count += 1
        if op.new_line is not None:
            new_count += 1

    return DiffStats(
        added=counts[OperationType.ADDED],
        deleted=counts[OperationType.DELETED],
        changed=counts[OperationType.CHANGED],
        unchanged=counts[OperationType.UNCHANGED],
        old_line_count=old_count,
        new_line_count=new_count,
    )


# ------------------------------------------------------------------
# Human-readable output
# ------------------------------------------------------------------


def format_diff_text(
    operations: Iterable[LineOperation],
    show_line_numbers: bool = True,
) -> str:
    """Format operations as a plain-text line listing.

    Each row reads ``OLD NEW SIGN CONTENT`` where missing line numbers are
    left blank; with *show_line_numbers* off only ``SIGN CONTENT`` remains.
    """
    lines: list[str] = []
    for row in to_rows(operations):
        if show_line_numbers:
            old_no = "" if row.old_line_no is None else str(row.old_line_no)
            new_no = "" if row.new_line_no is None else str(row.new_line_no)
            lines.append(
                f"{old_no:>4} {new_no:>4} {row.sign} {row.content}"
            )
        else:
            lines.append(f"{row.sign} {row.content}")
    return "\n".join(lines)


def format_summary(stats: DiffStats, label: str = "diff") -> str:
    """One-line summary such as ``README.md: 2 added, 1 deleted, ...``."""
    if not stats.has_changes:
        return f"{label}: no changes ({stats.unchanged} lines)"
    return (
        f"{label}: {stats.added} added, {stats.deleted} deleted, "
        f"{stats.changed} changed, {stats.unchanged} unchanged "
        f"(similarity {stats.similarity:.0%})"
    )


# ------------------------------------------------------------------
# JSON output
# ------------------------------------------------------------------


def report_to_json(
    operations: Sequence[LineOperation],
    stats: DiffStats | None = None,
) -> dict[str, Any]:
    """Convert a diff into a JSON-serialisable dict.

    Returns:
        Dict with ``operations`` (tagged by ``type``) and ``stats``.
    """
    if stats is None:
        stats = summarize_operations(operations)
    return {
        "operations": operations_adapter.dump_python(
            list(operations), mode="json", exclude_none=True
        ),
        "stats": {
            **stats.model_dump(),
            "total_changes": stats.total_changes,
            "similarity": round(stats.similarity, 4),
        },
    }
