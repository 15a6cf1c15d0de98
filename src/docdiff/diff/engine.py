"""Public entry points of the line diff/merge engine.

``compute_line_diff`` runs the whole pipeline (split, align, classify) for
two texts; ``build_conflict_merged_text`` feeds that result to the conflict
merger.  Both are pure and hold no state between calls, so they can be run
from several threads at once.
"""

from __future__ import annotations

import logging

from ..validators import check_input_size
from .classifier import classify_lines
from .lcs import align_lines
from .merger import merge_operations
from .models import LineOperation
from .splitter import split_lines

logger = logging.getLogger(__name__)


def compute_line_diff(
    old_text: str | None,
    new_text: str | None,
    *,
    max_lines: int | None = None,
) -> list[LineOperation]:
    """Diff two texts line by line.

    Args:
        old_text: The original text (``None`` is treated as empty).
        new_text: The modified text (``None`` is treated as empty).
        max_lines: Optional cap on the line count of either side.

    Returns:
        Classified operations covering every line of both texts.

    Raises:
        InputTooLargeError: If *max_lines* is set and either side exceeds it.
    """
    old_lines = split_lines(old_text)
    new_lines = split_lines(new_text)
    check_input_size(old_lines, max_lines, "old")
    check_input_size(new_lines, max_lines, "new")

    alignment = align_lines(old_lines, new_lines)
    operations = classify_lines(old_lines, new_lines, alignment)

    logger.debug(
        "Line diff: old=%d new=%d common=%d operations=%d",
        len(old_lines),
        len(new_lines),
        len(alignment),
        len(operations),
    )
    return operations


def build_conflict_merged_text(
    base_text: str | None,
    head_text: str | None,
    head_label: str = "head",
    base_label: str = "base",
    *,
    max_lines: int | None = None,
) -> str:
    """Build a conflict-marked merge document from two revisions.

    The base revision plays the old side of the diff and the head revision
    the new side.  Unchanged lines are copied through; every other run of
    lines becomes one conflict block with the head's lines first.

    Args:
        base_text: Current mainline revision.
        head_text: Proposed revision.
        head_label: Label for the ``<<<<<<<`` marker.
        base_label: Label for the ``>>>>>>>`` marker.
        max_lines: Optional cap on the line count of either side.

    Returns:
        The merged text, lines joined by ``\\n``.
    """
    operations = compute_line_diff(
        base_text, head_text, max_lines=max_lines
    )
    merged = merge_operations(operations, head_label, base_label)
    logger.debug(
        "Merged document built: %d operations, %d chars",
        len(operations),
        len(merged),
    )
    return merged
