"""Conflict-marked merge synthesis and marker detection.

Turns the classified diff of a *base* revision (old side) against a *head*
revision (new side) into a single text that a reviewer edits to resolution.

Key design choices:

* Every run of non-unchanged operations becomes exactly one conflict block,
  even when only one side contributed lines (an empty section is kept).
* Conflict markers follow Git convention with caller-supplied labels:
  ``<<<<<<< head``, ``=======``, ``>>>>>>> base``.  The head section comes
  first.
* Marker detection uses the same patterns the review workflow uses to
  decide whether a merge document has been fully resolved.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from ..errors import ConflictMarkersPresentError
from .models import (
    Added,
    Changed,
    ConflictBlock,
    ConflictCheckResult,
    Deleted,
    LineOperation,
    Unchanged,
)

logger = logging.getLogger(__name__)

START_MARKER = "<<<<<<<"
MID_MARKER = "======="
END_MARKER = ">>>>>>>"

_MARKER_PATTERNS = (
    re.compile(r"^<<<<<<<.*", re.MULTILINE),
    re.compile(r"^=======$", re.MULTILINE),
    re.compile(r"^>>>>>>>.*", re.MULTILINE),
)


def merge_operations(
    operations: Iterable[LineOperation],
    head_label: str = "head",
    base_label: str = "base",
) -> str:
    """Synthesize a conflict-marked document from classified operations.

    Args:
        operations: Output of ``compute_line_diff(base_text, head_text)``.
        head_label: Label written after the ``<<<<<<<`` marker.
        base_label: Label written after the ``>>>>>>>`` marker.

    Returns:
        The merged text, lines joined by ``\\n``.
    """
    output: list[str] = []
    head_block: list[str] = []
    base_block: list[str] = []
    in_conflict = False

    def flush() -> None:
        output.append(f"{START_MARKER} {head_label}")
        output.extend(head_block)
        output.append(MID_MARKER)
        output.extend(base_block)
        output.append(f"{END_MARKER} {base_label}")

    for op in operations:
        match op:
            case Unchanged(content=content):
                if in_conflict:
                    flush()
                    in_conflict = False
                    head_block = []
                    base_block = []
                output.append(content)
            case Changed(added_content=added, deleted_content=deleted):
                in_conflict = True
                head_block.append(added)
                base_block.append(deleted)
            case Added(content=content):
                in_conflict = True
                head_block.append(content)
            case Deleted(content=content):
                in_conflict = True
                base_block.append(content)

    if in_conflict:
        flush()

    return "\n".join(output)


def count_conflict_blocks(operations: Iterable[LineOperation]) -> int:
    """Count the conflict blocks ``merge_operations`` would emit.

    Each maximal run of non-unchanged operations is one block.  The count
    comes from the operations rather than the merged text, so document
    lines that look like markers (a setext ``=======`` underline, say) are
    never taken for conflicts.
    """
    count = 0
    in_conflict = False
    for op in operations:
        if isinstance(op, Unchanged):
            in_conflict = False
        elif not in_conflict:
            in_conflict = True
            count += 1
    return count


# ---------------------------------------------------------------------------
# Marker detection
# ---------------------------------------------------------------------------


def has_conflict_markers(text: str | None) -> bool:
    """Return ``True`` if *text* contains any line-anchored conflict marker."""
    if not text:
        return False
    return any(pattern.search(text) for pattern in _MARKER_PATTERNS)


def parse_conflict_blocks(text: str | None) -> list[ConflictBlock]:
    """Parse the conflict blocks of a merged document.

    Args:
        text: A merged document, possibly with conflict blocks.

    Returns:
        Blocks in document order.

    Raises:
        ValueError: If markers are unbalanced, nested or out of order.
    """
    blocks: list[ConflictBlock] = []
    if not text:
        return blocks

    start_line: int | None = None
    head_label = ""
    head_lines: list[str] = []
    base_lines: list[str] = []
    in_base = False

    for line_no, line in enumerate(text.split("\n"), start=1):
        if line.startswith(START_MARKER):
            if start_line is not None:
                raise ValueError(
                    f"Nested conflict marker at line {line_no}: "
                    f"block opened at line {start_line} is not closed"
                )
            start_line = line_no
            head_label = line[len(START_MARKER) :].strip()
            head_lines = []
            base_lines = []
            in_base = False
        elif line == MID_MARKER:
            if start_line is None or in_base:
                raise ValueError(
                    f"Unexpected '{MID_MARKER}' at line {line_no}"
                )
            in_base = True
        elif line.startswith(END_MARKER):
            if start_line is None or not in_base:
                raise ValueError(
                    f"Unexpected '{END_MARKER}' at line {line_no}"
                )
            blocks.append(
                ConflictBlock(
                    start_line=start_line,
                    end_line=line_no,
                    head_label=head_label,
                    base_label=line[len(END_MARKER) :].strip(),
                    head_lines=head_lines,
                    base_lines=base_lines,
                )
            )
            start_line = None
            in_base = False
        elif start_line is not None:
            (base_lines if in_base else head_lines).append(line)

    if start_line is not None:
        raise ValueError(
            f"Conflict block opened at line {start_line} is never closed"
        )

    return blocks


def check_conflicts(
    text: str | None, name: str = "document"
) -> ConflictCheckResult:
    """Report whether *text* still carries conflict markers.

    Well-formed blocks are counted; stray markers that do not form a block
    still mark the document as conflicted.
    """
    is_conflict = has_conflict_markers(text)
    block_count = 0
    if is_conflict:
        try:
            block_count = len(parse_conflict_blocks(text))
        except ValueError as e:
            logger.info("Malformed conflict markers in %s: %s", name, e)
        logger.info("Conflict markers detected in %s", name)

    return ConflictCheckResult(
        name=name, is_conflict=is_conflict, block_count=block_count
    )


def ensure_conflicts_resolved(
    text: str | None, name: str = "document"
) -> None:
    """Raise if *text* still contains conflict markers.

    Raises:
        ConflictMarkersPresentError: If any marker line remains.
    """
    result = check_conflicts(text, name)
    if result.is_conflict:
        raise ConflictMarkersPresentError(name, result.block_count)
