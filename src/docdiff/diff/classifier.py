"""Classify lines into unchanged/added/deleted/change operations.

Walks both line sequences once against an LCS alignment.  Unaligned lines
that sit on both sides before the same anchor are paired up one-to-one, by
position, into ``Changed`` operations; any surplus on one side falls out as
plain ``Deleted`` or ``Added`` operations.  Lines after the last anchor are
paired the same way.
"""

from __future__ import annotations

from collections.abc import Sequence

from .models import (
    Added,
    AlignmentPair,
    Changed,
    Deleted,
    LineOperation,
    Unchanged,
)


def classify_lines(
    old_lines: Sequence[str],
    new_lines: Sequence[str],
    alignment: Sequence[AlignmentPair],
) -> list[LineOperation]:
    """Turn an alignment into an ordered list of line operations.

    Args:
        old_lines: Lines of the old text.
        new_lines: Lines of the new text.
        alignment: Output of ``align_lines(old_lines, new_lines)``.

    Past the last anchor, a step with a line left on both sides yields a
    single ``Changed`` instead of a ``Deleted`` followed by an ``Added``, so
    ``classify_lines(["a"], ["b"], [])`` is one change.  Both forms cover the
    same lines, and merge output is identical either way; only the operation
    list and the change/added/deleted counts differ.

    Returns:
        Operations covering every line of both sequences, in order.
    """
    m = len(old_lines)
    n = len(new_lines)

    operations: list[LineOperation] = []
    old_index = 0
    new_index = 0
    old_line_no = 1
    new_line_no = 1
    common_index = 0

    while old_index < m or new_index < n:
        next_common = (
            alignment[common_index]
            if common_index < len(alignment)
            else None
        )

        if next_common is None:
            # Tail: nothing left to align against
            if old_index < m and new_index < n:
                operations.append(
                    Changed(
                        deleted_content=old_lines[old_index],
                        added_content=new_lines[new_index],
                        old_line_no=old_line_no,
                        new_line_no=new_line_no,
                    )
                )
                old_index += 1
                new_index += 1
                old_line_no += 1
                new_line_no += 1
                continue
            if old_index < m:
                operations.append(
                    Deleted(
                        content=old_lines[old_index],
                        old_line_no=old_line_no,
                    )
                )
                old_index += 1
                old_line_no += 1
            if new_index < n:
                operations.append(
                    Added(
                        content=new_lines[new_index],
                        new_line_no=new_line_no,
                    )
                )
                new_index += 1
                new_line_no += 1
            continue

        if (
            old_index == next_common.old_index
            and new_index == next_common.new_index
        ):
            operations.append(
                Unchanged(
                    content=old_lines[old_index],
                    old_line_no=old_line_no,
                    new_line_no=new_line_no,
                )
            )
            old_index += 1
            new_index += 1
            old_line_no += 1
            new_line_no += 1
            common_index += 1
        elif (
            old_index < next_common.old_index
            and new_index < next_common.new_index
        ):
            operations.append(
                Changed(
                    deleted_content=old_lines[old_index],
                    added_content=new_lines[new_index],
                    old_line_no=old_line_no,
                    new_line_no=new_line_no,
                )
            )
            old_index += 1
            new_index += 1
            old_line_no += 1
            new_line_no += 1
        elif old_index < next_common.old_index:
            operations.append(
                Deleted(
                    content=old_lines[old_index],
                    old_line_no=old_line_no,
                )
            )
            old_index += 1
            old_line_no += 1
        else:
            operations.append(
                Added(
                    content=new_lines[new_index],
                    new_line_no=new_line_no,
                )
            )
            new_index += 1
            new_line_no += 1

    return operations
