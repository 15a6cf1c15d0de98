"""Line-based diff and conflict-merge engine.

Public API for diffing two revisions of a document and building a
conflict-marked merge document from them.

Architecture
------------
Text goes through a fixed pipeline: split into lines, align the two line
sequences with a longest-common-subsequence table, then walk both
sequences against the alignment to classify every line.  The classified
operations feed either the presentation helpers or the conflict merger.

Modules:

- ``splitter``   -- ``split_lines``: text blob to line list.
- ``lcs``        -- ``align_lines``: LCS dynamic programming + backtrack.
- ``classifier`` -- ``classify_lines``: unchanged/added/deleted/change walk.
- ``merger``     -- ``merge_operations`` and conflict marker detection.
- ``engine``     -- ``compute_line_diff``, ``build_conflict_merged_text``.
- ``models``     -- operation, alignment and conflict data contracts.
- ``reporter``   -- display rows, statistics, text and JSON output.
- ``fields``     -- field-level comparison of document metadata.
- ``batch``      -- concurrent diffing of many document pairs.

Usage example
-------------
::

    from docdiff.diff import build_conflict_merged_text, compute_line_diff

    ops = compute_line_diff("line1\\nline2\\nline3", "line1\\nlineX\\nline3")
    merged = build_conflict_merged_text(
        "line1\\nline2\\nline3", "line1\\nlineX\\nline3"
    )
"""

from .engine import build_conflict_merged_text, compute_line_diff
from .merger import (
    check_conflicts,
    count_conflict_blocks,
    ensure_conflicts_resolved,
    has_conflict_markers,
    merge_operations,
    parse_conflict_blocks,
)
from .models import (
    Added,
    AlignmentPair,
    Changed,
    ConflictBlock,
    ConflictCheckResult,
    Deleted,
    LineOperation,
    OperationType,
    Unchanged,
)
from .reporter import (
    DiffRow,
    DiffStats,
    format_diff_text,
    format_summary,
    report_to_json,
    summarize_operations,
    to_rows,
)

__all__ = [
    "Added",
    "AlignmentPair",
    "Changed",
    "ConflictBlock",
    "ConflictCheckResult",
    "Deleted",
    "DiffRow",
    "DiffStats",
    "LineOperation",
    "OperationType",
    "Unchanged",
    "build_conflict_merged_text",
    "check_conflicts",
    "compute_line_diff",
    "count_conflict_blocks",
    "ensure_conflicts_resolved",
    "format_diff_text",
    "format_summary",
    "has_conflict_markers",
    "merge_operations",
    "parse_conflict_blocks",
    "report_to_json",
    "summarize_operations",
    "to_rows",
]
