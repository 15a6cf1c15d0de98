"""docdiff - line diff and conflict-merge engine for documentation review."""

__version__ = "0.1.0"

from .diff import build_conflict_merged_text, compute_line_diff
from .errors import (
    ConflictMarkersPresentError,
    DocDiffError,
    InputTooLargeError,
)

__all__ = [
    "ConflictMarkersPresentError",
    "DocDiffError",
    "InputTooLargeError",
    "__version__",
    "build_conflict_merged_text",
    "compute_line_diff",
]
