"""Document preparation (Markdown rendering, format detection) for diffing."""

from .common import (
    SUPPORTED_FORMATS,
    ConversionResult,
    detect_format_heuristic,
)
from .markdown import convert_for_diff, render_markdown

__all__ = [
    "SUPPORTED_FORMATS",
    "ConversionResult",
    "convert_for_diff",
    "detect_format_heuristic",
    "render_markdown",
]
