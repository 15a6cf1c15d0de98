"""Common types and utilities for preparing documents for diffing."""

import re
from dataclasses import dataclass, field

SUPPORTED_FORMATS: frozenset[str] = frozenset({"markdown", "html", "text"})

_HTML_BLOCK_TAG = re.compile(
    r"</?(?:p|div|h[1-6]|ul|ol|li|table|tr|td|th|pre|code|blockquote|span)\b[^>]*>",
    re.IGNORECASE,
)


@dataclass
class ConversionResult:
    """Result of preparing a document for diffing.

    Attributes:
        text: Text to feed to the line diff
        source_format: Format of the input text ('markdown', 'html' or 'text')
        target_format: Format of the output text
        converted: True if the text was rendered, False if passed through
        warnings: Notes about constructs that may diff poorly
    """

    text: str
    source_format: str = "text"
    target_format: str = "text"
    converted: bool = False
    warnings: list[str] = field(default_factory=list)


def detect_format_heuristic(text: str) -> str:
    """Guess whether *text* is HTML, Markdown or plain text.

    Priority:
    1. Block-level HTML tags -> 'html'
    2. Markdown headings, fences, lists or links -> 'markdown'
    3. Otherwise 'text'
    """
    if len(_HTML_BLOCK_TAG.findall(text)) >= 2:
        return "html"

    if re.search(r"^#{1,6}\s+\S", text, re.MULTILINE):
        return "markdown"

    md_score = (
        text.count("**")  # bold
        + text.count("```")  # code fence
        + text.count("](")  # link
        + len(re.findall(r"^\s*[-*+]\s+\S", text, re.MULTILINE))  # list
    )
    return "markdown" if md_score > 0 else "text"
