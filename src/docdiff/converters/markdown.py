"""Markdown to HTML rendering using mistune.

Some review screens compare the rendered HTML of two revisions rather than
their Markdown source.  The line diff treats both the same way; this module
only produces the HTML, one block element per line where mistune emits it
that way.
"""

import re

import mistune

from .common import SUPPORTED_FORMATS, ConversionResult

_PLUGINS = ["table", "strikethrough"]


def render_markdown(markdown_text: str | None) -> str:
    """
    Render Markdown text to HTML.

    Args:
        markdown_text: Markdown formatted text (None renders as empty)

    Returns:
        HTML text without trailing newlines
    """
    if not markdown_text:
        return ""

    markdown = mistune.create_markdown(
        escape=True, plugins=_PLUGINS
    )
    result: str = markdown(markdown_text)  # type: ignore[assignment]

    # Collapse blank runs so whitespace-only differences stay out of the diff
    result = re.sub(r"\n{2,}", "\n", result)
    return result.rstrip("\n")


def convert_for_diff(
    text: str | None, source_format: str, render: bool = False
) -> ConversionResult:
    """
    Prepare a document for the line diff.

    Markdown is rendered to HTML only when *render* is set; every other
    combination passes the text through unchanged.

    Args:
        text: Document text
        source_format: 'markdown', 'html' or 'text'
        render: Render Markdown to HTML before diffing

    Returns:
        ConversionResult with the text to diff

    Raises:
        ValueError: If source_format is not supported
    """
    if source_format not in SUPPORTED_FORMATS:
        raise ValueError(
            f"Unsupported format '{source_format}': expected one of "
            f"{', '.join(sorted(SUPPORTED_FORMATS))}"
        )

    text = text or ""

    if source_format == "markdown" and render:
        warnings = []
        if re.search(r"<[a-zA-Z][^>]*>", text):
            warnings.append(
                "Raw HTML detected in Markdown - it is escaped before diffing."
            )
        return ConversionResult(
            text=render_markdown(text),
            source_format="markdown",
            target_format="html",
            converted=True,
            warnings=warnings,
        )

    return ConversionResult(
        text=text,
        source_format=source_format,
        target_format=source_format,
        converted=False,
    )
