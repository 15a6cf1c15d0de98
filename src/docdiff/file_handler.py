"""Document I/O for the command line and the tree batch diff.

Documents are loaded as ``SourceDocument`` values: decoded text with
``\\n`` line endings, the encoding it was stored in, and the format used to
pick a converter.  The diff engine itself never touches the file system.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from charset_normalizer import from_bytes

from docdiff.converters.common import detect_format_heuristic

logger = logging.getLogger(__name__)

_EXTENSION_FORMAT_MAP: dict[str, str] = {
    ".md": "markdown",
    ".markdown": "markdown",
    ".mdx": "markdown",
    ".html": "html",
    ".htm": "html",
    ".txt": "text",
}


@dataclass(frozen=True)
class SourceDocument:
    """A document read from disk.

    Attributes:
        path: Resolved location of the file.
        text: Decoded content with ``\\n`` line endings.
        encoding: Encoding the bytes were decoded with.
        format: ``markdown``, ``html`` or ``text``.
    """

    path: Path
    text: str
    encoding: str
    format: str


# =============================================================================
# Paths
# =============================================================================


def resolve_input_path(path_str: str | Path) -> Path:
    """Resolve a document path that must name an existing file.

    Raises:
        ValueError: If nothing exists at *path_str* or it is not a file.
    """
    path = Path(path_str).expanduser().resolve()
    if not path.exists():
        raise ValueError(f"File not found: {path_str}")
    if not path.is_file():
        raise ValueError(f"Path is not a file: {path_str}")
    return path


def resolve_output_path(path_str: str | Path) -> Path:
    """Resolve where a merge document goes.

    The file may be new, but its directory has to exist already so a typo
    in ``-o`` does not scatter directories around.

    Raises:
        ValueError: If the parent directory is missing.
    """
    path = Path(path_str).expanduser().resolve()
    if not path.parent.is_dir():
        raise ValueError(f"Output parent directory not found: {path.parent}")
    return path


# =============================================================================
# Reading and writing
# =============================================================================


def decode_document(raw: bytes) -> tuple[str, str]:
    """Decode document bytes, guessing the encoding with charset-normalizer.

    Empty input and undetectable bytes fall back to UTF-8.  ``\\r\\n`` is
    folded to ``\\n`` so Windows checkouts do not diff as fully changed.

    Returns:
        ``(text, encoding)``
    """
    if not raw:
        return "", "utf-8"

    best = from_bytes(raw).best()
    if best is None:
        logger.debug("Encoding not detected, decoding as utf-8")
        text = raw.decode("utf-8", errors="replace")
        encoding = "utf-8"
    else:
        text = str(best)
        # ascii is a subset of utf-8; report the encoding writers will use
        encoding = "utf-8" if best.encoding == "ascii" else best.encoding
    return text.replace("\r\n", "\n"), encoding


def detect_file_format(path: Path, text: str) -> str:
    """Map a file extension to a format, sniffing *text* for unknown ones."""
    fmt = _EXTENSION_FORMAT_MAP.get(path.suffix.lower())
    if fmt is None:
        fmt = detect_format_heuristic(text)
    return fmt


def load_document(path_str: str | Path) -> SourceDocument:
    """Read and decode one document.

    Args:
        path_str: Path to an existing file, relative to the working
            directory or absolute.

    Returns:
        The decoded document.

    Raises:
        ValueError: If the path does not name a file.
    """
    path = resolve_input_path(path_str)
    text, encoding = decode_document(path.read_bytes())
    doc = SourceDocument(
        path=path,
        text=text,
        encoding=encoding,
        format=detect_file_format(path, text),
    )
    logger.debug(
        "Loaded %s (%s, %s, %d chars)", path, doc.format, encoding, len(text)
    )
    return doc


def save_document(path: Path, text: str, encoding: str = "utf-8") -> int:
    """Write *text* to *path*, creating missing parents.

    Returns:
        Number of bytes written.
    """
    data = text.encode(encoding)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return len(data)
