"""Split text blobs into line sequences."""


def split_lines(text: str | None) -> list[str]:
    """Split *text* on ``\\n`` into an ordered list of lines.

    ``None`` and ``""`` both yield an empty list.  A trailing newline is
    kept as a trailing empty line, and ``\\r`` is left attached to its line.

    Args:
        text: The text blob, or ``None``.

    Returns:
        List of lines without their ``\\n`` terminators.
    """
    if not text:
        return []
    return text.split("\n")
