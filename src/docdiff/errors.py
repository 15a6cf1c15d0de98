"""Exceptions raised at the edges of the diff engine.

The diff algorithm itself accepts any text and never fails; these errors
come from the guards around it (input size caps, resolution checks).  Both
concrete errors subclass ``ValueError`` so callers that already treat bad
input as ``ValueError`` keep working.
"""


class DocDiffError(Exception):
    """Base class for docdiff errors."""


class InputTooLargeError(DocDiffError, ValueError):
    """A text has more lines than the configured cap allows.

    Attributes:
        side: Which input was rejected (e.g. ``"old"``, ``"head"``).
        line_count: Number of lines in the rejected input.
        max_lines: The configured cap.
    """

    def __init__(self, side: str, line_count: int, max_lines: int):
        self.side = side
        self.line_count = line_count
        self.max_lines = max_lines
        super().__init__(
            f"{side} text has {line_count} lines, exceeding the maximum "
            f"of {max_lines}. Split the document or raise max_lines."
        )


class ConflictMarkersPresentError(DocDiffError, ValueError):
    """A merge document still contains conflict markers."""

    def __init__(self, name: str, block_count: int = 0):
        self.name = name
        self.block_count = block_count
        super().__init__(
            f"{name} still contains conflict markers "
            f"({block_count} block(s)). Resolve every "
            "'<<<<<<<'/'======='/'>>>>>>>' region before saving."
        )
