"""Data contracts for the line diff/merge engine.

Defines the types passed between the diff modules:

- ``AlignmentPair``: one matched line position of the LCS.
- ``OperationType``: tag values of the operation variants.
- ``Unchanged``, ``Added``, ``Deleted``, ``Changed``: classified line
  operations, combined into the ``LineOperation`` discriminated union.
- ``ConflictBlock``: a parsed conflict region of a merged document.
- ``ConflictCheckResult``: outcome of scanning a text for markers.

Operation models are frozen pydantic models so they can be dumped to JSON
for the presentation layer unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter


@dataclass(frozen=True, slots=True)
class AlignmentPair:
    """Line ``old_index`` of the old sequence equals line ``new_index`` of the new one."""

    old_index: int
    new_index: int


class OperationType(str, Enum):
    """Tag values for line operations."""

    UNCHANGED = "unchanged"
    ADDED = "added"
    DELETED = "deleted"
    CHANGED = "change"


class Unchanged(BaseModel):
    """A line present, identical, on both sides.

    Attributes:
        content: The line text.
        old_line_no: 1-based position in the old sequence.
        new_line_no: 1-based position in the new sequence.
    """

    type: Literal["unchanged"] = "unchanged"
    content: str
    old_line_no: int
    new_line_no: int

    model_config = {"frozen": True}

    @property
    def old_line(self) -> str | None:
        return self.content

    @property
    def new_line(self) -> str | None:
        return self.content


class Added(BaseModel):
    """A line only present in the new sequence."""

    type: Literal["added"] = "added"
    content: str
    new_line_no: int
    old_line_no: None = None

    model_config = {"frozen": True}

    @property
    def old_line(self) -> str | None:
        return None

    @property
    def new_line(self) -> str | None:
        return self.content


class Deleted(BaseModel):
    """A line only present in the old sequence."""

    type: Literal["deleted"] = "deleted"
    content: str
    old_line_no: int
    new_line_no: None = None

    model_config = {"frozen": True}

    @property
    def old_line(self) -> str | None:
        return self.content

    @property
    def new_line(self) -> str | None:
        return None


class Changed(BaseModel):
    """An unaligned old line and an unaligned new line paired by position.

    The pairing is positional, not semantic: the two lines need not be
    related in any way beyond sitting between the same alignment anchors.

    Attributes:
        deleted_content: The old-side line.
        added_content: The new-side line.
        old_line_no: 1-based position of ``deleted_content``.
        new_line_no: 1-based position of ``added_content``.
    """

    type: Literal["change"] = "change"
    deleted_content: str
    added_content: str
    old_line_no: int
    new_line_no: int

    model_config = {"frozen": True}

    @property
    def old_line(self) -> str | None:
        return self.deleted_content

    @property
    def new_line(self) -> str | None:
        return self.added_content


LineOperation = Annotated[
    Union[Unchanged, Added, Deleted, Changed],
    Field(discriminator="type"),
]

operations_adapter: TypeAdapter[list[LineOperation]] = TypeAdapter(
    list[LineOperation]
)


class ConflictBlock(BaseModel):
    """One ``<<<<<<< / ======= / >>>>>>>`` region of a merged document.

    Attributes:
        start_line: 1-based line number of the ``<<<<<<<`` marker.
        end_line: 1-based line number of the ``>>>>>>>`` marker.
        head_label: Label following the opening marker.
        base_label: Label following the closing marker.
        head_lines: Lines between the opening and middle markers.
        base_lines: Lines between the middle and closing markers.
    """

    start_line: int
    end_line: int
    head_label: str
    base_label: str
    head_lines: list[str] = []
    base_lines: list[str] = []

    model_config = {"frozen": True}


class ConflictCheckResult(BaseModel):
    """Whether a (supposedly resolved) document still carries markers."""

    name: str
    is_conflict: bool
    block_count: int = 0

    model_config = {"frozen": True}
