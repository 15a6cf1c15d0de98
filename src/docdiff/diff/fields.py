"""Field-level comparison of two document or category revisions.

Complements the line diff for the short metadata fields (title,
description) shown above the body diff on a change-suggestion page.
Revisions are plain mappings; a missing revision means the record was
created (no original) or deleted (no current) on the branch.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel

DEFAULT_FIELDS: tuple[str, ...] = ("title", "description")


class FieldStatus(str, Enum):
    """How a field differs between two revisions."""

    ADDED = "added"
    DELETED = "deleted"
    MODIFIED = "modified"
    UNCHANGED = "unchanged"


class FieldChange(BaseModel):
    """Change of one field.

    Attributes:
        status: Kind of change.
        current: Value on the branch revision (``None`` when deleted).
        original: Value on the original revision (``None`` when added).
    """

    status: FieldStatus
    current: Any = None
    original: Any = None

    model_config = {"frozen": True}


def _is_deleted(revision: Mapping[str, Any] | None) -> bool:
    return revision is None or bool(revision.get("is_deleted", False))


def diff_fields(
    original: Mapping[str, Any] | None,
    current: Mapping[str, Any] | None,
    fields: Sequence[str] = DEFAULT_FIELDS,
) -> dict[str, FieldChange]:
    """Compare *fields* of two revisions.

    Args:
        original: The revision the branch started from, or ``None`` if the
            record was created on the branch.
        current: The branch revision, or ``None`` if it was deleted.  A
            revision flagged ``is_deleted`` counts as deleted as well.
        fields: Field names to compare.

    Returns:
        Mapping of field name to change.  For a created record every field
        is ``added``; for a deleted record every field is ``deleted``;
        otherwise only fields whose values differ are included, as
        ``modified``.
    """
    if original is None and current is None:
        return {}

    if original is None:
        return {
            name: FieldChange(
                status=FieldStatus.ADDED, current=current.get(name)
            )
            for name in fields
        }

    if _is_deleted(current):
        return {
            name: FieldChange(
                status=FieldStatus.DELETED, original=original.get(name)
            )
            for name in fields
        }

    changes: dict[str, FieldChange] = {}
    for name in fields:
        before = original.get(name)
        after = current.get(name)
        if before != after:
            changes[name] = FieldChange(
                status=FieldStatus.MODIFIED,
                current=after,
                original=before,
            )
    return changes


def determine_operation(
    original: Mapping[str, Any] | None,
    current: Mapping[str, Any] | None,
) -> Literal["created", "deleted", "updated"]:
    """Classify a revision pair as created, deleted or updated."""
    if original is None:
        return "created"
    if _is_deleted(current):
        return "deleted"
    return "updated"
