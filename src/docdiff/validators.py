"""
Input validation functions for docdiff.

Provides validation for conflict labels and input sizes so that oversized
or malformed inputs are rejected before the quadratic diff runs.
"""

import logging

from .errors import InputTooLargeError

logger = logging.getLogger(__name__)

_MARKER_PREFIXES = ("<<<<<<<", "=======", ">>>>>>>")


# ---------------------------------------------------------------------------
# Error message formatting helpers
# ---------------------------------------------------------------------------


def format_validation_error(field_name: str, reason: str) -> str:
    """
    Generate consistent error message for validation failures.

    Args:
        field_name: Human-readable field name (e.g., "Head label")
        reason: Description of validation failure (e.g., "cannot be empty")

    Returns:
        Formatted error message string
    """
    return f"{field_name} {reason}"


def validate_label(
    label: str, field_name: str = "Label"
) -> tuple[bool, str]:
    """
    Validate a conflict marker label.

    Args:
        label: The label to validate
        field_name: Name used in the error message

    Returns:
        Tuple of (is_valid, error_message).
        Returns (True, "") if valid, (False, reason) if invalid.

    Validation rules:
        - Cannot be empty or whitespace-only
        - Cannot contain line breaks (the marker must stay on one line)
        - Cannot itself start with a conflict marker
    """
    if not label or not label.strip():
        return (
            False,
            format_validation_error(field_name, "cannot be empty"),
        )

    if "\n" in label or "\r" in label:
        return (
            False,
            format_validation_error(
                field_name, "cannot contain line breaks"
            ),
        )

    if label.startswith(_MARKER_PREFIXES):
        return (
            False,
            format_validation_error(
                field_name, "cannot start with a conflict marker"
            ),
        )

    return (True, "")


def check_input_size(
    lines: list[str], max_lines: int | None, side: str
) -> None:
    """Raise ``InputTooLargeError`` if *lines* is longer than *max_lines*.

    A ``max_lines`` of ``None`` disables the check.
    """
    if max_lines is None:
        return
    if len(lines) > max_lines:
        logger.warning(
            "Rejecting %s text: %d lines > max_lines=%d",
            side,
            len(lines),
            max_lines,
        )
        raise InputTooLargeError(side, len(lines), max_lines)
