"""Longest-common-subsequence alignment of two line sequences.

Classic dynamic programming over an ``(m+1) x (n+1)`` table followed by a
backtrack from the bottom-right corner.  Time and memory are both O(m*n);
callers are expected to cap input size upstream (see
``docdiff.validators.check_input_size``).

When the two neighbouring cells hold equal scores the backtrack moves along
the *new* sequence.  Other minimal alignments exist for such inputs, and
which one is picked decides what later shows up as added versus deleted, so
the rule must not change without re-checking the dependent output.
"""

from __future__ import annotations

from collections.abc import Sequence

from .models import AlignmentPair


def build_lcs_table(
    old_lines: Sequence[str], new_lines: Sequence[str]
) -> list[list[int]]:
    """Return the LCS length table for *old_lines* and *new_lines*.

    ``table[i][j]`` is the LCS length of ``old_lines[:i]`` and
    ``new_lines[:j]``; row 0 and column 0 are all zeros.
    """
    m = len(old_lines)
    n = len(new_lines)
    table = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(1, m + 1):
        old_line = old_lines[i - 1]
        row = table[i]
        prev_row = table[i - 1]
        for j in range(1, n + 1):
            if old_line == new_lines[j - 1]:
                row[j] = prev_row[j - 1] + 1
            else:
                row[j] = max(prev_row[j], row[j - 1])

    return table


def align_lines(
    old_lines: Sequence[str], new_lines: Sequence[str]
) -> list[AlignmentPair]:
    """Compute the LCS alignment between two line sequences.

    Args:
        old_lines: Lines of the old text.
        new_lines: Lines of the new text.

    Returns:
        Alignment pairs of identical lines, strictly increasing in both
        ``old_index`` and ``new_index``.  Empty when either side is empty.
    """
    table = build_lcs_table(old_lines, new_lines)

    pairs: list[AlignmentPair] = []
    i = len(old_lines)
    j = len(new_lines)

    while i > 0 and j > 0:
        if old_lines[i - 1] == new_lines[j - 1]:
            pairs.append(AlignmentPair(old_index=i - 1, new_index=j - 1))
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1

    # Collected back to front
    pairs.reverse()
    return pairs
