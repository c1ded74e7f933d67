"""Levenshtein edit distance."""

from __future__ import annotations

from typing import Any

from closestmatch.infrastructure.text import to_text

__all__ = [
    "distance",
    "distance_matrix",
    "levenshtein_distance",
]


def levenshtein_distance(s1: str, s2: str) -> int:
    """Calculate Levenshtein (edit) distance between two strings.

    The Levenshtein distance is the minimum number of single-character
    edits (insertions, deletions, substitutions) to transform s1 into s2.
    The arguments are swapped when s1 is shorter, so the rolling rows are
    sized by the shorter string and memory is O(min(len(s1), len(s2))).

    Args:
        s1: First string.
        s2: Second string.

    Returns:
        The edit distance between the strings.
    """
    if len(s1) < len(s2):
        return levenshtein_distance(s2, s1)

    if len(s2) == 0:
        return len(s1)

    # Two rows sized by the shorter string
    previous_row = list(range(len(s2) + 1))

    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def distance(a: Any, b: Any) -> int:
    """Edit distance between two values, coerced to text.

    Missing values count as empty text, so ``distance(None, "abc") == 3``.
    Characters are compared by exact code point.

    Args:
        a: First text.
        b: Second text.

    Returns:
        Non-negative edit distance, at most ``max(len(a), len(b))``.
    """
    return levenshtein_distance(to_text(a), to_text(b))


def distance_matrix(a: Any, b: Any) -> list[list[int]]:
    """Build the full dynamic-programming table for two texts.

    Cell ``[i][j]`` holds the distance between the first ``i`` characters
    of ``a`` and the first ``j`` characters of ``b``; the bottom-right cell
    equals ``distance(a, b)``. Intended for inspecting how a distance was
    reached; ``distance`` itself keeps only two rows.

    Args:
        a: First text (rows).
        b: Second text (columns).

    Returns:
        A ``(len(a) + 1) x (len(b) + 1)`` list of rows.
    """
    s1 = to_text(a)
    s2 = to_text(b)

    matrix = [[0] * (len(s2) + 1) for _ in range(len(s1) + 1)]
    for i in range(len(s1) + 1):
        matrix[i][0] = i
    for j in range(len(s2) + 1):
        matrix[0][j] = j

    for i, c1 in enumerate(s1, start=1):
        for j, c2 in enumerate(s2, start=1):
            matrix[i][j] = min(
                matrix[i - 1][j] + 1,
                matrix[i][j - 1] + 1,
                matrix[i - 1][j - 1] + (c1 != c2),
            )

    return matrix
