"""Exercises on two-dimensional integer matrices."""

from __future__ import annotations

from collections.abc import Sequence


def _rows(matrix: Sequence[Sequence]) -> list[list]:
    return [list(row) for row in matrix]


def _require_rectangular(rows: list[list]) -> None:
    widths = {len(row) for row in rows}
    if len(widths) > 1:
        raise ValueError("rows of a matrix must all have the same length")


def matrices_equal(first: Sequence[Sequence], second: Sequence[Sequence]) -> bool:
    """True if both matrices have the same shape and the same elements."""
    return _rows(first) == _rows(second)


def determinant_2x2(matrix: Sequence[Sequence]):
    """Determinant of a 2 x 2 matrix; ``ValueError`` for any other shape."""
    rows = _rows(matrix)
    if len(rows) != 2 or any(len(row) != 2 for row in rows):
        raise ValueError("expected a 2 x 2 matrix")
    (a, b), (c, d) = rows
    return a * d - b * c


def transpose(matrix: Sequence[Sequence]) -> list[list]:
    """Swap rows and columns of a rectangular matrix."""
    rows = _rows(matrix)
    _require_rectangular(rows)
    return [list(column) for column in zip(*rows)]


def format_matrix(matrix: Sequence[Sequence]) -> str:
    """Render a matrix as lines of space-separated elements."""
    return "\n".join(" ".join(str(item) for item in row) for row in matrix)