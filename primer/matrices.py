"""Dense integer matrices held as lists of rows."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


class MatrixShapeError(ValueError):
    """Raised when matrix dimensions do not fit the operation."""


def _shape(matrix: Matrix) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise MatrixShapeError("rows have different lengths")
    return rows, cols


def add_matrices(a: Matrix, b: Matrix) -> list[list[int]]:
    """Element-wise sum of two matrices of the same shape."""
    if _shape(a) != _shape(b):
        raise MatrixShapeError("matrices have different shapes")
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def multiply_matrices(a: Matrix, b: Matrix) -> list[list[int]]:
    """Matrix product; the columns of ``a`` must match the rows of ``b``."""
    _, cols_a = _shape(a)
    rows_b, _ = _shape(b)
    if cols_a != rows_b:
        raise MatrixShapeError("Cannot multiply")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def transpose(matrix: Matrix) -> list[list[int]]:
    """Rows become columns."""
    _shape(matrix)
    return [list(column) for column in zip(*matrix)]


def format_matrix(matrix: Matrix) -> str:
    """One line per row, each value followed by a space."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in matrix)