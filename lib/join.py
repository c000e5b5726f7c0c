"""
Join two matrices vertically (stacked rows) or horizontally (side by side).
"""
from typing import Any

from config import EMPTY
from lib.input_parser import as_matrix
from lib.resize import resize
from lib.shape import used_extent
from lib.types import Matrix


def join(matrix1: Any, matrix2: Any, vertical: bool = True) -> Matrix:
    """
    Concatenate two matrices into a new rectangular matrix.

    Both inputs are first cut down to their used extent and then padded
    with EMPTY to a common width (vertical) or height (horizontal).
    That resize happens in place, so the caller's two matrices are
    changed as a side effect.

    Result shape:
    - vertical: (rows1 + rows2) x max(cols1, cols2)
    - horizontal: max(rows1, rows2) x (cols1 + cols2)

    Raises:
        InvalidArgument: If either input is not a list of rows
    """
    matrix1 = as_matrix(matrix1, "matrix1")
    matrix2 = as_matrix(matrix2, "matrix2")
    rows1, cols1 = used_extent(matrix1)
    rows2, cols2 = used_extent(matrix2)

    if vertical:
        cols = max(cols1, cols2)
        resize(matrix1, rows1, cols, EMPTY)
        resize(matrix2, rows2, cols, EMPTY)
        return matrix1 + matrix2

    rows = max(rows1, rows2)
    resize(matrix1, rows, cols1, EMPTY)
    resize(matrix2, rows, cols2, EMPTY)
    return [left + right for left, right in zip(matrix1, matrix2)]
