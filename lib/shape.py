"""
Used-extent analysis for raw sheet matrices.
"""
from typing import Any

from lib.common import is_empty
from lib.input_parser import as_matrix
from lib.types import Extent


def used_extent(matrix: Any) -> Extent:
    """
    Compute the used extent (row_count, col_count) of a matrix.

    The extent is the smallest rectangle anchored at (1, 1) containing every
    non-empty cell; trailing blank rows and columns do not count.
    A matrix with no non-empty cell reports (1, 1), never (0, 0).

    Raises:
        InvalidArgument: If matrix is not a list of rows
    """
    matrix = as_matrix(matrix)
    max_row = -1
    max_col = -1
    for r, row in enumerate(matrix):
        if not row:
            continue
        for c, cell in enumerate(row):
            if not is_empty(cell):
                max_row = max(max_row, r)
                max_col = max(max_col, c)

    if max_row < 0:
        return 1, 1
    return max_row + 1, max_col + 1


def is_empty_matrix(matrix: Any) -> bool:
    """Return True if no cell in the matrix is non-empty."""
    matrix = as_matrix(matrix)
    return not any(
        not is_empty(cell)
        for row in matrix if row
        for cell in row
    )
