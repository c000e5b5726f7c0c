"""
Resize a matrix to an exact shape, padding or truncating rows and columns.
"""
from typing import Any

from config import DEFAULT_PAD
from lib.input_parser import as_matrix, coerce_dimension
from lib.types import Matrix


def resize(matrix: Any, new_rows: Any, new_cols: Any, pad: Any = DEFAULT_PAD) -> Matrix:
    """
    Resize matrix in place to exactly new_rows x new_cols and return it.

    Grown rows and cells are filled with pad; surplus rows and cells are
    dropped without notice. Absent (None) rows become fully padded rows.
    Every argument is validated before the matrix is touched.

    Callers should use the return value: a tuple input is converted to a
    new list first.

    Raises:
        InvalidArgument: If matrix is not a list of rows, or a dimension is
            negative or not a whole number
    """
    matrix = as_matrix(matrix)
    rows = coerce_dimension(new_rows, "new_rows")
    cols = coerce_dimension(new_cols, "new_cols")

    if rows > len(matrix):
        matrix.extend([pad] * cols for _ in range(rows - len(matrix)))
    del matrix[rows:]

    for i, row in enumerate(matrix):
        if row is None:
            matrix[i] = [pad] * cols
            continue
        if not isinstance(row, list):
            row = list(row)
            matrix[i] = row
        if len(row) < cols:
            row.extend([pad] * (cols - len(row)))
        else:
            del row[cols:]
    return matrix
