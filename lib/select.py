"""
Row/column selection over matrices.
Filtering, slicing and cell lookup, all by 1-based sheet indices.
"""
from typing import Any

from config import EMPTY
from lib.common import is_empty, cells_equal
from lib.errors import OutOfRange
from lib.input_parser import as_matrix, as_index_list, coerce_index
from lib.types import Cell, IndexList, Matrix


def _check_positive(idx: int, name: str) -> None:
    if idx < 1:
        raise OutOfRange(f"{name} must be >= 1, got {idx}")


def _row_at(matrix: list, row: int) -> Any:
    """Return the row at a 1-based index, raising if past the end."""
    _check_positive(row, "row")
    if row > len(matrix):
        raise OutOfRange(f"row {row} is outside the matrix ({len(matrix)} rows)")
    return matrix[row - 1]


def _cell_or_empty(row: Any, col: int) -> Cell:
    if row is None or col > len(row):
        return EMPTY
    return row[col - 1]


def filter_rows(matrix: Any, column: Any, value: Any) -> Matrix:
    """
    Return the rows whose cell in column equals value.

    Args:
        matrix: Source matrix
        column: 1-based column to test
        value: Value to match (see cells_equal); an empty value keeps every row

    Returns:
        New list of the matching rows in their original order

    Raises:
        InvalidArgument: If matrix or column has the wrong type
        OutOfRange: If column < 1
    """
    matrix = as_matrix(matrix)
    col = coerce_index(column, "column")
    _check_positive(col, "column")

    if is_empty(value):
        return list(matrix)

    return [
        row for row in matrix
        if row is not None and cells_equal(_cell_or_empty(row, col), value)
    ]


def slice_matrix(
    matrix: Any,
    rows: IndexList,
    cols: IndexList,
    ignore_undefined: bool = False,
) -> Matrix:
    """
    Extract the sub-matrix at the given row and column indices.

    Args:
        matrix: Source matrix
        rows: 1-based row index or list of indices, in output order
        cols: 1-based column index or list of indices, in output order
        ignore_undefined: Emit EMPTY for absent rows and cells instead of raising

    Returns:
        New len(rows) x len(cols) matrix

    Raises:
        InvalidArgument: If an index is not a whole number
        OutOfRange: If an index is < 1, or a row or cell is absent
            and ignore_undefined is False
    """
    matrix = as_matrix(matrix)
    row_list = as_index_list(rows, "rows")
    col_list = as_index_list(cols, "cols")
    for c in col_list:
        _check_positive(c, "column")

    result: Matrix = []
    for r in row_list:
        _check_positive(r, "row")
        row = matrix[r - 1] if r <= len(matrix) else None
        if row is None:
            if not ignore_undefined:
                raise OutOfRange(f"row {r} is outside the matrix ({len(matrix)} rows)")
            result.append([EMPTY] * len(col_list))
            continue

        out: list[Cell] = []
        for c in col_list:
            if c > len(row):
                if not ignore_undefined:
                    raise OutOfRange(f"cell ({r}, {c}) is outside row {r} ({len(row)} cells)")
                out.append(EMPTY)
            else:
                out.append(row[c - 1])
        result.append(out)
    return result


def slice_cols(matrix: Any, cols: IndexList) -> Matrix:
    """
    Keep only the requested columns of every row, in the requested order.
    Cells past the end of a short row come back as EMPTY.
    """
    matrix = as_matrix(matrix)
    col_list = as_index_list(cols, "cols")
    for c in col_list:
        _check_positive(c, "column")
    return [[_cell_or_empty(row, c) for c in col_list] for row in matrix]


def slice_rows(matrix: Any, rows: IndexList) -> Matrix:
    """
    Return the requested rows in the requested order.
    Repeated indices repeat the row; each returned row is a shallow copy
    and an absent (None) row comes back as [].

    Raises:
        OutOfRange: If an index is < 1 or past the last row
    """
    matrix = as_matrix(matrix)
    row_list = as_index_list(rows, "rows")
    result: Matrix = []
    for r in row_list:
        row = _row_at(matrix, r)
        result.append(list(row or []))
    return result


def index(matrix: Any, row: Any, column: Any) -> Cell:
    """Look up a single cell by 1-based (row, column)."""
    matrix = as_matrix(matrix)
    r = coerce_index(row, "row")
    c = coerce_index(column, "column")
    _check_positive(c, "column")
    cells = _row_at(matrix, r)
    if cells is None or c > len(cells):
        width = 0 if cells is None else len(cells)
        raise OutOfRange(f"cell ({r}, {c}) is outside row {r} ({width} cells)")
    return cells[c - 1]
