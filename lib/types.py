"""
Type definitions for the matrix toolkit.
Provides type aliases for cells, matrices, index lists, and handler responses.
"""
from typing import TypedDict, Any, Sequence

# Cell and matrix types
Cell = str | int | float | bool | None
Row = list[Cell]
Matrix = list[Row | None]

# Used extent as (row_count, col_count)
Extent = tuple[int, int]

# A single 1-based index or an ordered sequence of them
IndexList = int | Sequence[int]


class ErrorDetail(TypedDict):
    """Error detail structure."""
    code: str
    message: str


class SuccessResponse(TypedDict):
    """Successful handler response."""
    ok: bool
    op: str
    data: dict[str, Any]


class ErrorResponse(TypedDict):
    """Error handler response."""
    ok: bool
    op: str
    error: ErrorDetail


# Union type for all handler responses
Response = SuccessResponse | ErrorResponse
