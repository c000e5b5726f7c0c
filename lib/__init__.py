"""
Utility libraries for the matrix toolkit.
Contains pure, stateless functions over spreadsheet matrices.
"""
from .common import is_empty, cells_equal, to_number_or_none, ok, ng, log
from .errors import ErrorCode, MatrixError, InvalidArgument, OutOfRange
from .input_parser import as_index_list, coerce_dimension
from .shape import used_extent, is_empty_matrix
from .resize import resize
from .join import join
from .select import filter_rows, slice_matrix, slice_cols, slice_rows, index
from .sheet_utils import a1_range, parse_a1_cell, col_letter_to_index, index_to_col_letter
from .types import (
    Response,
    SuccessResponse,
    ErrorResponse,
    ErrorDetail,
    Cell,
    Row,
    Matrix,
    Extent,
    IndexList,
)

__all__ = [
    # Types
    "Response",
    "SuccessResponse",
    "ErrorResponse",
    "ErrorDetail",
    "Cell",
    "Row",
    "Matrix",
    "Extent",
    "IndexList",
    # Errors
    "ErrorCode",
    "MatrixError",
    "InvalidArgument",
    "OutOfRange",
    # Matrix operations
    "used_extent",
    "is_empty_matrix",
    "resize",
    "join",
    "filter_rows",
    "slice_matrix",
    "slice_cols",
    "slice_rows",
    "index",
    # Helpers
    "is_empty",
    "cells_equal",
    "to_number_or_none",
    "as_index_list",
    "coerce_dimension",
    "ok",
    "ng",
    "log",
    "a1_range",
    "parse_a1_cell",
    "col_letter_to_index",
    "index_to_col_letter",
]
