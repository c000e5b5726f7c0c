"""
Matrix handler class.
OOP-based implementation using BaseHandler.

Runs the matrix operations over sheet ranges: each method reads a source
range, applies one operation, and optionally writes the result back.
"""
from __future__ import annotations

from typing import Any, Callable, ClassVar

from core.base_handler import BaseHandler
from sheets_client import SheetsClient
from config import DEFAULT_PAD
from lib.common import log
from lib.errors import MatrixError, from_exception, not_found
from lib.input_parser import as_flag
from lib.join import join
from lib.resize import resize
from lib.select import filter_rows, slice_matrix, slice_cols, slice_rows, index
from lib.shape import used_extent, is_empty_matrix


class MatrixHandler(BaseHandler):
    """
    Handler for matrix operations on sheet ranges.

    Every operation:
    - reads `source` (A1 range; None means the whole sheet)
    - returns {"ok", "op", "data"} with data.values and its rows/cols
    - writes the result at `dest` when given, reporting data.written;
      when `dest` is the top-left of `source` the source range is cleared first

    InvalidArgument maps to BAD_REQUEST and OutOfRange to OUT_OF_RANGE.
    """

    OP_PREFIX: ClassVar[str] = "matrix"

    def __init__(
        self,
        sheets: SheetsClient,
        file_id: str | None = None,
        sheet_name: str | None = None,
    ) -> None:
        """Initialize MatrixHandler with optional overrides."""
        super().__init__(sheets, file_id, sheet_name)

    def _op(self, name: str) -> str:
        return f"{self.OP_PREFIX}.{name}"

    def _run(
        self,
        op: str,
        source: str | None,
        fn: Callable[[list[list[Any]]], list[Any]],
        dest: str | None = None,
    ) -> dict[str, Any]:
        """Load source, apply fn to the matrix, and respond (writing to dest if given)."""
        error = self.load_range(op, source)
        if error:
            return error

        try:
            result = fn(self.values)
        except MatrixError as e:
            log("MATRIX OP FAILED", op, e)
            return from_exception(op, e)

        return self._respond(op, result, dest, source)

    def _respond(
        self,
        op: str,
        result: list[Any],
        dest: str | None,
        source: str | None = None,
    ) -> dict[str, Any]:
        """Build the response; an in-place write-back clears source first."""
        data: dict[str, Any] = {"values": result, **self._shape_of(result)}
        if dest:
            clear = source if source and self._same_anchor(dest, source) else None
            try:
                written, error = self.write_matrix(op, dest, result, clear=clear)
            except MatrixError as e:
                return from_exception(op, e)
            if error:
                return error
            data["written"] = written
        return self._ok(op, data)

    # === Shape ===

    def extent(self, source: str | None = None) -> dict[str, Any]:
        """
        Report the used extent of a range.

        Returns:
            Response with rows, cols and empty (True when the range has no
            non-empty cell and rows/cols are the degenerate 1 x 1)
        """
        op = self._op("extent")
        error = self.load_range(op, source)
        if error:
            return error

        rows, cols = used_extent(self.values)
        return self._ok(op, {"rows": rows, "cols": cols, "empty": is_empty_matrix(self.values)})

    def resize(
        self,
        rows: Any,
        cols: Any,
        pad: Any = DEFAULT_PAD,
        source: str | None = None,
        dest: str | None = None,
    ) -> dict[str, Any]:
        """Pad or truncate a range to exactly rows x cols."""
        return self._run(
            self._op("resize"),
            source,
            lambda m: resize(m, rows, cols, pad),
            dest,
        )

    # === Join ===

    def join(
        self,
        other: str,
        vertical: bool = True,
        source: str | None = None,
        other_sheet: str | None = None,
        dest: str | None = None,
    ) -> dict[str, Any]:
        """
        Join two ranges.

        Args:
            other: A1 range of the second matrix
            vertical: Stack rows (True) or place side by side (False)
            source: A1 range of the first matrix (None = whole sheet)
            other_sheet: Sheet holding `other` (default: this handler's sheet)
            dest: Optional anchor cell to write the joined matrix to

        Returns:
            Response with the joined values
        """
        op = self._op("join")
        error = self.load_range(op, source)
        if error:
            return error
        first = self.values

        try:
            second = self.read_range(other, other_sheet)
        except Exception as e:
            log("SHEETS READ FAILED", op, e)
            return not_found(op, f"range not found: {e}")

        try:
            result = join(first, second, vertical=as_flag(vertical, "vertical"))
        except MatrixError as e:
            log("MATRIX OP FAILED", op, e)
            return from_exception(op, e)

        return self._respond(op, result, dest, source)

    # === Selection ===

    def filter_rows(
        self,
        column: Any,
        value: Any,
        source: str | None = None,
        dest: str | None = None,
    ) -> dict[str, Any]:
        """Keep the rows whose cell in `column` (1-based) equals `value`."""
        return self._run(
            self._op("filter_rows"),
            source,
            lambda m: filter_rows(m, column, value),
            dest,
        )

    def slice(
        self,
        rows: Any,
        cols: Any,
        ignore_undefined: bool = False,
        source: str | None = None,
        dest: str | None = None,
    ) -> dict[str, Any]:
        """Extract the cells at the given 1-based row and column indices."""
        return self._run(
            self._op("slice"),
            source,
            lambda m: slice_matrix(m, rows, cols, as_flag(ignore_undefined, "ignore_undefined")),
            dest,
        )

    def slice_cols(self, cols: Any, source: str | None = None, dest: str | None = None) -> dict[str, Any]:
        return self._run(self._op("slice_cols"), source, lambda m: slice_cols(m, cols), dest)

    def slice_rows(self, rows: Any, source: str | None = None, dest: str | None = None) -> dict[str, Any]:
        return self._run(self._op("slice_rows"), source, lambda m: slice_rows(m, rows), dest)

    def index(self, row: Any, column: Any, source: str | None = None) -> dict[str, Any]:
        """Look up one cell by 1-based (row, column) within the range."""
        op = self._op("index")
        error = self.load_range(op, source)
        if error:
            return error

        try:
            value = index(self.values, row, column)
        except MatrixError as e:
            log("MATRIX OP FAILED", op, e)
            return from_exception(op, e)

        return self._ok(op, {"value": value, "row": row, "column": column})
