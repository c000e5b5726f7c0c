"""
Base handler class for range-based matrix operations.

Provides common functionality for all handlers:
- Range loading with error handling
- Matrix write-back at an A1 anchor
- Response helpers (ok/ng)
"""
from abc import ABC
from typing import Any, ClassVar

from sheets_client import SheetsClient
from env_loader import get_default_spreadsheet_id, get_default_sheet_name
from lib.common import ok, ng, log
from lib.errors import InvalidArgument, bad_request, not_found, sheet_error
from lib.sheet_utils import a1_range, parse_a1_cell


class BaseHandler(ABC):
    """
    Abstract base class for all sheet-range handlers.

    Subclasses may define:
    - DEFAULT_FILE_ID: Default spreadsheet ID (falls back to MATRIX_SPREADSHEET_ID)
    - DEFAULT_SHEET_NAME: Default sheet name (falls back to MATRIX_SHEET_NAME)

    Example:
        class ReportHandler(BaseHandler):
            DEFAULT_FILE_ID = "abc123"
            DEFAULT_SHEET_NAME = "Report"
    """

    DEFAULT_FILE_ID: ClassVar[str | None] = None
    DEFAULT_SHEET_NAME: ClassVar[str | None] = None

    def __init__(
        self,
        sheets: SheetsClient,
        file_id: str | None = None,
        sheet_name: str | None = None,
    ) -> None:
        """
        Initialize handler with sheets client and optional overrides.

        Args:
            sheets: SheetsClient instance
            file_id: Override default file ID
            sheet_name: Override default sheet name
        """
        self.sheets = sheets
        self.file_id = file_id or self.DEFAULT_FILE_ID or get_default_spreadsheet_id()
        self.sheet_name = sheet_name or self.DEFAULT_SHEET_NAME or get_default_sheet_name()

        # Lazily loaded
        self._values: list[list[Any]] | None = None

    # === Properties ===

    @property
    def values(self) -> list[list[Any]]:
        """Values of the last loaded range."""
        return self._values or []

    # === Range Loading ===

    def read_range(self, a1: str | None = None, sheet_name: str | None = None) -> list[list[Any]]:
        """
        Read a range, or the whole sheet when a1 is None, as a raw matrix.
        Exceptions from the sheets client propagate.
        """
        sheet = sheet_name or self.sheet_name
        log("SHEETS READ", self.file_id, sheet, a1 or "<all>")
        if a1:
            return self.sheets.get_range(self.file_id, sheet, a1)
        return self.sheets.get_all_values(self.file_id, sheet)

    def load_range(self, op_name: str, a1: str | None = None) -> dict | None:
        """
        Load range values with error handling.

        Args:
            op_name: Operation name for error messages
            a1: A1 range to read; None reads the whole sheet

        Returns:
            Error dict if failed, None on success.
            On success, populates self._values.
        """
        if not self.file_id:
            return bad_request(op_name, "spreadsheet id is not configured")
        try:
            self._values = self.read_range(a1)
        except Exception as e:
            log("SHEETS READ FAILED", op_name, e)
            return not_found(op_name, f"range not found: {e}")
        return None

    # === Write-back ===

    def write_matrix(
        self,
        op_name: str,
        dest: str,
        matrix: list[list[Any]],
        clear: str | None = None,
    ) -> tuple[str | None, dict | None]:
        """
        Write a matrix with its top-left cell at dest.

        Args:
            op_name: Operation name for error messages
            dest: A1 anchor cell (a range uses its top-left cell)
            matrix: Values to write; ragged rows are fine
            clear: A1 range to blank before writing, so a smaller result
                leaves no stale cells behind

        Returns:
            (written_range, None) on success, (None, error_dict) on failure

        Raises:
            InvalidArgument: If dest is not an A1 reference
        """
        top, left = parse_a1_cell(dest)
        shape = self._shape_of(matrix)
        target = a1_range(top, left, shape["rows"], shape["cols"])
        log("SHEETS WRITE", self.file_id, self.sheet_name, target)
        try:
            if clear:
                log("SHEETS CLEAR", self.file_id, self.sheet_name, clear)
                self.sheets.clear_range(self.file_id, self.sheet_name, clear)
            self.sheets.update_range(self.file_id, self.sheet_name, target, matrix)
        except Exception as e:
            log("SHEETS WRITE FAILED", op_name, e)
            return None, sheet_error(op_name, f"write failed: {e}")
        return target, None

    # === Response Helpers ===

    def _ok(self, op: str, data: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Return success response.

        Args:
            op: Operation name
            data: Response data

        Returns:
            Success response dict
        """
        return ok(op, data or {})

    def _error(
        self,
        op: str,
        code: str,
        message: str,
        extra: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Return error response.

        Args:
            op: Operation name
            code: Error code
            message: Error message
            extra: Additional error data

        Returns:
            Error response dict
        """
        return ng(op, code, message, extra)

    @staticmethod
    def _shape_of(values: list[Any]) -> dict[str, int]:
        """Report the row count and widest row of a result matrix."""
        return {
            "rows": len(values),
            "cols": max((len(r) for r in values if r is not None), default=0),
        }

    @staticmethod
    def _same_anchor(dest: str, source: str) -> bool:
        """True when dest and source share a top-left cell."""
        try:
            return parse_a1_cell(dest) == parse_a1_cell(source)
        except InvalidArgument:
            return False
