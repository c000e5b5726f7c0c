"""
Standardized error handling for the matrix toolkit.
Provides the exceptions raised by matrix operations, consistent error codes,
and response helpers for the handler layer.
"""
from enum import Enum
from typing import Any

from lib.common import ng


class ErrorCode(str, Enum):
    """Standardized error codes used across the toolkit."""
    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    SHEET_ERROR = "SHEET_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class MatrixError(Exception):
    """Base class for errors raised by matrix operations."""
    code: ErrorCode = ErrorCode.INTERNAL_ERROR


class InvalidArgument(MatrixError, ValueError):
    """A parameter has the wrong type or shape, or a size is negative."""
    code = ErrorCode.BAD_REQUEST


class OutOfRange(MatrixError, IndexError):
    """A 1-based index falls outside the matrix."""
    code = ErrorCode.OUT_OF_RANGE


def bad_request(op: str, message: str) -> dict[str, Any]:
    """Create a BAD_REQUEST error response."""
    return ng(op, ErrorCode.BAD_REQUEST, message)


def not_found(op: str, message: str) -> dict[str, Any]:
    """Create a NOT_FOUND error response."""
    return ng(op, ErrorCode.NOT_FOUND, message)


def sheet_error(op: str, message: str) -> dict[str, Any]:
    """Create a SHEET_ERROR error response."""
    return ng(op, ErrorCode.SHEET_ERROR, message)


def from_exception(op: str, exc: MatrixError) -> dict[str, Any]:
    """Convert a MatrixError into an error response carrying its code."""
    return ng(op, exc.code, str(exc))
