"""
Common utility functions.
Cell predicates, cell comparison, logging and response builders.
"""
import re
import sys
from typing import Any

from config import TRUE_STRINGS, FALSE_STRINGS

_INT_STRING = re.compile(r"^[+-]?\d+$")


def log(*a: Any) -> None:
    print(*a, file=sys.stderr, flush=True)


def is_empty(cell: Any) -> bool:
    """
    Check whether a cell counts as empty.
    Absent (None) cells and whitespace-only strings are empty;
    0, False and other non-string values are not.
    """
    if cell is None:
        return True
    if isinstance(cell, str):
        return cell.strip() == ""
    return False


def to_number_or_none(val: Any) -> int | float | None:
    """
    Convert a value to a number, or return None if not possible.
    Handles empty strings and None gracefully. Booleans are not numbers.
    """
    if val is None or val == "" or isinstance(val, bool):
        return None
    try:
        if isinstance(val, int):
            return val
        if isinstance(val, float):
            return val
        s = str(val).strip()
        if s == "":
            return None
        # Whole-number strings stay exact past float precision
        if _INT_STRING.match(s):
            return int(s)
        f = float(s)
        # Return int if it's a whole number
        if f == int(f):
            return int(f)
        return f
    except (ValueError, TypeError, OverflowError):
        return None


def to_bool_or_none(val: Any) -> bool | None:
    """Read a boolean cell, accepting "TRUE"/"FALSE" strings in any case."""
    if isinstance(val, bool):
        return val
    if isinstance(val, str):
        s = val.strip().lower()
        if s in TRUE_STRINGS:
            return True
        if s in FALSE_STRINGS:
            return False
    return None


def cells_equal(a: Any, b: Any) -> bool:
    """
    Compare two cell values the way a sheet user reads them.

    - If either side is a bool, both must read as the same bool
    - If both sides read as numbers, compare numerically (1 == "1" == 1.0)
    - Otherwise compare stripped string forms, case-sensitive
    """
    if isinstance(a, bool) or isinstance(b, bool):
        ba, bb = to_bool_or_none(a), to_bool_or_none(b)
        return ba is not None and ba == bb

    na, nb = to_number_or_none(a), to_number_or_none(b)
    if na is not None and nb is not None:
        return na == nb

    if is_empty(a) and is_empty(b):
        return True
    sa = "" if a is None else str(a).strip()
    sb = "" if b is None else str(b).strip()
    return sa == sb


def ok(op: str, data: dict[str, Any] | None = None) -> dict[str, Any]:
    """Create a successful response."""
    return {"ok": True, "op": op, "data": data or {}}


def ng(op: str, code: str, message: str, extra: dict[str, Any] | None = None) -> dict[str, Any]:
    """Create an error response."""
    error: dict[str, Any] = {"code": code, "message": message}
    if extra:
        error.update(extra)
    return {"ok": False, "op": op, "error": error}
