"""
Input parsing and validation utilities.

Functions for normalizing matrix operation inputs, handling the
scalar-or-array forms that spreadsheet ranges arrive in.
"""
from collections.abc import Sequence
from typing import Any

from lib.common import to_number_or_none
from lib.errors import InvalidArgument


def _is_sequence(x: Any) -> bool:
    return isinstance(x, Sequence) and not isinstance(x, (str, bytes, bytearray))


def coerce_int(x: Any) -> int | None:
    """
    Extract an integer from a cell-like value.

    Handles:
    - int (but not bool)
    - Whole floats such as 2.0 (sheets return numbers as floats)
    - Numeric strings such as "2" or " 3 "

    Args:
        x: Input value

    Returns:
        Integer or None if the value is not a whole number
    """
    if isinstance(x, bool):
        return None
    if isinstance(x, int):
        return x
    n = to_number_or_none(x)
    if isinstance(n, float) and n.is_integer():
        return int(n)
    if isinstance(n, int):
        return n
    return None


def coerce_dimension(x: Any, name: str) -> int:
    """
    Validate a row or column count.

    Args:
        x: Requested size
        name: Parameter name for the error message

    Returns:
        Non-negative integer size

    Raises:
        InvalidArgument: If x is not a whole number or is negative
    """
    n = coerce_int(x)
    if n is None:
        raise InvalidArgument(f"{name} must be an integer, got {x!r}")
    if n < 0:
        raise InvalidArgument(f"{name} must be >= 0, got {n}")
    return n


def coerce_index(x: Any, name: str) -> int:
    """
    Validate a single 1-based index and return it unchanged.
    Range checks are left to the caller, which knows the matrix bounds.

    Raises:
        InvalidArgument: If x is not a whole number
    """
    n = coerce_int(x)
    if n is None:
        raise InvalidArgument(f"{name} must be an integer index, got {x!r}")
    return n


def coerce_bool(x: Any) -> bool | None:
    """
    Extract a boolean from a host flag value.

    Handles:
    - bool
    - 0 / 1
    - Strings "true"/"false", "1"/"0", "yes"/"no" in any case

    Returns:
        Extracted boolean or None if the value is not a recognizable flag
    """
    if isinstance(x, bool):
        return x
    if isinstance(x, int) and x in (0, 1):
        return bool(x)
    if isinstance(x, str):
        lower = x.lower().strip()
        if lower in ("true", "1", "yes"):
            return True
        if lower in ("false", "0", "no"):
            return False
    return None


def as_flag(x: Any, name: str) -> bool:
    """
    Validate a boolean option such as vertical or ignore_undefined.

    Raises:
        InvalidArgument: If x is not a recognizable flag
    """
    flag = coerce_bool(x)
    if flag is None:
        raise InvalidArgument(f"{name} must be a boolean, got {x!r}")
    return flag


def as_index_list(x: Any, name: str = "indices") -> list[int]:
    """
    Normalize a scalar-or-sequence index argument to a list of ints.

    Handles:
    - Single index -> [index]
    - Any sequence of indices (list, tuple, range) -> list of indices
    - One-row range [[1, 3]] or one-column range [[1], [3]] -> [1, 3]

    Args:
        x: Input value
        name: Parameter name for error messages

    Returns:
        List of 1-based indices in the given order

    Raises:
        InvalidArgument: If x or any element is not a whole number
    """
    if _is_sequence(x):
        items: list[Any] = []
        for v in x:
            if _is_sequence(v):
                items.extend(v)
            else:
                items.append(v)
        return [coerce_index(v, name) for v in items]
    if x is None:
        raise InvalidArgument(f"{name} is required")
    return [coerce_index(x, name)]


def as_matrix(x: Any, name: str = "matrix") -> list:
    """
    Check that x can be used as a matrix (a list or tuple of rows).

    Tuples are converted to lists so callers can mutate the result.

    Raises:
        InvalidArgument: If x or any present row is not a sequence
    """
    if isinstance(x, tuple):
        x = list(x)
    if not isinstance(x, list):
        raise InvalidArgument(f"{name} must be a list of rows, got {type(x).__name__}")
    for i, row in enumerate(x, 1):
        if row is not None and not isinstance(row, (list, tuple)):
            raise InvalidArgument(f"{name} row {i} must be a list, got {type(row).__name__}")
    return x
