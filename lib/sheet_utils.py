"""
Sheet utility functions.
A1 notation helpers used to address ranges when reading and writing matrices.
"""
import re

from lib.errors import InvalidArgument

_A1_CELL = re.compile(r"^\$?([A-Za-z]+)\$?(\d+)$")


def col_letter_to_index(letter: str) -> int:
    """
    Convert column letter(s) to 0-based index.
    A -> 0, B -> 1, ..., Z -> 25, AA -> 26, etc.
    """
    result = 0
    for char in letter.upper():
        result = result * 26 + (ord(char) - ord("A") + 1)
    return result - 1


def index_to_col_letter(index: int) -> str:
    """
    Convert 0-based index to column letter(s).
    0 -> A, 1 -> B, ..., 25 -> Z, 26 -> AA, etc.
    """
    result = ""
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        result = chr(ord("A") + remainder) + result
    return result


def parse_a1_cell(cell: str) -> tuple[int, int]:
    """
    Parse a single A1 cell reference into a 1-based (row, column) pair.
    "B3" -> (3, 2). A range such as "B3:D9" uses its top-left cell.

    Raises:
        InvalidArgument: If the reference is not A1 notation
    """
    ref = str(cell).split("!")[-1].split(":")[0].strip()
    match = _A1_CELL.match(ref)
    if not match or int(match.group(2)) < 1:
        raise InvalidArgument(f"not an A1 cell reference: {cell!r}")
    return int(match.group(2)), col_letter_to_index(match.group(1)) + 1


def a1_range(top: int, left: int, rows: int, cols: int) -> str:
    """
    Build the A1 range covering rows x cols cells from 1-based (top, left).
    a1_range(2, 1, 3, 2) -> "A2:B4". A zero-size block collapses to its anchor.
    """
    start = f"{index_to_col_letter(left - 1)}{top}"
    if rows <= 0 or cols <= 0:
        return start
    end = f"{index_to_col_letter(left + cols - 2)}{top + rows - 1}"
    return f"{start}:{end}"
