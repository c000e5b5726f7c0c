"""
Configuration constants for the matrix toolkit.
Centralizes the empty-cell marker, padding defaults, and Sheets API scopes.
"""
from typing import Final

# Explicit empty marker. gspread returns "" for blank cells, so joins and
# padding write the same thing back.
EMPTY: Final[str] = ""

# Default filler used by resize when no pad value is given
DEFAULT_PAD: Final[str] = EMPTY

# Sheet used when neither the caller nor the environment names one
DEFAULT_SHEET_NAME: Final[str] = "Sheet1"

# Google API scopes needed to read and write ranges
SCOPES: Final[list[str]] = [
    "https://www.googleapis.com/auth/spreadsheets",
    "https://www.googleapis.com/auth/drive.readonly",
]

# Strings accepted as booleans when comparing cells
TRUE_STRINGS: Final[frozenset[str]] = frozenset({"true"})
FALSE_STRINGS: Final[frozenset[str]] = frozenset({"false"})
