"""Helpers for spreadsheet-style cell addressing."""

import re

_LETTERS = re.compile(r"^[A-Za-z]+$")


def get_column_letter(col: int) -> str:
    """Convert a zero-based column index to its letter code (0 -> 'A', 26 -> 'AA')."""
    if col < 0:
        raise ValueError(f"Column index must be non-negative, got {col}")

    result = ""
    while col >= 0:
        result = chr(col % 26 + ord("A")) + result
        col = col // 26 - 1
    return result


def column_index_from_letter(letters: str) -> int:
    """Convert a column letter code to its zero-based index ('A' -> 0, 'C' -> 2).

    Args:
        letters: One or more ASCII letters, case-insensitive

    Returns:
        Zero-based column index

    Raises:
        ValueError: If the string is not made of ASCII letters only
    """
    if not isinstance(letters, str) or not _LETTERS.match(letters):
        raise ValueError(f"Invalid column letters: {letters!r}")

    index = 0
    for ch in letters.upper():
        index = index * 26 + (ord(ch) - ord("A") + 1)
    return index - 1


def cell_address(row: int, col: int) -> str:
    """Get Excel-style address (e.g., 'A1') for zero-based coordinates."""
    return f"{get_column_letter(col)}{row + 1}"
