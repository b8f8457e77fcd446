"""Rectangular cell ranges in A1 notation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple

_CELL = re.compile(r"\$?([A-Z]{1,3})\$?(\d+)")


def column_to_letters(column: int) -> str:
    """Convert a 1-based column number to its letters (1 -> ``A``)."""
    if column < 1:
        raise ValueError(f"column must be positive, got {column}")
    letters = []
    while column > 0:
        column, remainder = divmod(column - 1, 26)
        letters.append(chr(ord("A") + remainder))
    return "".join(reversed(letters))


def _letters_to_column(letters: str) -> int:
    column = 0
    for ch in letters:
        column = column * 26 + (ord(ch) - ord("A") + 1)
    return column


def _parse_cell(text: str) -> Tuple[int, int]:
    match = _CELL.fullmatch(text)
    if match is None:
        raise ValueError(f"not a cell reference: {text!r}")
    row = int(match.group(2))
    if row < 1:
        raise ValueError(f"row must be positive in {text!r}")
    return row, _letters_to_column(match.group(1))


def _cell_string(row: int, column: int, row_abs: bool, col_abs: bool) -> str:
    col_part = ("$" if col_abs else "") + column_to_letters(column)
    row_part = ("$" if row_abs else "") + str(row)
    return col_part + row_part


@dataclass(frozen=True)
class CellRange:
    """A block of cells from (first_row, first_column) to (last_row, last_column), 1-based."""

    first_row: int
    first_column: int
    last_row: int
    last_column: int

    @classmethod
    def from_string(cls, text: str) -> "CellRange":
        """Parse ``A1`` or ``A1:B2``, with optional ``$`` markers."""
        parts = text.split(":")
        if len(parts) > 2:
            raise ValueError(f"not a cell range: {text!r}")
        first_row, first_column = _parse_cell(parts[0])
        last_row, last_column = _parse_cell(parts[-1])
        return cls(first_row, first_column, last_row, last_column)

    def to_string(self, row_abs: bool = False, col_abs: bool = False) -> str:
        """Format the range; a single cell is written without a colon.

        An invalid range formats as an empty string.
        """
        if not self.is_valid():
            return ""
        first = _cell_string(self.first_row, self.first_column, row_abs, col_abs)
        if self.first_row == self.last_row and self.first_column == self.last_column:
            return first
        last = _cell_string(self.last_row, self.last_column, row_abs, col_abs)
        return f"{first}:{last}"

    def is_valid(self) -> bool:
        return (
            self.first_column > 0
            and self.first_row > 0
            and self.last_column >= self.first_column
            and self.last_row >= self.first_row
        )

    def row_count(self) -> int:
        return self.last_row - self.first_row + 1

    def column_count(self) -> int:
        return self.last_column - self.first_column + 1

    def __str__(self) -> str:
        return self.to_string()