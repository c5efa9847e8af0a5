"""
Shape and Index value types.

Both are NamedTuples so they compare equal to, unpack like, and can be
used anywhere a plain (int, int) tuple is expected.
"""

from __future__ import annotations

from typing import NamedTuple


class Shape(NamedTuple):
    """Matrix dimensions as (nrows, ncols)."""
    nrows: int
    ncols: int

    @property
    def size(self) -> int:
        """Total number of elements."""
        return self.nrows * self.ncols

    def transpose(self) -> Shape:
        return Shape(self.ncols, self.nrows)

    def __str__(self) -> str:
        return f"Shape({self.nrows}, {self.ncols})"


class Index(NamedTuple):
    """Element position as (row, col)."""
    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"
