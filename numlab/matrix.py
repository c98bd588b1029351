"""A fixed-size two-dimensional matrix stored row-major."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Matrix2d(Generic[T]):
    """A rows x cols grid indexed as ``m[row, col]``; out-of-range access raises."""

    def __init__(self, rows: int, cols: int, value: Any = 0) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"dimensions must be non-negative, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._cells: list[T] = [value] * (rows * cols)

    def fill(self, value: T) -> None:
        """Set every cell to ``value``."""
        self._cells = [value] * (self.rows * self.cols)

    def _offset(self, key: tuple[int, int]) -> int:
        row, col = key
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"row/col out of bounds: {row}, {col}")
        return row * self.cols + col

    def __getitem__(self, key: tuple[int, int]) -> T:
        return self._cells[self._offset(key)]

    def __setitem__(self, key: tuple[int, int], value: T) -> None:
        self._cells[self._offset(key)] = value

    def format(self) -> str:
        """Return the matrix as text, one space-separated line per row."""
        return "\n".join(
            " ".join(str(v) for v in self._cells[r * self.cols : (r + 1) * self.cols])
            for r in range(self.rows)
        )

    def __str__(self) -> str:
        return self.format()