"""Two-dimensional matrices with row access and checked cell access."""

from __future__ import annotations

from typing import Any


class Matrix:
    """A rows x cols grid of cells, all starting with ``fill``.

    ``m[i][j]`` gives unchecked row access; ``at`` and ``set`` raise
    ``IndexError`` for a position outside the matrix.
    """

    def __init__(self, rows: int, cols: int, fill: Any = None) -> None:
        self._data = [[fill] * cols for _ in range(rows)]

    def __getitem__(self, row: int) -> list[Any]:
        return self._data[row]

    def _check(self, row: int, col: int) -> None:
        if not self.is_valid(row, col):
            raise IndexError(f"position ({row}, {col}) is outside the matrix")

    def at(self, row: int, col: int) -> Any:
        self._check(row, col)
        return self._data[row][col]

    def set(self, row: int, col: int, value: Any) -> None:
        self._check(row, col)
        self._data[row][col] = value

    def rows(self) -> int:
        return len(self._data)

    def cols(self) -> int:
        return len(self._data[0]) if self._data else 0

    def is_valid(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows() and 0 <= col < self.cols()