"""Square symmetric matrix backed by a single flat list.

Cells are addressed ``row * size + col``.  :meth:`SymmetricMatrix.grow`
re-lays the flat list into the wider shape, so existing values keep
their (row, col) coordinates and are never renumbered.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class SymmetricMatrix(Generic[T]):
    """A ``size x size`` matrix where ``m[i, j] == m[j, i]`` always holds."""

    def __init__(self, default: T, size: int = 0) -> None:
        if size < 0:
            msg = f"Matrix size must be non-negative, got {size}"
            raise ValueError(msg)
        self._default = default
        self._size = size
        self._cells: list[T] = [default] * (size * size)

    @property
    def size(self) -> int:
        return self._size

    @property
    def default(self) -> T:
        return self._default

    def _offset(self, row: int, col: int) -> int:
        if not (0 <= row < self._size and 0 <= col < self._size):
            msg = f"Cell ({row}, {col}) outside {self._size}x{self._size} matrix"
            raise IndexError(msg)
        return row * self._size + col

    def __getitem__(self, key: tuple[int, int]) -> T:
        row, col = key
        return self._cells[self._offset(row, col)]

    def __setitem__(self, key: tuple[int, int], value: T) -> None:
        row, col = key
        self._cells[self._offset(row, col)] = value
        self._cells[self._offset(col, row)] = value

    def grow(self) -> None:
        """Append one row and one column filled with the default value."""
        old = self._size
        new = old + 1
        cells = [self._default] * (new * new)
        for row in range(old):
            cells[row * new : row * new + old] = self._cells[row * old : (row + 1) * old]
        self._cells = cells
        self._size = new

    def rows(self) -> list[list[T]]:
        """Materialize the matrix as a list of row lists (copies)."""
        n = self._size
        return [self._cells[r * n : (r + 1) * n] for r in range(n)]

    def upper(self) -> Iterator[tuple[int, int, T]]:
        """Yield ``(i, j, value)`` for ``i < j`` in row-major order."""
        n = self._size
        for i in range(n):
            for j in range(i + 1, n):
                yield i, j, self._cells[i * n + j]

    def is_symmetric(self) -> bool:
        return all(self[i, j] == self[j, i] for i in range(self._size) for j in range(i))

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SymmetricMatrix(size={self._size}, default={self._default!r})"
