"""Shared row/column numbering for rectangular cell containers.

Both :class:`~mazegrid.grid.Grid` and :class:`~mazegrid.mask.Mask` address
their cells by a dense integer id.  A cell at row ``i`` and column ``j`` has
id ``i * num_cols + j``; the helpers here convert in both directions and
reject anything outside the container instead of clamping it.
"""

from __future__ import annotations

from typing import Tuple

Cell = int
IJ = Tuple[int, int]


class CellMatrix:
    """Base class holding the fixed dimensions of a rows x cols container."""

    def __init__(self, num_rows: int, num_cols: int) -> None:
        if num_rows < 0 or num_cols < 0:
            raise ValueError(f"dimensions must be non-negative, got {num_rows}x{num_cols}")
        self._num_rows = int(num_rows)
        self._num_cols = int(num_cols)
        self._num_cells = self._num_rows * self._num_cols

    @property
    def num_rows(self) -> int:
        return self._num_rows

    @property
    def num_cols(self) -> int:
        return self._num_cols

    @property
    def num_cells(self) -> int:
        return self._num_cells

    def contains(self, cell: Cell) -> bool:
        """Does the container include this cell id?"""
        return 0 <= cell < self._num_cells

    def cell(self, i: int, j: int) -> Cell:
        """Computes the cell id from the row and column."""
        if not (0 <= i < self._num_rows and 0 <= j < self._num_cols):
            raise IndexError(f"row/column ({i}, {j}) out of range for {self._shape()} container")
        return i * self._num_cols + j

    def i(self, cell: Cell) -> int:
        self._check(cell)
        return cell // self._num_cols

    def j(self, cell: Cell) -> int:
        self._check(cell)
        return cell % self._num_cols

    def ij(self, cell: Cell) -> IJ:
        self._check(cell)
        return cell // self._num_cols, cell % self._num_cols

    def _check(self, cell: Cell) -> None:
        if not self.contains(cell):
            raise IndexError(f"cell {cell} out of range for {self._shape()} container")

    def _shape(self) -> str:
        return f"{self._num_rows}x{self._num_cols}"


__all__ = ["Cell", "CellMatrix", "IJ"]
