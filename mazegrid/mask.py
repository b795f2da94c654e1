"""Alive/dead cell masks for irregularly shaped mazes."""

from __future__ import annotations

import random
from typing import List, Optional, Tuple, Union

import numpy as np

from .matrix import Cell, CellMatrix

MaskIndex = Union[Cell, Tuple[int, int]]


class Mask(CellMatrix):
    """A boolean flag per cell; every cell starts out alive.

    Cells are addressed with the same numbering as :class:`~mazegrid.grid.Grid`,
    so a mask can be laid over a grid of the same shape.  Indexing accepts a
    cell id or an ``(i, j)`` pair:

        mask = Mask(3, 3)
        mask[4] = False
        mask[0, 2] = False
    """

    def __init__(self, num_rows: int, num_cols: int) -> None:
        super().__init__(num_rows, num_cols)
        self._alive = np.ones(self.num_cells, dtype=bool)

    def set(self, cell: Cell, flag: bool) -> None:
        """Sets the cell's alive/dead flag."""
        self._check(cell)
        self._alive[cell] = bool(flag)

    def kill(self, cell: Cell) -> None:
        self.set(cell, False)

    def is_alive(self, cell: Cell) -> bool:
        self._check(cell)
        return bool(self._alive[cell])

    def live_count(self) -> int:
        return int(np.count_nonzero(self._alive))

    def live_cells(self) -> List[Cell]:
        """The live cells in ascending id order."""
        return [int(cell) for cell in np.flatnonzero(self._alive)]

    def random_cell(self, rng: Optional[random.Random] = None) -> Optional[Cell]:
        """Return a live cell chosen uniformly at random, or None if none are alive."""

        live = self.live_cells()
        if not live:
            return None
        rng = rng if rng is not None else random.Random()
        return live[rng.randrange(len(live))]

    def _resolve(self, index: MaskIndex) -> Cell:
        if isinstance(index, tuple):
            i, j = index
            return self.cell(i, j)
        self._check(index)
        return index

    def __getitem__(self, index: MaskIndex) -> bool:
        return bool(self._alive[self._resolve(index)])

    def __setitem__(self, index: MaskIndex, flag: bool) -> None:
        self._alive[self._resolve(index)] = bool(flag)

    def __repr__(self) -> str:
        return f"Mask({self.num_rows}, {self.num_cols}, live={self.live_count()})"


__all__ = ["Mask"]
