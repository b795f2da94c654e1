"""Rectilinear grid of cells for building mazes.

Each cell knows its neighbors to the north, south, east and west (as the
grid boundary allows) and may be linked to other cells.  In graph terms each
cell is a node and a link is an undirected edge: a carved passage.  A new
grid has no links at all; the generators in :mod:`mazegrid.algorithms`
carve them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union

from . import analysis
from .matrix import Cell, CellMatrix


class GridDirection(Enum):
    """The directions between cells in a grid."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @classmethod
    def parse(cls, text: str) -> "GridDirection":
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f'expected direction, got "{text}"') from None

    def __str__(self) -> str:
        return self.value


@dataclass
class _CellData:
    north: Optional[Cell]
    south: Optional[Cell]
    east: Optional[Cell]
    west: Optional[Cell]
    # Insertion-ordered so that link iteration is reproducible.
    links: Dict[Cell, None] = field(default_factory=dict)

    def neighbors(self) -> List[Cell]:
        return [c for c in (self.north, self.south, self.east, self.west) if c is not None]


class Grid(CellMatrix):
    """A rows x cols grid whose cells may be linked to form a maze.

    Example usage:
        grid = Grid(10, 10)
        recursive_backtracker(grid, random.Random(7))
        print(grid)
        path = grid.longest_path()
    """

    def __init__(self, num_rows: int, num_cols: int) -> None:
        super().__init__(num_rows, num_cols)
        self._cells: List[_CellData] = []

        for cell in range(self.num_cells):
            i, j = divmod(cell, self.num_cols)
            self._cells.append(
                _CellData(
                    north=cell - self.num_cols if i > 0 else None,
                    south=cell + self.num_cols if i < self.num_rows - 1 else None,
                    east=cell + 1 if j < self.num_cols - 1 else None,
                    west=cell - 1 if j > 0 else None,
                )
            )

    # ------------------------------------------------------------------
    # Links

    def link(self, cell1: Cell, cell2: Cell) -> None:
        """Links the two cells in both directions."""
        self._check(cell1)
        self._check(cell2)
        self._cells[cell1].links[cell2] = None
        self._cells[cell2].links[cell1] = None

    def unlink(self, cell1: Cell, cell2: Cell) -> None:
        """Removes the link between the two cells, if any."""
        self._check(cell1)
        self._check(cell2)
        self._cells[cell1].links.pop(cell2, None)
        self._cells[cell2].links.pop(cell1, None)

    def links(self, cell: Cell) -> List[Cell]:
        """The cells linked to this cell, in the order the links were made."""
        self._check(cell)
        return list(self._cells[cell].links)

    def is_linked(self, cell1: Cell, cell2: Cell) -> bool:
        self._check(cell1)
        self._check(cell2)
        return cell2 in self._cells[cell1].links

    def is_linked_to(self, cell: Cell, direction: Union[GridDirection, str]) -> bool:
        """Is the cell linked to its neighbor in the given direction?

        Returns False if there is no neighbor that way.
        """
        other = self.cell_to(cell, direction)
        return other is not None and other in self._cells[cell].links

    def is_linked_north(self, cell: Cell) -> bool:
        return self.is_linked_to(cell, GridDirection.NORTH)

    def is_linked_south(self, cell: Cell) -> bool:
        return self.is_linked_to(cell, GridDirection.SOUTH)

    def is_linked_east(self, cell: Cell) -> bool:
        return self.is_linked_to(cell, GridDirection.EAST)

    def is_linked_west(self, cell: Cell) -> bool:
        return self.is_linked_to(cell, GridDirection.WEST)

    def clear(self) -> None:
        """Returns the grid to its initial state: no cell is linked to any other."""
        for data in self._cells:
            data.links.clear()

    # ------------------------------------------------------------------
    # Geometry

    def neighbors(self, cell: Cell) -> List[Cell]:
        """The cells to the north, south, east and west, in that order."""
        self._check(cell)
        return self._cells[cell].neighbors()

    def cell_to(self, cell: Cell, direction: Union[GridDirection, str]) -> Optional[Cell]:
        """The neighbor in the given direction, or None at the boundary.

        ``direction`` may also be its lower-case name; anything else raises
        ``ValueError``.
        """
        self._check(cell)
        if not isinstance(direction, GridDirection):
            direction = GridDirection.parse(direction)
        data = self._cells[cell]
        if direction is GridDirection.NORTH:
            return data.north
        if direction is GridDirection.SOUTH:
            return data.south
        if direction is GridDirection.EAST:
            return data.east
        return data.west

    def north_of(self, cell: Cell) -> Optional[Cell]:
        return self.cell_to(cell, GridDirection.NORTH)

    def south_of(self, cell: Cell) -> Optional[Cell]:
        return self.cell_to(cell, GridDirection.SOUTH)

    def east_of(self, cell: Cell) -> Optional[Cell]:
        return self.cell_to(cell, GridDirection.EAST)

    def west_of(self, cell: Cell) -> Optional[Cell]:
        return self.cell_to(cell, GridDirection.WEST)

    # ------------------------------------------------------------------
    # Path queries

    def distances(self, start: Cell) -> List[Optional[int]]:
        return analysis.distances(self, start)

    def shortest_path(self, start: Cell, goal: Cell) -> List[Cell]:
        return analysis.shortest_path(self, start, goal)

    def farthest(self, start: Cell) -> Cell:
        return analysis.farthest(self, start)

    def dead_ends(self) -> List[Cell]:
        return analysis.dead_ends(self)

    def longest_path(self) -> List[Cell]:
        return analysis.longest_path(self)

    def __str__(self) -> str:
        from .text_renderer import render_text

        return f"Grid({self.num_rows}x{self.num_cols})\n{render_text(self)}"

    def __repr__(self) -> str:
        return f"Grid({self.num_rows}, {self.num_cols})"


__all__ = ["Grid", "GridDirection"]
