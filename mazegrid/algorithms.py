"""Maze generation algorithms.

Every generator takes a :class:`~mazegrid.grid.Grid`, clears it, and carves
links until the grid holds a perfect maze: a spanning tree over its cells.
Randomness always comes from the ``rng`` argument so that a seeded
``random.Random`` reproduces the same maze.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Dict, List, Optional, Sequence

from .grid import Grid
from .matrix import Cell

logger = logging.getLogger(__name__)

MazeAlgorithm = Callable[[Grid, Optional[random.Random]], None]


def sample(cells: Sequence[Cell], rng: random.Random) -> Cell:
    """Pick a cell uniformly at random; a single candidate costs no randomness."""

    if not cells:
        raise ValueError("cannot sample from an empty sequence of cells")
    if len(cells) == 1:
        return cells[0]
    return cells[rng.randrange(len(cells))]


def flip(rng: random.Random, probability: float = 0.5) -> bool:
    """Flip a coin, returning True with the given probability."""
    return rng.random() < probability


def _resolve_rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def binary_tree_maze(grid: Grid, rng: Optional[random.Random] = None) -> None:
    """Link every cell to its north or east neighbor.

    The result is always a perfect maze, with an unbroken corridor along the
    top row and the rightmost column.
    """

    rng = _resolve_rng(rng)
    grid.clear()
    logger.debug("binary_tree_maze starting on %dx%d grid", grid.num_rows, grid.num_cols)

    for cell in range(grid.num_cells):
        candidates = [c for c in (grid.north_of(cell), grid.east_of(cell)) if c is not None]
        if candidates:
            grid.link(cell, sample(candidates, rng))

    logger.debug("binary_tree_maze finished %dx%d grid", grid.num_rows, grid.num_cols)


def sidewinder_maze(grid: Grid, rng: Optional[random.Random] = None) -> None:
    """Carve each row as runs of eastward passages, each run opening north once."""

    rng = _resolve_rng(rng)
    grid.clear()
    logger.debug("sidewinder_maze starting on %dx%d grid", grid.num_rows, grid.num_cols)

    for i in range(grid.num_rows):
        run: List[Cell] = []

        for j in range(grid.num_cols):
            cell = grid.cell(i, j)
            run.append(cell)

            at_eastern_boundary = grid.east_of(cell) is None
            at_northern_boundary = grid.north_of(cell) is None
            should_close_out = at_eastern_boundary or (not at_northern_boundary and not flip(rng))

            if should_close_out:
                member = sample(run, rng)
                north = grid.north_of(member)
                if north is not None:
                    grid.link(member, north)
                run.clear()
            else:
                grid.link(cell, grid.east_of(cell))

    logger.debug("sidewinder_maze finished %dx%d grid", grid.num_rows, grid.num_cols)


def hunt_and_kill(grid: Grid, rng: Optional[random.Random] = None) -> None:
    """Random walk until boxed in, then hunt for the next unvisited cell.

    A cell counts as visited once it has a link.  The hunt scans cells in
    ascending id order for the first unvisited cell beside a visited one.
    Cells the hunt can never reach are left without links.
    """

    rng = _resolve_rng(rng)
    grid.clear()
    if grid.num_cells == 0:
        return
    logger.debug("hunt_and_kill starting on %dx%d grid", grid.num_rows, grid.num_cols)

    current: Optional[Cell] = rng.randrange(grid.num_cells)
    hunts = 0

    while current is not None:
        unvisited = [c for c in grid.neighbors(current) if not grid.links(c)]

        if unvisited:
            neighbor = sample(unvisited, rng)
            grid.link(current, neighbor)
            current = neighbor
            continue

        hunts += 1
        current = None
        for cell in range(grid.num_cells):
            if grid.links(cell):
                continue
            visited = [c for c in grid.neighbors(cell) if grid.links(c)]
            if visited:
                grid.link(cell, sample(visited, rng))
                current = cell
                logger.debug("hunt %d resumed the walk at cell %d", hunts, cell)
                break

    logger.debug("hunt_and_kill finished %dx%d grid after %d hunts", grid.num_rows, grid.num_cols, hunts)


def recursive_backtracker(grid: Grid, rng: Optional[random.Random] = None) -> None:
    """Depth-first carving with an explicit stack of cells."""

    rng = _resolve_rng(rng)
    grid.clear()
    if grid.num_cells == 0:
        return
    logger.debug("recursive_backtracker starting on %dx%d grid", grid.num_rows, grid.num_cols)

    start = rng.randrange(grid.num_cells)
    visited = [False] * grid.num_cells
    visited[start] = True
    stack = [start]

    while stack:
        current = stack[-1]
        unvisited = [c for c in grid.neighbors(current) if not visited[c]]

        if unvisited:
            neighbor = sample(unvisited, rng)
            grid.link(current, neighbor)
            visited[neighbor] = True
            stack.append(neighbor)
        else:
            stack.pop()

    logger.debug("recursive_backtracker finished %dx%d grid", grid.num_rows, grid.num_cols)


ALGORITHMS: Dict[str, MazeAlgorithm] = {
    "binary-tree": binary_tree_maze,
    "sidewinder": sidewinder_maze,
    "hunt-and-kill": hunt_and_kill,
    "recursive-backtracker": recursive_backtracker,
}


def get_algorithm(name: str) -> MazeAlgorithm:
    try:
        return ALGORITHMS[name]
    except KeyError:
        choices = ", ".join(sorted(ALGORITHMS))
        raise ValueError(f'unknown maze algorithm "{name}", expected one of: {choices}') from None


__all__ = [
    "ALGORITHMS",
    "MazeAlgorithm",
    "binary_tree_maze",
    "flip",
    "get_algorithm",
    "hunt_and_kill",
    "recursive_backtracker",
    "sample",
    "sidewinder_maze",
]
