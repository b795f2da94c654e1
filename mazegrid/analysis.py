"""Distance and path queries over a grid's link graph.

These functions only use the public surface of :class:`~mazegrid.grid.Grid`
and follow links, never bare geometric adjacency: two neighboring cells with
a wall between them are not connected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from .matrix import Cell

if TYPE_CHECKING:
    from .grid import Grid


def distances(grid: "Grid", start: Cell) -> List[Optional[int]]:
    """Return the link distance from ``start`` to every cell, indexed by cell id.

    Cells that cannot be reached from ``start`` get ``None``.
    """

    if not grid.contains(start):
        raise IndexError(f"cell {start} out of range for {grid.num_rows}x{grid.num_cols} grid")
    dists: List[Optional[int]] = [None] * grid.num_cells
    dists[start] = 0
    frontier = [start]
    step = 0

    while frontier:
        step += 1
        next_frontier: List[Cell] = []
        for cell in frontier:
            for other in grid.links(cell):
                if dists[other] is None:
                    dists[other] = step
                    next_frontier.append(other)
        frontier = next_frontier

    return dists


def shortest_path(grid: "Grid", start: Cell, goal: Cell) -> List[Cell]:
    """Return the cells on a shortest path from ``start`` to ``goal``, both included.

    Returns an empty list if ``goal`` cannot be reached.  When several linked
    cells are one step closer, the first one in ``grid.links()`` order wins.
    """

    if not grid.contains(goal):
        raise IndexError(f"cell {goal} out of range for {grid.num_rows}x{grid.num_cols} grid")
    dists = distances(grid, start)
    if dists[goal] is None:
        return []

    path = [goal]
    current = goal
    while current != start:
        current_dist = dists[current]
        for other in grid.links(current):
            other_dist = dists[other]
            if other_dist is not None and other_dist < current_dist:
                break
        else:
            return []
        path.append(other)
        current = other

    path.reverse()
    return path


def farthest(grid: "Grid", start: Cell) -> Cell:
    """Return the reachable cell farthest from ``start``; ties go to the lowest id."""

    dists = distances(grid, start)
    best = start
    best_dist = 0
    for cell, dist in enumerate(dists):
        if dist is not None and dist > best_dist:
            best = cell
            best_dist = dist
    return best


def dead_ends(grid: "Grid") -> List[Cell]:
    """Cells that link to exactly one other cell."""
    return [cell for cell in range(grid.num_cells) if len(grid.links(cell)) == 1]


def longest_path(grid: "Grid") -> List[Cell]:
    """Return the longest path through the maze.

    Two farthest-cell passes: exact when the links form a tree (a perfect
    maze), only an estimate once the link graph has cycles.
    """

    if grid.num_cells == 0:
        return []
    end = farthest(grid, 0)
    start = farthest(grid, end)
    return shortest_path(grid, start, end)


__all__ = ["distances", "shortest_path", "farthest", "dead_ends", "longest_path"]
