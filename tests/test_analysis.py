import random

import pytest

from mazegrid import Grid, recursive_backtracker
from mazegrid.analysis import dead_ends, distances, farthest, longest_path, shortest_path


def _snake_grid() -> Grid:
    """3x3 grid carved as a single corridor 0-1-2-5-4-3-6-7-8."""
    grid = Grid(3, 3)
    order = [0, 1, 2, 5, 4, 3, 6, 7, 8]
    for a, b in zip(order, order[1:]):
        grid.link(a, b)
    return grid


def test_distances_follow_links():
    grid = _snake_grid()

    assert grid.distances(0) == [0, 1, 2, 5, 4, 3, 6, 7, 8]
    assert distances(grid, 4) == [4, 3, 2, 1, 0, 1, 2, 3, 4]


def test_distances_leave_unreachable_cells_undefined():
    grid = Grid(2, 2)
    grid.link(0, 1)

    assert grid.distances(0) == [0, 1, None, None]
    assert grid.distances(3) == [None, None, None, 0]


def test_distances_ignore_geometric_neighbors_without_links():
    grid = Grid(1, 3)
    grid.link(0, 1)

    assert grid.distances(2) == [None, None, 0]


def test_distances_reject_out_of_range_start():
    with pytest.raises(IndexError):
        Grid(2, 2).distances(4)


def test_shortest_path_through_corridor():
    grid = _snake_grid()

    assert grid.shortest_path(0, 8) == [0, 1, 2, 5, 4, 3, 6, 7, 8]
    assert grid.shortest_path(4, 0) == [4, 5, 2, 1, 0]
    assert shortest_path(grid, 3, 3) == [3]


def test_shortest_path_is_empty_when_unreachable():
    grid = Grid(2, 2)
    grid.link(0, 1)

    assert grid.shortest_path(0, 3) == []
    assert grid.shortest_path(2, 1) == []


def test_shortest_path_tie_break_uses_link_order():
    grid = Grid(2, 2)
    grid.link(0, 1)
    grid.link(0, 2)
    grid.link(1, 3)
    grid.link(2, 3)

    assert grid.shortest_path(0, 3) == [0, 1, 3]

    grid.clear()
    grid.link(0, 2)
    grid.link(2, 3)
    grid.link(0, 1)
    grid.link(1, 3)

    assert grid.shortest_path(0, 3) == [0, 2, 3]


def test_farthest_and_longest_path():
    grid = _snake_grid()

    assert farthest(grid, 0) == 8
    assert grid.farthest(4) == 0
    assert longest_path(grid) == [0, 1, 2, 5, 4, 3, 6, 7, 8]


def test_farthest_of_isolated_cell_is_itself():
    grid = Grid(2, 2)
    grid.link(0, 1)

    assert grid.farthest(3) == 3


def test_farthest_breaks_ties_by_lowest_id():
    grid = Grid(1, 3)
    grid.link(1, 0)
    grid.link(1, 2)

    assert grid.farthest(1) == 0


def test_dead_ends_are_cells_with_one_link():
    grid = _snake_grid()

    assert grid.dead_ends() == [0, 8]
    grid.link(4, 1)
    assert dead_ends(grid) == [0, 8]
    grid.unlink(1, 2)
    assert grid.dead_ends() == [0, 2, 8]


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_distance_and_path_properties_on_generated_maze(seed):
    grid = Grid(6, 7)
    recursive_backtracker(grid, random.Random(seed))
    start = grid.cell(2, 3)
    dists = grid.distances(start)

    assert dists[start] == 0
    for cell, dist in enumerate(dists):
        assert dist is not None
        if cell != start:
            linked = [dists[other] for other in grid.links(cell) if dists[other] is not None]
            assert dist == 1 + min(linked)
        path = grid.shortest_path(start, cell)
        assert len(path) - 1 == dist
        assert path[0] == start and path[-1] == cell
        for a, b in zip(path, path[1:]):
            assert grid.is_linked(a, b)

    for cell in range(grid.num_cells):
        assert (cell in grid.dead_ends()) == (len(grid.links(cell)) == 1)


def test_longest_path_on_a_tree_is_the_diameter():
    grid = Grid(5, 5)
    recursive_backtracker(grid, random.Random(11))
    path = grid.longest_path()

    diameter = max(d for cell in range(grid.num_cells) for d in grid.distances(cell))
    assert len(path) - 1 == diameter
