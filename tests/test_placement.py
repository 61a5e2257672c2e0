"""Tests for free-cell placement."""

import numpy as np

from arcade_snake.grid import Grid, Point
from arcade_snake.placement import find_free_cell


def _all_cells(size: int) -> set[tuple[int, int]]:
    return {(x, y) for x in range(size) for y in range(size)}


class TestFindFreeCell:
    def test_avoids_occupied(self):
        grid = Grid(size=6, rng=np.random.default_rng(3))
        occupied = {(x, 0) for x in range(6)} | {(0, y) for y in range(6)}
        for _ in range(100):
            cell = find_free_cell(grid, occupied)
            assert cell is not None
            assert cell not in occupied
            assert grid.in_bounds(cell)

    def test_accepts_list(self):
        grid = Grid(size=6, rng=np.random.default_rng(0))
        cell = find_free_cell(grid, [(1, 1), (2, 2)])
        assert cell not in {(1, 1), (2, 2)}

    def test_single_free_cell_found(self):
        grid = Grid(size=6, rng=np.random.default_rng(0))
        occupied = _all_cells(6) - {(3, 4)}
        assert find_free_cell(grid, occupied) == Point(3, 4)

    def test_full_board_returns_none(self):
        grid = Grid(size=6, rng=np.random.default_rng(0))
        assert find_free_cell(grid, _all_cells(6)) is None

    def test_deterministic(self):
        a = find_free_cell(Grid(size=10, rng=np.random.default_rng(5)), {(0, 0)})
        b = find_free_cell(Grid(size=10, rng=np.random.default_rng(5)), {(0, 0)})
        assert a == b
