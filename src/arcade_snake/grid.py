"""Fixed-size coordinate space for the snake game."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

import numpy as np


class Point(NamedTuple):
    """An integer grid cell. ``x`` grows rightwards, ``y`` grows downwards."""

    x: int
    y: int


class Grid:
    """Square, non-wrapping game board.

    The grid holds no entities itself; it answers bounds queries and draws
    cells from a seeded NumPy RNG so placement is reproducible.
    """

    def __init__(
        self,
        size: int = 20,
        rng: np.random.Generator | None = None,
    ) -> None:
        if size < 6:
            raise ValueError("Grid size must be at least 6.")
        self.size = size
        self.rng = rng if rng is not None else np.random.default_rng()

    @property
    def capacity(self) -> int:
        """Total number of cells."""
        return self.size * self.size

    def in_bounds(self, cell: tuple[int, int]) -> bool:
        """Check whether a coordinate lies within the grid."""
        x, y = cell
        return 0 <= x < self.size and 0 <= y < self.size

    def random_cell(self) -> Point:
        """Return a uniformly random in-bounds cell."""
        x, y = self.rng.integers(0, self.size, size=2)
        return Point(int(x), int(y))

    def free_cells(self, occupied: Iterable[tuple[int, int]]) -> list[Point]:
        """Return every in-bounds cell not present in *occupied*."""
        mask = np.zeros((self.size, self.size), dtype=bool)
        for x, y in occupied:
            if 0 <= x < self.size and 0 <= y < self.size:
                mask[y, x] = True
        ys, xs = np.where(~mask)
        return [Point(x, y) for x, y in zip(xs.tolist(), ys.tolist(), strict=True)]

    def to_dict(self) -> dict:
        return {"size": self.size}
