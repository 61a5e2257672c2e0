"""Free-cell placement for food and power-ups."""

from __future__ import annotations

import logging
from collections.abc import Collection

from arcade_snake.grid import Grid, Point

logger = logging.getLogger(__name__)

# Rejection samples per grid cell before switching to an exhaustive scan.
_SAMPLES_PER_CELL = 2


def find_free_cell(
    grid: Grid,
    occupied: Collection[tuple[int, int]],
) -> Point | None:
    """Return a random cell not in *occupied*, or ``None`` if the board is full.

    Samples uniformly and rejects occupied cells. On a crowded board the
    rejection loop is capped and the remaining free cells are enumerated
    instead, so the call always terminates.
    """
    taken = occupied if isinstance(occupied, (set, frozenset)) else set(occupied)
    if len(taken) < grid.capacity:
        for _ in range(grid.capacity * _SAMPLES_PER_CELL):
            cell = grid.random_cell()
            if cell not in taken:
                return cell
        logger.debug("Rejection sampling exhausted after %d draws.",
                     grid.capacity * _SAMPLES_PER_CELL)

    free = grid.free_cells(taken)
    if not free:
        logger.info("No free cell left on a %dx%d grid.", grid.size, grid.size)
        return None
    return free[int(grid.rng.integers(len(free)))]
