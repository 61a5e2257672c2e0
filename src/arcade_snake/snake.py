"""Snake body and heading bookkeeping."""

from __future__ import annotations

import enum
from collections import deque

from arcade_snake.grid import Point


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def initial_body(grid_size: int) -> list[Point]:
    """Return the 3-segment vertical seed, head first, facing up."""
    c = grid_size // 2
    return [Point(c, c), Point(c, c + 1), Point(c, c + 2)]


class Snake:
    """A snake represented as an ordered deque of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``.

    ``direction`` is the requested heading and may change at any time;
    ``last_direction`` is the heading used by the most recent tick. Reversal
    checks are made against ``last_direction`` so two quick turns between
    ticks cannot fold the head back into the neck.
    """

    def __init__(
        self,
        body: list[tuple[int, int]],
        direction: Direction = Direction.UP,
    ) -> None:
        if not body:
            raise ValueError("Snake length must be at least 1.")
        self.body: deque[Point] = deque(Point(*seg) for seg in body)
        self.direction = direction
        self.last_direction = direction

    @property
    def head(self) -> Point:
        """Return the head coordinate."""
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def set_direction(self, new_direction: Direction) -> bool:
        """Request a heading change, ignoring 180° reversals.

        Returns True if the request was accepted.
        """
        if new_direction is self.last_direction.opposite:
            return False
        self.direction = new_direction
        return True

    def next_head(self) -> Point:
        """Compute the next head position without moving."""
        dx, dy = self.direction.value
        x, y = self.head
        return Point(x + dx, y + dy)

    def occupies(self, cell: tuple[int, int]) -> bool:
        """Check whether the snake occupies a given cell."""
        return cell in self.body

    def advance(self, grow: bool = False) -> Point | None:
        """Move the snake one step along ``direction``.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.appendleft(self.next_head())
        self.last_direction = self.direction
        if grow:
            return None
        return self.body.pop()

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "direction": self.direction.name,
        }
