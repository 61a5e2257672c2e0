"""Keyboard bindings for the four heading commands."""

from __future__ import annotations

from arcade_snake.snake import Direction

KEY_BINDINGS: dict[str, Direction] = {
    "ArrowUp": Direction.UP,
    "w": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "s": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "a": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
    "d": Direction.RIGHT,
}


def direction_for_key(key: str) -> Direction | None:
    """Map a key name to a heading; letters are case-insensitive."""
    if len(key) == 1:
        key = key.lower()
    return KEY_BINDINGS.get(key)
