"""Keyboard mapping from driver key names to snake directions."""

from __future__ import annotations

from term_snake.snake import Direction

QUIT_KEY = "q"

_KEY_DIRECTIONS: dict[str, Direction] = {
    "KEY_UP": Direction.UP,
    "KEY_DOWN": Direction.DOWN,
    "KEY_LEFT": Direction.LEFT,
    "KEY_RIGHT": Direction.RIGHT,
}


def read_input(key: str | None, current: Direction) -> Direction:
    """Return the direction selected by *key*, or *current* if none is.

    Reversing onto the body is allowed; there is no collision to avoid.
    """
    if key is None:
        return current
    return _KEY_DIRECTIONS.get(key, current)


def is_quit(key: str | None, quit_key: str = QUIT_KEY) -> bool:
    """Check whether *key* is the key that ends the game."""
    return key is not None and key == quit_key
