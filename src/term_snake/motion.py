"""Pure per-tick snake transformations: body propagation and edge wrap."""

from __future__ import annotations

from typing import TYPE_CHECKING

from term_snake.snake import Snake

if TYPE_CHECKING:
    from term_snake.snake import Direction
    from term_snake.viewport import Viewport


def advance(snake: Snake, direction: Direction) -> Snake:
    """Move the snake one step in *direction*.

    Every segment after the head takes its predecessor's previous
    position, so the old tail cell is dropped. The head moves by exactly
    one cell. No bounds checking happens here; see :func:`wrap`.
    """
    dx, dy = direction.value
    x, y = snake.head
    return Snake(((x + dx, y + dy), *snake.segments[:-1]))


def _wrap_axis(value: int, size: int) -> int:
    if value <= 0:
        return size - 2
    if value >= size - 1:
        return 1
    return value


def wrap(snake: Snake, viewport: Viewport) -> Snake:
    """Teleport a head that reached the border to the opposite interior edge.

    Only the head is checked. Trailing segments were copied from heads that
    had already been wrapped on earlier ticks.
    """
    x, y = snake.head
    if viewport.is_interior(x, y):
        return snake
    return snake.with_head(
        _wrap_axis(x, viewport.width), _wrap_axis(y, viewport.height),
    )
