"""Erase/draw pass for the snake body and the screen border."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from term_snake.config import GameConfig
    from term_snake.display import Display
    from term_snake.snake import Snake
    from term_snake.viewport import Viewport


def draw_border(display: Display, viewport: Viewport, glyph: str = "#") -> None:
    """Outline the outermost rows and columns of the viewport."""
    for x, y in viewport.border_cells():
        display.write_cell(x, y, glyph)


def erase_snake(display: Display, snake: Snake, blank: str = " ") -> None:
    for x, y in snake:
        display.write_cell(x, y, blank)


def draw_snake(display: Display, snake: Snake, glyph: str = "O") -> None:
    for x, y in snake:
        display.write_cell(x, y, glyph)


def render_frame(
    display: Display,
    previous: Snake | None,
    current: Snake,
    viewport: Viewport,
    config: GameConfig,
) -> None:
    """Replace *previous* with *current* on screen and redraw the border.

    *previous* must be the snake as it was before the step, not a
    structure mutated by it, or its old tail cell would never be blanked.
    Nothing is flushed; call ``display.present()`` afterwards.
    """
    if previous is not None:
        erase_snake(display, previous, config.blank_glyph)
    draw_snake(display, current, config.body_glyph)
    draw_border(display, viewport, config.border_glyph)
