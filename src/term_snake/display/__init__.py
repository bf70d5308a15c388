"""Render/input backends for the terminal snake."""

from term_snake.display.base import Display, DisplayError, raw_mode
from term_snake.display.curses_display import CursesDisplay
from term_snake.display.memory import MemoryDisplay

__all__ = [
    "CursesDisplay",
    "Display",
    "DisplayError",
    "MemoryDisplay",
    "raw_mode",
]
