"""Term Snake — a wrapping snake in a bordered terminal."""

from term_snake.config import GameConfig
from term_snake.controls import is_quit, read_input
from term_snake.display import CursesDisplay, Display, DisplayError, MemoryDisplay
from term_snake.engine import GameLoop, GameState, new_game, step
from term_snake.motion import advance, wrap
from term_snake.snake import Direction, Snake
from term_snake.viewport import Viewport

__all__ = [
    "CursesDisplay",
    "Direction",
    "Display",
    "DisplayError",
    "GameConfig",
    "GameLoop",
    "GameState",
    "MemoryDisplay",
    "Snake",
    "Viewport",
    "advance",
    "is_quit",
    "new_game",
    "read_input",
    "step",
    "wrap",
]
