"""Tick-based game loop composing motion, controls, and rendering."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, replace

from term_snake.config import GameConfig
from term_snake.controls import QUIT_KEY, is_quit, read_input
from term_snake.display import Display, raw_mode
from term_snake.motion import advance, wrap
from term_snake.render import render_frame
from term_snake.snake import Direction, Snake
from term_snake.viewport import Viewport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameState:
    """Everything the loop owns between ticks."""

    snake: Snake
    direction: Direction
    viewport: Viewport
    tick: int = 0
    running: bool = True

    def to_dict(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "running": self.running,
            "direction": self.direction.name.lower(),
            "viewport": self.viewport.to_dict(),
            "snake": self.snake.to_dict(),
        }


def new_game(viewport: Viewport, config: GameConfig | None = None) -> GameState:
    """Build the starting state for *viewport*."""
    config = config or GameConfig()
    snake = Snake.line(
        config.start_x,
        config.start_y,
        length=config.snake_length,
        trail=config.trail,
    )
    return GameState(snake=snake, direction=config.direction, viewport=viewport)


def step(state: GameState, key: str | None, quit_key: str = QUIT_KEY) -> GameState:
    """Advance the game by one tick given the key read this tick.

    The quit key stops the game without moving the snake. Any other key
    may steer it before it advances and wraps.
    """
    if not state.running:
        return state
    if is_quit(key, quit_key):
        return replace(state, running=False)

    direction = read_input(key, state.direction)
    if direction is not state.direction:
        logger.debug(
            "Direction %s -> %s at tick %d.",
            state.direction.name, direction.name, state.tick,
        )
    snake = wrap(advance(state.snake, direction), state.viewport)
    return replace(state, snake=snake, direction=direction, tick=state.tick + 1)


class GameLoop:
    """Drive the game against a display until the quit key is pressed.

    Each tick polls one key, steps the state, erases the pre-step snake,
    draws the new one and the border, presents, and then sleeps for
    ``config.tick_interval`` seconds.
    """

    def __init__(
        self,
        display: Display,
        config: GameConfig | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self.display = display
        self.config = config or GameConfig()
        self.sleep = sleep or time.sleep
        self.state: GameState | None = None

    def run(self, max_ticks: int | None = None) -> GameState:
        """Run until quit, or until *max_ticks* ticks have elapsed.

        Raises :class:`~term_snake.display.DisplayError` if the terminal
        cannot be acquired and ``ValueError`` if it is smaller than 3×3.
        The terminal mode is restored in both cases.
        """
        with raw_mode(self.display):
            width, height = self.display.query_viewport()
            viewport = Viewport(width, height)
            logger.debug("Starting on a %d×%d viewport.", width, height)

            state = new_game(viewport, self.config)
            self.state = state
            render_frame(self.display, None, state.snake, viewport, self.config)
            self.display.present()

            while state.running:
                if max_ticks is not None and state.tick >= max_ticks:
                    break
                key = self.display.poll_key()
                previous = state.snake
                state = step(state, key, self.config.quit_key)
                self.state = state
                if not state.running:
                    break
                render_frame(
                    self.display, previous, state.snake, viewport, self.config,
                )
                self.display.present()
                self.sleep(self.config.tick_interval)

        logger.info("Stopped after %d ticks.", state.tick)
        return state
