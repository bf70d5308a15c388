"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from term_snake.controls import QUIT_KEY
from term_snake.snake import Direction

logger = logging.getLogger(__name__)

DEFAULT_TICK_INTERVAL = 0.2  # seconds


def _is_int(value: object) -> bool:
    # bool is an int subclass but never a sensible coordinate or length.
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: object) -> bool:
    return _is_int(value) or isinstance(value, float)


@dataclass(frozen=True)
class GameConfig:
    """Tunable constants for a run.

    The defaults reproduce the classic layout: a three-segment snake with
    its head at (5, 5) and its body trailing downwards, heading right, one
    step every 200 ms. Supports JSON serialization.
    """

    tick_interval: float = DEFAULT_TICK_INTERVAL
    snake_length: int = 3
    start_x: int = 5
    start_y: int = 5
    initial_direction: str = "right"
    trail_direction: str = "down"

    # Glyphs
    body_glyph: str = "O"
    border_glyph: str = "#"
    blank_glyph: str = " "
    quit_key: str = QUIT_KEY

    def __post_init__(self) -> None:
        if not _is_number(self.tick_interval):
            raise ValueError("tick_interval must be a number.")
        if self.tick_interval < 0:
            raise ValueError("tick_interval must be >= 0.")
        for name in ("snake_length", "start_x", "start_y"):
            if not _is_int(getattr(self, name)):
                raise ValueError(f"{name} must be an integer.")
        if self.snake_length < 1:
            raise ValueError("snake_length must be at least 1.")
        for name in ("body_glyph", "border_glyph", "blank_glyph", "quit_key"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(f"{name} must be a single character.")
        # Fail early on unknown direction names.
        Direction.from_name(self.initial_direction)
        Direction.from_name(self.trail_direction)

    @property
    def direction(self) -> Direction:
        return Direction.from_name(self.initial_direction)

    @property
    def trail(self) -> Direction:
        return Direction.from_name(self.trail_direction)

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
