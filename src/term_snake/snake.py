"""Snake representation and movement directions."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) screen-space values.

    ``y`` grows downwards, matching terminal row numbering.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @classmethod
    def from_name(cls, name: str) -> Direction:
        """Look up a direction by case-insensitive name."""
        if not isinstance(name, str):
            raise ValueError(f"Direction name must be a string, got {name!r}")
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}") from None


@dataclass(frozen=True)
class Snake:
    """A fixed-length snake stored as an ordered tuple of (x, y) segments.

    The head is ``segments[0]``; the tail is ``segments[-1]``. The length
    never changes once the snake is built.
    """

    segments: tuple[tuple[int, int], ...]

    def __post_init__(self) -> None:
        if not self.segments:
            raise ValueError("Snake length must be at least 1.")

    @classmethod
    def line(
        cls,
        head_x: int,
        head_y: int,
        length: int = 3,
        trail: Direction = Direction.DOWN,
    ) -> Snake:
        """Lay out *length* contiguous segments from the head along *trail*."""
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        dx, dy = trail.value
        return cls(tuple((head_x + dx * i, head_y + dy * i) for i in range(length)))

    @property
    def head(self) -> tuple[int, int]:
        """Return the head coordinate."""
        return self.segments[0]

    @property
    def length(self) -> int:
        return len(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(self.segments)

    def with_head(self, x: int, y: int) -> Snake:
        """Return a copy with the head moved to ``(x, y)``."""
        return Snake(((x, y), *self.segments[1:]))

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "segments": [list(seg) for seg in self.segments],
            "length": self.length,
        }
