"""In-memory recording backend for headless runs and tests."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable

import numpy as np

logger = logging.getLogger(__name__)


class MemoryDisplay:
    """NumPy-backed character screen with a scripted key queue.

    Writes land in a ``(height, width)`` array of single-character strings
    indexed as ``cells[y, x]``. Every :meth:`present` call snapshots the
    array into :attr:`frames`. Keys are consumed one per :meth:`poll_key`
    call; once the script runs out no further input is reported.
    """

    def __init__(
        self,
        width: int = 80,
        height: int = 24,
        keys: Iterable[str | None] = (),
        blank: str = " ",
    ) -> None:
        self.width = width
        self.height = height
        self.blank = blank
        self.cells = np.full((height, width), blank, dtype="<U1")
        self.keys: deque[str | None] = deque(keys)
        self.writes: list[tuple[int, int, str]] = []
        self.frames: list[np.ndarray] = []
        self.dropped_writes = 0
        self.raw = False
        self.enter_count = 0
        self.leave_count = 0

    def enter_raw_mode(self) -> None:
        self.raw = True
        self.enter_count += 1

    def leave_raw_mode(self) -> None:
        self.raw = False
        self.leave_count += 1

    def query_viewport(self) -> tuple[int, int]:
        return self.width, self.height

    def poll_key(self) -> str | None:
        if not self.keys:
            return None
        return self.keys.popleft()

    def write_cell(self, x: int, y: int, glyph: str) -> None:
        """Record a write; coordinates off the screen are dropped."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            self.dropped_writes += 1
            return
        self.cells[y, x] = glyph
        self.writes.append((x, y, glyph))

    def present(self) -> None:
        self.frames.append(self.cells.copy())

    def glyph_at(self, x: int, y: int) -> str:
        """Return the character currently stored at ``(x, y)``."""
        return str(self.cells[y, x])

    def find(self, glyph: str) -> list[tuple[int, int]]:
        """Return all ``(x, y)`` cells currently holding *glyph*."""
        ys, xs = np.where(self.cells == glyph)
        return sorted(zip(xs.tolist(), ys.tolist(), strict=True))

    def render_text(self, frame: np.ndarray | None = None) -> str:
        """Render a frame (default: the live buffer) as newline-joined rows."""
        cells = self.cells if frame is None else frame
        return "\n".join("".join(row) for row in cells)
