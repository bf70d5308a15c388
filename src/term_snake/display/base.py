"""Capability interface shared by every render/input backend."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Protocol

logger = logging.getLogger(__name__)


class DisplayError(RuntimeError):
    """Raised when a backend cannot acquire or query the display."""


class Display(Protocol):
    """Minimal terminal capabilities the game loop relies on.

    Keys are reported by name: ``"KEY_UP"``, ``"KEY_DOWN"``, ``"KEY_LEFT"``
    and ``"KEY_RIGHT"`` for the arrows, the character itself for printable
    keys. Coordinates are (x, y) with the origin in the top-left corner.
    """

    def enter_raw_mode(self) -> None: ...

    def leave_raw_mode(self) -> None: ...

    def query_viewport(self) -> tuple[int, int]: ...

    def poll_key(self) -> str | None: ...

    def write_cell(self, x: int, y: int, glyph: str) -> None: ...

    def present(self) -> None: ...


@contextmanager
def raw_mode(display: Display) -> Iterator[Display]:
    """Hold exclusive terminal input control for the duration of the block.

    The original terminal mode is restored on every exit path, including
    exceptions and ``KeyboardInterrupt``. If entering raw mode fails there
    is nothing to restore and the error propagates unchanged.
    """
    display.enter_raw_mode()
    logger.debug("Entered raw mode on %s.", type(display).__name__)
    try:
        yield display
    finally:
        display.leave_raw_mode()
        logger.debug("Left raw mode on %s.", type(display).__name__)
