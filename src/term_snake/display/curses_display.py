"""Terminal backend built on the standard-library ``curses`` module."""

from __future__ import annotations

import curses
import logging

from term_snake.display.base import DisplayError

logger = logging.getLogger(__name__)


class CursesDisplay:
    """Real terminal display driven through curses.

    The screen is only available between :meth:`enter_raw_mode` and
    :meth:`leave_raw_mode`; use :func:`term_snake.display.raw_mode` to pair
    them.
    """

    def __init__(self) -> None:
        self._screen: curses.window | None = None

    @property
    def screen(self) -> curses.window:
        if self._screen is None:
            raise DisplayError("Display is not in raw mode.")
        return self._screen

    def enter_raw_mode(self) -> None:
        """Initialise curses: unbuffered, unechoed, non-blocking input."""
        if self._screen is not None:
            return
        try:
            screen = curses.initscr()
        except curses.error as exc:
            raise DisplayError(f"Cannot initialise terminal: {exc}") from exc
        self._screen = screen
        try:
            curses.cbreak()
            curses.noecho()
            screen.keypad(True)
            screen.nodelay(True)
        except curses.error as exc:
            self.leave_raw_mode()
            raise DisplayError(f"Cannot configure terminal: {exc}") from exc
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal does not support hiding the cursor.")

    def leave_raw_mode(self) -> None:
        """Restore the terminal to the mode it had before curses started."""
        screen = self._screen
        if screen is None:
            return
        self._screen = None
        reset_error: curses.error | None = None
        try:
            screen.keypad(False)
            curses.nocbreak()
            curses.echo()
        except curses.error as exc:
            reset_error = exc
        finally:
            curses.endwin()
        # Only log once endwin has handed the screen back.
        if reset_error is not None:
            logger.warning(
                "Failed to reset terminal input mode: %s", reset_error,
            )

    def query_viewport(self) -> tuple[int, int]:
        """Return ``(width, height)`` of the terminal."""
        height, width = self.screen.getmaxyx()
        return width, height

    def poll_key(self) -> str | None:
        ch = self.screen.getch()
        if ch == -1:
            return None
        return curses.keyname(ch).decode("ascii", errors="replace")

    def write_cell(self, x: int, y: int, glyph: str) -> None:
        height, width = self.screen.getmaxyx()
        if not (0 <= x < width and 0 <= y < height):
            return
        try:
            self.screen.addch(y, x, glyph)
        except curses.error:
            # addch reports an error after writing the bottom-right cell
            # because the cursor cannot advance past it.
            pass

    def present(self) -> None:
        self.screen.refresh()
