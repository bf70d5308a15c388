"""Tests for the curses backend with the curses module mocked out."""

import curses
from unittest.mock import patch

import pytest

from term_snake.display import CursesDisplay, DisplayError, raw_mode


@pytest.fixture
def fake_curses():
    with patch("term_snake.display.curses_display.curses") as mock_curses:
        mock_curses.error = curses.error
        screen = mock_curses.initscr.return_value
        screen.getmaxyx.return_value = (24, 80)
        yield mock_curses


class TestRawMode:
    def test_enter_configures_terminal(self, fake_curses):
        display = CursesDisplay()
        display.enter_raw_mode()
        screen = fake_curses.initscr.return_value
        fake_curses.cbreak.assert_called_once()
        fake_curses.noecho.assert_called_once()
        fake_curses.curs_set.assert_called_once_with(0)
        screen.keypad.assert_called_once_with(True)
        screen.nodelay.assert_called_once_with(True)

    def test_enter_twice_initialises_once(self, fake_curses):
        display = CursesDisplay()
        display.enter_raw_mode()
        display.enter_raw_mode()
        fake_curses.initscr.assert_called_once()

    def test_hidden_cursor_unsupported(self, fake_curses):
        fake_curses.curs_set.side_effect = curses.error("unsupported")
        display = CursesDisplay()
        display.enter_raw_mode()
        assert display.query_viewport() == (80, 24)

    def test_initscr_failure(self, fake_curses):
        fake_curses.initscr.side_effect = curses.error("no terminal")
        display = CursesDisplay()
        with pytest.raises(DisplayError, match="Cannot initialise"):
            display.enter_raw_mode()
        fake_curses.endwin.assert_not_called()

    def test_configure_failure_restores(self, fake_curses):
        fake_curses.cbreak.side_effect = curses.error("cbreak")
        display = CursesDisplay()
        with pytest.raises(DisplayError, match="Cannot configure"):
            display.enter_raw_mode()
        fake_curses.endwin.assert_called_once()

    def test_leave_restores_terminal(self, fake_curses):
        display = CursesDisplay()
        display.enter_raw_mode()
        display.leave_raw_mode()
        screen = fake_curses.initscr.return_value
        screen.keypad.assert_called_with(False)
        fake_curses.nocbreak.assert_called_once()
        fake_curses.echo.assert_called_once()
        fake_curses.endwin.assert_called_once()

    def test_leave_is_idempotent(self, fake_curses):
        display = CursesDisplay()
        display.enter_raw_mode()
        display.leave_raw_mode()
        display.leave_raw_mode()
        fake_curses.endwin.assert_called_once()

    def test_endwin_runs_even_if_reset_fails(self, fake_curses):
        fake_curses.nocbreak.side_effect = curses.error("nocbreak")
        display = CursesDisplay()
        display.enter_raw_mode()
        display.leave_raw_mode()
        fake_curses.endwin.assert_called_once()

    def test_reset_failure_logged_after_endwin(self, fake_curses):
        calls = []
        fake_curses.nocbreak.side_effect = curses.error("nocbreak")
        fake_curses.endwin.side_effect = lambda: calls.append("endwin")
        display = CursesDisplay()
        display.enter_raw_mode()
        with patch("term_snake.display.curses_display.logger") as mock_logger:
            mock_logger.warning.side_effect = lambda *args: calls.append("warning")
            display.leave_raw_mode()
        assert calls == ["endwin", "warning"]

    def test_scope_guard_restores_on_error(self, fake_curses):
        display = CursesDisplay()
        with pytest.raises(RuntimeError):
            with raw_mode(display):
                raise RuntimeError("crash")
        fake_curses.endwin.assert_called_once()


class TestScreenAccess:
    def test_requires_raw_mode(self, fake_curses):
        display = CursesDisplay()
        with pytest.raises(DisplayError, match="not in raw mode"):
            display.poll_key()

    def test_query_viewport(self, fake_curses):
        display = CursesDisplay()
        display.enter_raw_mode()
        assert display.query_viewport() == (80, 24)

    def test_poll_key_none_pending(self, fake_curses):
        display = CursesDisplay()
        display.enter_raw_mode()
        fake_curses.initscr.return_value.getch.return_value = -1
        assert display.poll_key() is None
        fake_curses.keyname.assert_not_called()

    def test_poll_key_named(self, fake_curses):
        display = CursesDisplay()
        display.enter_raw_mode()
        fake_curses.initscr.return_value.getch.return_value = curses.KEY_UP
        fake_curses.keyname.return_value = b"KEY_UP"
        assert display.poll_key() == "KEY_UP"
        fake_curses.keyname.assert_called_once_with(curses.KEY_UP)

    def test_write_cell(self, fake_curses):
        display = CursesDisplay()
        display.enter_raw_mode()
        display.write_cell(3, 7, "O")
        fake_curses.initscr.return_value.addch.assert_called_once_with(7, 3, "O")

    def test_write_cell_out_of_range(self, fake_curses):
        display = CursesDisplay()
        display.enter_raw_mode()
        display.write_cell(80, 0, "O")
        display.write_cell(0, -1, "O")
        fake_curses.initscr.return_value.addch.assert_not_called()

    def test_write_bottom_right_corner(self, fake_curses):
        display = CursesDisplay()
        display.enter_raw_mode()
        screen = fake_curses.initscr.return_value
        screen.addch.side_effect = curses.error("cursor")
        display.write_cell(79, 23, "#")
        screen.addch.assert_called_once_with(23, 79, "#")

    def test_present_refreshes(self, fake_curses):
        display = CursesDisplay()
        display.enter_raw_mode()
        display.present()
        fake_curses.initscr.return_value.refresh.assert_called_once()
