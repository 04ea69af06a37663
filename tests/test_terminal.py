"""Tests for CursesTerminal setup, teardown and error mapping.

curses is patched at module level so no real tty is needed.
"""

import curses

import pytest

from loadws.errors import TerminalError
from loadws.tui.app import run_picker
from loadws.tui.terminal import CursesTerminal, Key


class StubScreen:
    """Minimal stand-in for a curses window."""

    def __init__(self, keys=(), size=(24, 80), fail_on=None):
        self.keys = list(keys)
        self.size = size
        self.fail_on = fail_on
        self.keypad_calls = []
        self.written = []

    def _maybe_fail(self, name):
        if self.fail_on == name:
            raise curses.error(f"{name} failed")

    def keypad(self, flag):
        self.keypad_calls.append(flag)

    def erase(self):
        self._maybe_fail("erase")

    def getmaxyx(self):
        return self.size

    def addstr(self, row, col, text, attr=0):
        self.written.append((row, col, text))

    def noutrefresh(self):
        self._maybe_fail("noutrefresh")

    def getch(self):
        self._maybe_fail("getch")
        return self.keys.pop(0)


@pytest.fixture
def fake_curses(monkeypatch):
    """Patch the curses calls CursesTerminal makes; returns a call log."""
    log = {"endwin": 0, "screen": None, "fail": set()}

    def _call(name, result=None):
        def _fn(*args):
            log.setdefault(name + "_calls", []).append(args)
            if name in log["fail"]:
                raise curses.error(f"{name} failed")
            return result
        return _fn

    def _endwin():
        log["endwin"] += 1
        if "endwin" in log["fail"]:
            raise curses.error("endwin failed")

    def _initscr():
        if "initscr" in log["fail"]:
            raise curses.error("initscr failed")
        return log["screen"]

    monkeypatch.setattr(curses, "initscr", _initscr)
    monkeypatch.setattr(curses, "endwin", _endwin)
    for name in ("noecho", "cbreak", "echo", "nocbreak", "curs_set",
                 "set_escdelay", "doupdate", "update_lines_cols"):
        monkeypatch.setattr(curses, name, _call(name))
    monkeypatch.setattr(curses, "has_colors", lambda: False)
    monkeypatch.setattr(curses, "color_pair", lambda n: 0)
    return log


class TestEnter:
    def test_acquire_and_release(self, fake_curses):
        screen = StubScreen()
        fake_curses["screen"] = screen

        with CursesTerminal():
            assert screen.keypad_calls == [True]
            assert fake_curses["endwin"] == 0

        assert screen.keypad_calls == [True, False]
        assert fake_curses["endwin"] == 1

    def test_setup_failure_restores_then_raises(self, fake_curses):
        screen = StubScreen()
        fake_curses["screen"] = screen
        fake_curses["fail"].add("cbreak")

        with pytest.raises(TerminalError, match="Cannot initialize"):
            with CursesTerminal():
                pass

        assert fake_curses["endwin"] == 1
        assert screen.keypad_calls == [False]

    def test_initscr_failure(self, fake_curses):
        fake_curses["fail"].add("initscr")

        with pytest.raises(TerminalError, match="initscr failed"):
            with CursesTerminal():
                pass

        assert fake_curses["endwin"] == 0

    def test_hidden_cursor_unsupported_is_fine(self, fake_curses):
        fake_curses["screen"] = StubScreen()
        fake_curses["fail"].add("curs_set")

        with CursesTerminal():
            pass


class TestExit:
    def test_restore_failure_raises(self, fake_curses):
        fake_curses["screen"] = StubScreen()
        fake_curses["fail"].add("endwin")

        with pytest.raises(TerminalError, match="Cannot restore"):
            with CursesTerminal():
                pass

    def test_restore_failure_does_not_mask_error(self, fake_curses):
        fake_curses["screen"] = StubScreen()
        fake_curses["fail"].add("endwin")

        with pytest.raises(ValueError, match="original"):
            with CursesTerminal():
                raise ValueError("original")

    def test_used_outside_block(self):
        with pytest.raises(TerminalError, match="outside"):
            CursesTerminal().read_key()


class TestRender:
    def test_draws_table_and_status(self, fake_curses):
        screen = StubScreen()
        fake_curses["screen"] = screen

        with CursesTerminal() as terminal:
            terminal.render([("ABC", "Jan 01 1970 12:00:00 am", "Unknown", "Def")], 0)

        text = "".join(t for _, _, t in screen.written)
        assert "Workspaces" in text
        assert "ABC" in text
        assert "Navigate" in text
        assert len(fake_curses["doupdate_calls"]) == 1

    def test_empty_list(self, fake_curses):
        screen = StubScreen()
        fake_curses["screen"] = screen

        with CursesTerminal() as terminal:
            terminal.render([], 0)

        assert any("No workspaces found." in t for _, _, t in screen.written)

    @pytest.mark.parametrize("fail_on", ["erase", "noutrefresh"])
    def test_curses_error_becomes_terminal_error(self, fake_curses, fail_on):
        fake_curses["screen"] = StubScreen(fail_on=fail_on)

        with pytest.raises(TerminalError, match="Cannot draw"):
            with CursesTerminal() as terminal:
                terminal.render([], 0)

        assert fake_curses["endwin"] == 1


class TestReadKey:
    def test_translates_key(self, fake_curses):
        fake_curses["screen"] = StubScreen(keys=[ord("j")])

        with CursesTerminal() as terminal:
            assert terminal.read_key() is Key.DOWN

    def test_err_raises(self, fake_curses):
        fake_curses["screen"] = StubScreen(keys=[-1])

        with pytest.raises(TerminalError, match="input closed"):
            with CursesTerminal() as terminal:
                terminal.read_key()

    def test_getch_error_raises(self, fake_curses):
        fake_curses["screen"] = StubScreen(fail_on="getch")

        with pytest.raises(TerminalError, match="Cannot read"):
            with CursesTerminal() as terminal:
                terminal.read_key()

    def test_resize_is_ignored(self, fake_curses):
        fake_curses["screen"] = StubScreen(keys=[curses.KEY_RESIZE])

        with CursesTerminal() as terminal:
            assert terminal.read_key() is Key.OTHER

        assert len(fake_curses["update_lines_cols_calls"]) == 1


class TestRunPickerOnCurses:
    def test_closed_input_stops_loop_and_restores(self, fake_curses, make_record):
        fake_curses["screen"] = StubScreen(keys=[ord("j"), -1])

        with pytest.raises(TerminalError, match="input closed"):
            run_picker([make_record("A", 1), make_record("B", 2)])

        assert fake_curses["endwin"] == 1

    def test_confirm(self, fake_curses, make_record):
        fake_curses["screen"] = StubScreen(keys=[ord("j"), ord("\n")])

        result = run_picker([make_record("A", 1), make_record("B", 2)])

        assert result.story == "A"
        assert fake_curses["endwin"] == 1
