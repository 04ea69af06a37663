"""Terminal capability used by the interaction loop.

The loop only needs two things from a terminal: paint a table with one
row highlighted, and block until the next key. Terminal describes that
contract; CursesTerminal implements it on the real device and is a
context manager that owns raw mode and the alternate screen for as long
as the `with` block runs.
"""

from __future__ import annotations

import curses
import enum
from typing import Optional, Protocol, Sequence

from loadws.errors import TerminalError
from loadws.tui import status_bar, table
from loadws.tui.table import Row

# Color pair IDs
_PAIR_HEADER = 1
_PAIR_NORMAL = 2
_PAIR_STATUS = 3

_MARGIN = 5
_ESCAPE = 27


class Key(enum.Enum):
    """Key events the loop reacts to. Everything else is OTHER."""

    UP = "up"
    DOWN = "down"
    CONFIRM = "confirm"
    QUIT = "quit"
    OTHER = "other"


_KEYMAP = {
    curses.KEY_UP: Key.UP,
    ord("k"): Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    ord("j"): Key.DOWN,
    curses.KEY_ENTER: Key.CONFIRM,
    ord("\n"): Key.CONFIRM,
    ord("\r"): Key.CONFIRM,
    ord("q"): Key.QUIT,
    ord("Q"): Key.QUIT,
    _ESCAPE: Key.QUIT,
}


def key_from_code(code: int) -> Key:
    """Translate a curses key code into a Key."""
    return _KEYMAP.get(code, Key.OTHER)


class Terminal(Protocol):
    """What the interaction loop needs from a terminal."""

    def render(self, rows: Sequence[Row], highlighted: int) -> None:
        ...

    def read_key(self) -> Key:
        ...


def _init_colors() -> None:
    """Set up color pairs, falling back to attributes only on mono terminals."""
    if not curses.has_colors():
        return
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(_PAIR_HEADER, curses.COLOR_RED, curses.COLOR_BLUE)
    curses.init_pair(_PAIR_NORMAL, -1, -1)
    curses.init_pair(_PAIR_STATUS, curses.COLOR_WHITE, curses.COLOR_BLUE)


class CursesTerminal:
    """Terminal backed by curses.

    Use as a context manager; render() and read_key() are only valid
    inside the `with` block. The terminal is restored on every exit path.
    """

    def __init__(self) -> None:
        self._stdscr: Optional[curses.window] = None
        self._scroll_offset = 0

    def __enter__(self) -> CursesTerminal:
        try:
            self._stdscr = curses.initscr()
            curses.noecho()
            curses.cbreak()
            self._stdscr.keypad(True)
            try:
                curses.curs_set(0)  # hide cursor
            except curses.error:
                pass
            # No delay after Esc, it is a plain quit key here
            curses.set_escdelay(25)
            _init_colors()
        except curses.error as exc:
            self._restore_quietly()
            raise TerminalError(f"Cannot initialize the terminal: {exc}") from exc
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self._restore()
        except curses.error as restore_exc:
            if exc_type is None:
                raise TerminalError(f"Cannot restore the terminal: {restore_exc}") from restore_exc

    def _restore(self) -> None:
        if self._stdscr is None:
            return
        stdscr, self._stdscr = self._stdscr, None
        stdscr.keypad(False)
        curses.echo()
        curses.nocbreak()
        curses.endwin()

    def _restore_quietly(self) -> None:
        try:
            self._restore()
        except curses.error:
            pass

    def _screen(self) -> curses.window:
        if self._stdscr is None:
            raise TerminalError("Terminal used outside of its `with` block.")
        return self._stdscr

    def render(self, rows: Sequence[Row], highlighted: int) -> None:
        """Paint the workspace table and the status bar."""
        stdscr = self._screen()
        try:
            stdscr.erase()
            max_y, max_x = stdscr.getmaxyx()

            # Shrink the margin on small terminals rather than drawing nothing
            margin = _MARGIN if max_y > 2 * _MARGIN + 6 and max_x > 2 * _MARGIN + 20 else 0
            status_y = max_y - 1
            height = max_y - 1 - 2 * margin
            width = max_x - 2 * margin

            if height >= 5 and width >= 10:
                self._scroll_offset = table.draw(
                    stdscr, rows, highlighted, self._scroll_offset,
                    header_pair=_PAIR_HEADER, normal_pair=_PAIR_NORMAL,
                    x=margin, y=margin, width=width, height=height,
                )
            else:
                try:
                    stdscr.addstr(0, 0, "Terminal too small"[:max_x])
                except curses.error:
                    pass

            status_bar.draw(stdscr, _PAIR_STATUS, max_x, status_y, empty=not rows)
            stdscr.noutrefresh()
            curses.doupdate()
        except curses.error as exc:
            raise TerminalError(f"Cannot draw to the terminal: {exc}") from exc

    def read_key(self) -> Key:
        """Block until a key is pressed."""
        stdscr = self._screen()
        try:
            code = stdscr.getch()
        except curses.error as exc:
            raise TerminalError(f"Cannot read from the terminal: {exc}") from exc
        if code == -1:
            # Blocking mode, so ERR means the input is gone (EOF, hangup)
            raise TerminalError("Cannot read from the terminal: input closed.")
        if code == curses.KEY_RESIZE:
            curses.update_lines_cols()
        return key_from_code(code)
