"""Status bar renderer for the TUI.

Draws a single line at the bottom showing the available keybindings.
"""

from __future__ import annotations

import curses


HINTS = " ↑/↓ j/k: Navigate  |  Enter: Load workspace  |  Q/Esc: Quit"
EMPTY_HINTS = " Q/Esc: Quit"


def draw(stdscr: curses.window, accent_pair: int, width: int, y: int,
         empty: bool = False) -> None:
    """Render the status bar at the given row.

    Args:
        stdscr: The curses window to draw on.
        accent_pair: Curses color pair number for the bar.
        width: Terminal width in columns.
        y: Row number where the status bar should be drawn.
        empty: Whether the list is empty, which leaves only the quit hint.
    """
    text = EMPTY_HINTS if empty else HINTS

    # Pad or truncate to fill the full width
    text = text[:width].ljust(width)

    try:
        stdscr.addstr(y, 0, text, curses.color_pair(accent_pair) | curses.A_BOLD)
    except curses.error:
        # Writing to the very last cell can raise on some terminals
        pass
