"""Workspace table: row projection and the curses renderer.

to_row() is a pure function so the loop and its tests never need a real
terminal to know what a row looks like. draw() paints the bordered table
with a header row; the highlighted row is drawn in reverse video.
"""

from __future__ import annotations

import curses
from typing import List, Sequence, Tuple

from loadws.data.models import WorkspaceRecord
from loadws.utils.formatting import format_datetime, title_case, truncate

Row = Tuple[str, str, str, str]

TITLE = "Workspaces"
HEADERS: Row = ("Story", "Last Modified", "Status", "Description")
EMPTY_MESSAGE = "No workspaces found."

# Share of the inner width given to each column, in percent
_COLUMN_PERCENT = (10, 30, 10, 50)
_GAP = 1


def to_row(record: WorkspaceRecord) -> Row:
    """Project a record into its four display cells."""
    return (
        record.story,
        format_datetime(record.modified_at),
        str(record.status),
        title_case(record.description),
    )


def column_widths(width: int) -> List[int]:
    """Split ``width`` columns between the four table columns."""
    usable = max(0, width - _GAP * (len(_COLUMN_PERCENT) - 1))
    widths = [usable * pct // 100 for pct in _COLUMN_PERCENT]
    widths[-1] += usable - sum(widths)
    return widths


def format_line(cells: Sequence[str], widths: Sequence[int]) -> str:
    """Join cells into one padded line, truncating each to its column."""
    parts = [f"{truncate(cell, w):<{w}}" for cell, w in zip(cells, widths)]
    return (" " * _GAP).join(parts)


def scroll_offset_for(highlighted: int, offset: int, data_height: int) -> int:
    """Return the first visible row index so that ``highlighted`` is on screen."""
    if data_height <= 0:
        return 0
    if highlighted < offset:
        return highlighted
    if highlighted >= offset + data_height:
        return highlighted - data_height + 1
    return offset


def _addstr(stdscr: curses.window, row: int, col: int, text: str, attr: int) -> None:
    try:
        stdscr.addstr(row, col, text, attr)
    except curses.error:
        # Writing to the bottom-right cell raises on most terminals
        pass


def _draw_border(stdscr: curses.window, x: int, y: int, width: int, height: int,
                 attr: int) -> None:
    """Draw a box with the table title on the top edge."""
    inner = width - 2
    _addstr(stdscr, y, x, "┌" + "─" * inner + "┐", attr)
    for row in range(y + 1, y + height - 1):
        _addstr(stdscr, row, x, "│", attr)
        _addstr(stdscr, row, x + width - 1, "│", attr)
    _addstr(stdscr, y + height - 1, x, "└" + "─" * inner + "┘", attr)
    _addstr(stdscr, y, x + 2, f" {TITLE} "[:max(0, inner - 2)], attr | curses.A_BOLD)


def draw(stdscr: curses.window, rows: Sequence[Row], highlighted: int,
         scroll_offset: int, header_pair: int, normal_pair: int,
         x: int, y: int, width: int, height: int) -> int:
    """Render the workspace table in the given area.

    Args:
        stdscr: The curses window to draw on.
        rows: Display cells for every workspace, in list order.
        highlighted: Index of the row under the cursor.
        scroll_offset: First visible row index from the previous paint.
        header_pair: Color pair for the header row.
        normal_pair: Color pair for borders and normal rows.
        x: Starting column of the table.
        y: Starting row of the table.
        width: Width of the table in columns, border included.
        height: Height of the table in rows, border included.

    Returns:
        The scroll offset used, to be passed back on the next paint.
    """
    normal_attr = curses.color_pair(normal_pair)
    _draw_border(stdscr, x, y, width, height, normal_attr)

    inner_x = x + 1
    inner_width = width - 2
    widths = column_widths(inner_width)

    # Header, then one blank row, then data
    header_attr = curses.color_pair(header_pair) | curses.A_BOLD
    _addstr(stdscr, y + 1, inner_x, format_line(HEADERS, widths).ljust(inner_width), header_attr)

    data_y = y + 3
    data_height = height - 4

    if not rows:
        _addstr(stdscr, data_y, inner_x, truncate(EMPTY_MESSAGE, inner_width), normal_attr)
        return 0

    scroll_offset = scroll_offset_for(highlighted, scroll_offset, data_height)
    for row_idx in range(data_height):
        item_idx = scroll_offset + row_idx
        if item_idx >= len(rows):
            break
        attr = normal_attr | curses.A_REVERSE if item_idx == highlighted else normal_attr
        line = format_line(rows[item_idx], widths).ljust(inner_width)
        _addstr(stdscr, data_y + row_idx, inner_x, line, attr)

    return scroll_offset
