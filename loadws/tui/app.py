"""Main TUI application loop.

Renders the workspace list, waits for a key, applies it, and repeats
until the user either confirms a workspace or quits. The terminal is
handed in by the caller so the loop can run against a fake in tests;
run_picker() wires it to the real curses terminal.
"""

from __future__ import annotations

import enum
from typing import Callable, ContextManager, Iterable, List, Optional

from loadws.data.models import WorkspaceRecord
from loadws.tui.selectable import SelectableList
from loadws.tui.table import Row, to_row
from loadws.tui.terminal import CursesTerminal, Key, Terminal


class LoopState(enum.Enum):
    RUNNING = "running"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class _State:
    """Mutable state container for the TUI."""

    def __init__(self, workspaces: SelectableList) -> None:
        self.workspaces = workspaces
        # The top row is highlighted from the first paint, so make it the real cursor
        if workspaces and workspaces.cursor is None:
            workspaces.cursor = 0
        self.status = LoopState.RUNNING
        self.selected: Optional[WorkspaceRecord] = None
        # List order never changes while running, so rows are built once
        self.rows: List[Row] = [to_row(record) for record in workspaces]


def _handle_key(key: Key, state: _State) -> None:
    """Apply one key to the state."""
    if key is Key.QUIT:
        state.status = LoopState.CANCELLED
        return

    if not state.workspaces:
        # Only quit works in empty state
        return

    if key is Key.DOWN:
        state.workspaces.next()
    elif key is Key.UP:
        state.workspaces.previous()
    elif key is Key.CONFIRM:
        state.selected = state.workspaces.take_current()
        state.status = LoopState.CONFIRMED


def run_loop(workspaces: SelectableList, terminal: Terminal) -> Optional[WorkspaceRecord]:
    """Drive the render/input cycle until the user confirms or quits.

    Args:
        workspaces: The list to navigate. The confirmed record is removed
            from it.
        terminal: An acquired terminal to draw on and read keys from.

    Returns:
        The confirmed workspace, or None if the user quit.

    Raises:
        TerminalError: If drawing or reading fails.
    """
    state = _State(workspaces)

    while state.status is LoopState.RUNNING:
        terminal.render(state.rows, state.workspaces.selected_index)
        _handle_key(terminal.read_key(), state)

    return state.selected


def run_picker(records: Iterable[WorkspaceRecord],
               terminal_factory: Callable[[], ContextManager[Terminal]] = CursesTerminal,
               ) -> Optional[WorkspaceRecord]:
    """Entry point for the TUI. Sorts the records and runs the loop on a fresh terminal.

    Ctrl-C counts as quitting. The terminal is restored before this returns
    or raises.
    """
    workspaces = SelectableList(records)
    try:
        with terminal_factory() as terminal:
            return run_loop(workspaces, terminal)
    except KeyboardInterrupt:
        return None
