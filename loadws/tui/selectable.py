"""Sorted workspace list with a wraparound selection cursor."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from loadws.data.models import WorkspaceRecord


class SelectableList:
    """Workspaces ordered most recently modified first, plus a cursor.

    The order is fixed at construction; navigating never re-sorts. An unset
    cursor behaves as index 0 wherever a concrete position is needed.
    Navigating or taking from an empty list is a caller bug.
    """

    def __init__(self, records: Iterable[WorkspaceRecord]) -> None:
        self.items: List[WorkspaceRecord] = sorted(
            records, key=lambda r: r.modified_at, reverse=True
        )
        self.cursor: Optional[int] = None

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[WorkspaceRecord]:
        return iter(self.items)

    @property
    def selected_index(self) -> int:
        return self.cursor if self.cursor is not None else 0

    def next(self) -> None:
        """Move down one row, wrapping from the last row to the first."""
        assert self.items, "next() on an empty list"
        if self.cursor is None or self.cursor >= len(self.items) - 1:
            self.cursor = 0
        else:
            self.cursor += 1

    def previous(self) -> None:
        """Move up one row, wrapping from the first row to the last."""
        assert self.items, "previous() on an empty list"
        if self.cursor is None:
            self.cursor = 0
        elif self.cursor == 0:
            self.cursor = len(self.items) - 1
        else:
            self.cursor -= 1

    def take_current(self) -> WorkspaceRecord:
        """Remove and return the record under the cursor."""
        assert self.items, "take_current() on an empty list"
        return self.items.pop(self.selected_index)
