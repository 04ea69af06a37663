"""Data models for discovered workspaces."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Tuple

from loadws.errors import RecordParseError

NAME_SEPARATOR = "."


class Status(enum.Enum):
    """Lifecycle state of a workspace. Discovery only ever produces UNKNOWN."""

    OPEN = "Open"
    CLOSED = "Closed"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class WorkspaceRecord:
    """A single workspace directory and the metadata encoded in its name."""

    story: str
    description: str
    status: Status
    modified_at: datetime
    path: Path


def parse_workspace_name(name: str) -> Tuple[str, str]:
    """Split a directory name into ``(story, description)``.

    ``"ABC.def"`` gives ``("ABC", "def")``, ``"ABC"`` gives ``("ABC", "")``.
    Segments after the second are ignored.

    Raises:
        RecordParseError: If the name has no leading story segment.
    """
    parts = name.split(NAME_SEPARATOR)
    story = parts[0]
    if not story:
        raise RecordParseError(f"Cannot parse a story from directory name '{name}'.")
    description = parts[1] if len(parts) > 1 else ""
    return story, description
