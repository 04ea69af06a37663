"""Scan the parent directory and build WorkspaceRecord objects.

Only immediate subdirectories are candidates; files and hidden entries
(names starting with '.') are left out. How a candidate that cannot be
parsed is handled depends on the ParseFailurePolicy passed in.
"""

from __future__ import annotations

import enum
import os
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List, Union

from loadws.data.models import Status, WorkspaceRecord, parse_workspace_name
from loadws.errors import DiscoveryError, RecordParseError

HIDDEN_PREFIX = "."

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class ParseFailurePolicy(enum.Enum):
    """What to do with a candidate that cannot be parsed."""

    FAIL = "fail"
    SKIP = "skip"


def ns_to_datetime(timestamp_ns: int) -> datetime:
    """Convert Unix nanoseconds to an aware UTC datetime (microsecond precision)."""
    return _EPOCH + timedelta(microseconds=timestamp_ns // 1000)


def _is_candidate(entry: os.DirEntry) -> bool:
    """Visible directories only. Symlinks are not followed, so a link to a
    directory is not a workspace.

    Raises:
        RecordParseError: If the entry type cannot be determined.
    """
    if entry.name.startswith(HIDDEN_PREFIX):
        return False
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError as exc:
        raise RecordParseError(f"Cannot read type of {entry.path!r}: {exc}",
                               path=Path(entry.path)) from exc


def parse_entry(entry: os.DirEntry) -> WorkspaceRecord:
    """Build a record from one directory entry.

    Raises:
        RecordParseError: If the name is not valid UTF-8 or has no story, or
            its metadata is unreadable.
    """
    path = Path(entry.path)
    try:
        entry.name.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise RecordParseError(f"Directory name {entry.name!r} is not valid UTF-8.", path=path) from exc

    try:
        story, description = parse_workspace_name(entry.name)
    except RecordParseError as exc:
        exc.path = path
        raise

    try:
        modified_ns = entry.stat().st_mtime_ns
    except OSError as exc:
        raise RecordParseError(f"Cannot read metadata of {path}: {exc}", path=path) from exc

    return WorkspaceRecord(
        story=story,
        description=description,
        status=Status.UNKNOWN,
        modified_at=ns_to_datetime(modified_ns),
        path=path,
    )


def discover_workspaces(parent_dir: Union[str, Path],
                        policy: ParseFailurePolicy = ParseFailurePolicy.FAIL) -> List[WorkspaceRecord]:
    """List the workspaces under ``parent_dir``. Order is unspecified.

    Args:
        parent_dir: Directory whose immediate subdirectories are workspaces.
        policy: FAIL aborts on the first bad candidate, SKIP warns on stderr
            and carries on.

    Returns:
        One WorkspaceRecord per accepted subdirectory.

    Raises:
        DiscoveryError: If ``parent_dir`` cannot be listed.
        RecordParseError: If a candidate fails to parse under the FAIL policy.
    """
    parent = Path(parent_dir)
    try:
        scanner = os.scandir(parent)
    except FileNotFoundError:
        raise DiscoveryError(f"Workspace directory {parent} not found.") from None
    except NotADirectoryError:
        raise DiscoveryError(f"Workspace path {parent} is not a directory.") from None
    except PermissionError:
        raise DiscoveryError(f"Cannot read {parent}. Check permissions.") from None
    except OSError as exc:
        raise DiscoveryError(f"Cannot read {parent}: {exc}") from exc

    records: List[WorkspaceRecord] = []

    with scanner:
        for entry in scanner:
            try:
                if not _is_candidate(entry):
                    continue
                records.append(parse_entry(entry))
            except RecordParseError as exc:
                if policy is ParseFailurePolicy.FAIL:
                    raise
                print(f"Warning: Skipping {entry.path!r}: {exc}", file=sys.stderr)

    return records
