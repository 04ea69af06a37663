"""Exception types raised by the workspace loader.

Every error carries a message meant to be shown to the user as-is; the
CLI prints it after an ``Error:`` prefix and exits non-zero.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class LoadWorkspaceError(Exception):
    """Base class for all user-facing failures."""


class ConfigurationError(LoadWorkspaceError):
    """The parent workspace directory is not configured."""


class DiscoveryError(LoadWorkspaceError):
    """The parent workspace directory cannot be listed."""


class RecordParseError(LoadWorkspaceError):
    """A single candidate directory cannot be turned into a record."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class TerminalError(LoadWorkspaceError):
    """The terminal could not be set up, drawn to, read from or restored."""


class OutputError(LoadWorkspaceError):
    """The output script could not be written."""
