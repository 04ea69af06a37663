"""Locate the parent directory that holds the workspaces."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from loadws.errors import ConfigurationError

WORKSPACES_ENV = "WORKSPACES"


def get_workspaces_dir(override: Optional[str] = None) -> Path:
    """Return the workspaces dir. A CLI override wins over the WORKSPACES env var."""
    value = override or os.environ.get(WORKSPACES_ENV)
    if not value:
        raise ConfigurationError(
            f"Environment variable `{WORKSPACES_ENV}` is not set. "
            "Point it at the directory holding your workspaces or pass --workspaces."
        )
    return Path(value).expanduser()
