"""Data layer for the workspace loader."""

from loadws.data.discovery import ParseFailurePolicy, discover_workspaces
from loadws.data.models import Status, WorkspaceRecord, parse_workspace_name
from loadws.data.script import render_script, write_script

__all__ = [
    "ParseFailurePolicy",
    "Status",
    "WorkspaceRecord",
    "discover_workspaces",
    "parse_workspace_name",
    "render_script",
    "write_script",
]
