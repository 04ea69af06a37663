"""Command-line entry point.

Finds the workspaces, lets the user pick one, and writes a script that
loads it. The script is meant to be sourced by a shell wrapper, e.g.:

    load-workspace -o /tmp/ws.sh && [ -f /tmp/ws.sh ] && source /tmp/ws.sh
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from loadws import __version__
from loadws.data import ParseFailurePolicy, discover_workspaces, write_script
from loadws.errors import LoadWorkspaceError
from loadws.tui.app import run_picker
from loadws.utils.paths import WORKSPACES_ENV, get_workspaces_dir


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="load-workspace",
        description="Generates a script to load the selected workspace.",
    )
    parser.add_argument(
        "-o", "--output", required=True, metavar="FILE",
        help="Specify the output file location",
    )
    parser.add_argument(
        "-w", "--workspaces", metavar="DIR", default=None,
        help=f"Directory holding the workspaces (default: ${WORKSPACES_ENV})",
    )
    parser.add_argument(
        "--skip-invalid", action="store_true",
        help="Skip workspaces that cannot be read instead of failing",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    """Run the loader and return the process exit code."""
    args = build_parser().parse_args(argv)
    policy = ParseFailurePolicy.SKIP if args.skip_invalid else ParseFailurePolicy.FAIL

    try:
        parent = get_workspaces_dir(args.workspaces)
        records = discover_workspaces(parent, policy=policy)
        workspace = run_picker(records)
        if workspace is not None:
            write_script(workspace, args.output)
    except LoadWorkspaceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
