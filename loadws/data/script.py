"""Render and write the shell script that loads a workspace.

The script is meant to be sourced by the calling shell so the `cd` and
the exported WORKSPACE variable take effect there.
"""

from __future__ import annotations

import os
import shlex
from pathlib import Path
from typing import Union

from loadws.data.models import WorkspaceRecord
from loadws.errors import OutputError

ENV_FILE = "workspace_env"

_TEMPLATE = """\
#!/usr/bin/env bash
export WORKSPACE={path}
cd $WORKSPACE
if [[ -f $WORKSPACE/{env_file} ]]; then
    source $WORKSPACE/{env_file}
fi
"""


def render_script(record: WorkspaceRecord) -> str:
    """Return the script text for ``record``."""
    return _TEMPLATE.format(path=shlex.quote(str(record.path)), env_file=ENV_FILE)


def write_script(record: WorkspaceRecord, output: Union[str, Path]) -> Path:
    """Write the load script for ``record`` to ``output``.

    Writes to a .tmp file in the same directory, then renames it over the
    target so a failed write never leaves a half-written script behind.

    Returns:
        The path written.

    Raises:
        OutputError: If the file cannot be created or written.
    """
    output_path = Path(output)
    tmp_path = output_path.with_name(output_path.name + ".tmp")

    try:
        with open(tmp_path, "w", encoding="utf-8") as tmp_file:
            tmp_file.write(render_script(record))
        os.replace(tmp_path, output_path)
    except (OSError, UnicodeError) as exc:
        try:
            tmp_path.unlink(missing_ok=True)
        except OSError:
            pass
        raise OutputError(f"Failed to write {output_path}: {exc}") from exc

    return output_path
