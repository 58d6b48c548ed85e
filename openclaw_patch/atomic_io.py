"""Crash-safe replacement of an existing file.

Writes to a temp file in the target's directory and swaps it in with
``os.replace()``, so a crash mid-write never leaves a truncated config.
The replacement keeps the permission bits of the file it replaces.
"""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path


def atomic_replace(path: Path, content: bytes) -> None:
    """Replace *path* with *content* atomically.

    The temp file is created next to *path* so the rename stays on one
    filesystem.  If *path* does not exist yet the file gets 600
    permissions (from mkstemp).

    Raises:
        OSError: If the temp file cannot be written or renamed.  The
            original file is left untouched and the temp file removed.
    """
    try:
        mode: int | None = stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        mode = None

    fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(content)
        if mode is not None:
            os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except OSError:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise
