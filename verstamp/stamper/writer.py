"""Atomic persistence of the generated artifact.

The text is written to a temporary file next to the destination and then
moved over it with os.replace(), so readers see either the previous file
or the complete new one. A failed write removes the temporary file.
"""

import contextlib
import os
import stat
import tempfile
from pathlib import Path

from verstamp.utils.errors import WriteError
from verstamp.utils.logging import log_message

DEFAULT_FILE_MODE = 0o644


def _target_mode(destination: Path) -> int:
    try:
        return stat.S_IMODE(destination.stat().st_mode)
    except OSError:
        return DEFAULT_FILE_MODE


def persist(text: str, destination: Path) -> Path:
    """Write text to destination, replacing any existing file.

    The destination directory must already exist. An existing file keeps
    its permission bits; a new one gets 0o644. No backup is made.

    Raises:
        WriteError: If the directory is missing or the file cannot be written.
    """
    directory = destination.parent
    if not directory.is_dir():
        raise WriteError(f"Output directory does not exist: {directory}", path=destination)

    try:
        fd, temp_name = tempfile.mkstemp(
            dir=directory,
            prefix=f".{destination.name}.",
            suffix=".tmp",
        )
    except OSError as e:
        raise WriteError(f"Cannot write {destination}: {e}", path=destination) from e

    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        os.chmod(temp_path, _target_mode(destination))
        os.replace(temp_path, destination)
    except OSError as e:
        with contextlib.suppress(OSError):
            temp_path.unlink()
        raise WriteError(f"Cannot write {destination}: {e}", path=destination) from e
    except Exception:
        with contextlib.suppress(OSError):
            temp_path.unlink()
        raise

    log_message(f"Wrote {len(text)} characters to {destination}")
    return destination
