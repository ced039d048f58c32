"""Commit message file access.

Files are read and written with newline="" so line endings pass through
untouched, and with errors="surrogateescape" so bytes that are not UTF-8
(e.g. a latin-1 message) are written back exactly as they were read.
"""

import os
import shutil
import tempfile
from pathlib import Path

from branchnote.rule.exceptions import MessageFileError

ENCODING = "utf-8"
ERRORS = "surrogateescape"


def read_message(path: Path) -> str:
    """Read the commit message file.

    Raises:
        MessageFileError: If the file cannot be read.
    """
    try:
        with open(path, "r", encoding=ENCODING, errors=ERRORS, newline="") as f:
            return f.read()
    except OSError as e:
        raise MessageFileError(f"Failed to read commit message from {path}: {e}")


def prepend_to_message(path: Path, replacement: str, original: str) -> str:
    """Write replacement followed by the original message to path.

    The new content goes to a temporary file next to path, which then
    replaces path, so a failed write leaves the original message intact.

    Args:
        path: The commit message file.
        replacement: Text to insert in front. No separator is added.
        original: The message as read from path.

    Returns:
        The new file content.

    Raises:
        MessageFileError: If the file cannot be written.
    """
    path = Path(path)
    content = f"{replacement}{original}"
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
        )
        with os.fdopen(fd, "w", encoding=ENCODING, errors=ERRORS, newline="") as f:
            f.write(content)
        if path.exists():
            shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as e:
        raise MessageFileError(f"Failed to write commit message to {path}: {e}")
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
    return content
