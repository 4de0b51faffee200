"""Idempotent creation of directories and files.

Both operations can be repeated any number of times with the same arguments
and converge to the same state on disk. A NEVER_OVERWRITE file that exists is
never touched, so edits made after the first run survive every re-run.
"""

import os
from enum import Enum

from projseed.scaffold.errors import FilesystemError, FileWriteError
from projseed.scaffold.model import OverwritePolicy

TEMP_SUFFIX = ".projseed-tmp"


class FileOutcome(Enum):
    CREATED = "created"
    REFRESHED = "refreshed"
    SKIPPED = "skipped"


def ensure_directory(path: str) -> bool:
    """Create path and any missing ancestors.

    Returns:
        True if the directory was created, False if it already existed

    Raises:
        FilesystemError: If the directory cannot be created or a
            non-directory is in the way
    """
    if os.path.isdir(path):
        return False
    if os.path.exists(path):
        raise FilesystemError(f"Not a directory: {path}")
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise FilesystemError(f"Cannot create directory {path}: {e}") from e
    return True


def ensure_file(path: str, content: str, policy: OverwritePolicy) -> FileOutcome:
    """Write content to path according to policy.

    Raises:
        FilesystemError: If the parent directory cannot be created
        FileWriteError: If the file itself cannot be written
    """
    exists = os.path.exists(path)
    if exists and os.path.isdir(path):
        raise FileWriteError(f"A directory is in the way of file {path}")
    if exists and policy is OverwritePolicy.NEVER_OVERWRITE:
        return FileOutcome.SKIPPED

    parent = os.path.dirname(path)
    if parent:
        ensure_directory(parent)

    try:
        data = content.encode("utf-8")
    except UnicodeError as e:
        raise FileWriteError(f"Cannot encode content for {path}: {e}") from e

    # Written beside the target and renamed over it: path never holds partial content.
    temp_path = path + TEMP_SUFFIX
    try:
        with open(temp_path, "wb") as f:
            f.write(data)
        os.replace(temp_path, path)
    except OSError as e:
        raise FileWriteError(f"Cannot write {path}: {e}") from e
    finally:
        if os.path.lexists(temp_path):
            os.remove(temp_path)

    return FileOutcome.REFRESHED if exists else FileOutcome.CREATED
