from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the side-effecting boundary of a scaffold run: idempotent directory
creation and empty-file creation. Every operation reports failure as a
(success, error) tuple instead of raising, so a single bad entry never aborts
the rest of the scaffold.
"""

import os
from typing import List, Optional, Tuple

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def expand_path(path: Optional[str]) -> str:
    """
    Expand environment variables ($VAR/%VAR%) and user shortcuts (~/).

    The result keeps its relative/absolute form so progress messages show
    paths the way the user wrote them.

    Args:
        path: Raw input path string.

    Returns:
        str: Expanded path, or an empty string for empty input.
    """
    p = (path or "").strip()
    if not p:
        return ""
    return os.path.expandvars(os.path.expanduser(p))

# -----------------------------------------------------------------------------
# FILESYSTEM OPERATIONS API
# -----------------------------------------------------------------------------

def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except (OSError, ValueError) as e:
        return False, str(e)


def safe_create_empty_file(path: str) -> Tuple[bool, Optional[str]]:
    """
    Create an empty file, truncating it when it already exists.

    Parent directories are created first.

    Args:
        path: Target file path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    parent = os.path.dirname(path)
    if parent:
        ok, err = safe_mkdir(parent)
        if not ok:
            return False, err
    try:
        with open(path, "w", encoding="utf-8"):
            pass
        return True, None
    except (OSError, ValueError) as e:
        return False, str(e)

# -----------------------------------------------------------------------------
# SINKS
# -----------------------------------------------------------------------------

class FilesystemSink:
    """Writes directories and empty files to the local disk."""

    def ensure_directory(self, path: str) -> Tuple[bool, Optional[str]]:
        return safe_mkdir(path)

    def create_empty_file(self, path: str) -> Tuple[bool, Optional[str]]:
        return safe_create_empty_file(path)


class DryRunSink:
    """
    Records requested operations without touching the disk.

    Attributes:
        directories: Paths passed to ensure_directory, in call order.
        files: Paths passed to create_empty_file, in call order.
    """

    def __init__(self) -> None:
        self.directories: List[str] = []
        self.files: List[str] = []

    def ensure_directory(self, path: str) -> Tuple[bool, Optional[str]]:
        self.directories.append(path)
        return True, None

    def create_empty_file(self, path: str) -> Tuple[bool, Optional[str]]:
        self.files.append(path)
        return True, None
