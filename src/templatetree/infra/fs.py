from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path manipulation and directory creation
utilities shared by the scanner, the persistence adapter and the
configuration layer.
"""

import os
from typing import Optional, Tuple

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "TemplateTree"
UNIX_APP_DIR_NAME = ".templatetree"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir(create: bool = True) -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Standards:
    - Windows: %LOCALAPPDATA%/TemplateTree
    - Linux/Mac: ~/.templatetree

    Args:
        create: Create the directory hierarchy if it does not exist.

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    # Windows specific resolution
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    if create:
        try:
            os.makedirs(path, exist_ok=True)
        except OSError:
            pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    The path is taken literally: no '~' or $VAR expansion is applied, so
    names containing those characters are scanned as they are on disk.
    Reverts to fallback if the input is blank.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = path if path and path.strip() else fallback
    return os.path.abspath(p)


def split_entry_name(entry_name: str) -> Tuple[str, str]:
    """
    Split a base name into (stem, extension) without the separator.

    A leading dot does not start an extension, so '.env' has no extension
    while 'archive.tar.gz' yields ('archive.tar', 'gz').

    Args:
        entry_name: Single path segment.

    Returns:
        Tuple[str, str]: Stem and lower-cased extension.
    """
    stem, ext = os.path.splitext(entry_name)
    return stem, ext[1:].lower()

# -----------------------------------------------------------------------------
# FILESYSTEM OPERATIONS
# -----------------------------------------------------------------------------

def ensure_parent_dir(path: str) -> None:
    """
    Create the parent directory hierarchy for a target file.

    Args:
        path: Target file path.

    Raises:
        OSError: If the hierarchy cannot be created.
    """
    parent = os.path.dirname(os.path.abspath(path))
    if parent:
        os.makedirs(parent, exist_ok=True)
