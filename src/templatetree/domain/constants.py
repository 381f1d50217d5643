from __future__ import annotations

"""
Domain Constants.

Default ignore rules and fixed markers shared by the scanner, the
option validator and the persistence adapter.
"""

from typing import List

EMPTY_TEMPLATE_NAME = "empty-template"
ROOT_FOLDER_NAME = "root"
MAX_SCAN_DEPTH = 200
DEFAULT_MAX_FILE_SIZE = 1024 * 1024
TOO_LARGE_MARKER = "[File too large: {size} bytes]"
DOCUMENT_INDENT = 2

# Lockfiles, OS/editor metadata and environment files
DEFAULT_IGNORE_FILE_NAMES: List[str] = [
    "package-lock.json",
    "yarn.lock",
    ".DS_Store",
    "thumbs.db",
    ".gitignore",
    ".npmrc",
    ".yarnrc",
    ".env",
    ".env.local",
    ".env.development",
    ".env.production",
]

# Dependency, build, VCS and editor directories (pruned, never descended)
DEFAULT_IGNORE_FOLDER_NAMES: List[str] = [
    "node_modules",
    ".git",
    ".vscode",
    ".idea",
    "dist",
    "build",
    "coverage",
]

# Vim swap files, Emacs lock files, editor backups
DEFAULT_IGNORE_PATTERNS: List[str] = [
    r"^\..+\.swp$",
    r"^\.#",
    r"~$",
]
