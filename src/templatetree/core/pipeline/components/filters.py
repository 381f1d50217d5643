from __future__ import annotations

"""
Entry Filtering Engine.

Decides which directory entries survive a scan. Folders are matched by exact
name and pruned before descent; files are matched by exact name or by any
ignore regex searched against the base name.
"""

import logging
import re
from typing import Collection, Iterable, List

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATTERN COMPILATION AND MATCHING
# -----------------------------------------------------------------------------

def compile_patterns(patterns: Iterable[str]) -> List[re.Pattern]:
    """
    Transform raw regex strings into compiled Pattern objects.

    Malformed expressions are discarded and logged so that one bad rule
    cannot abort a scan.

    Args:
        patterns: Raw regex strings.

    Returns:
        List[re.Pattern]: Compiled regex objects.
    """
    compiled: List[re.Pattern] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error as e:
            logger.warning(f"Discarding invalid ignore pattern {p!r}: {e}")
    return compiled


def matches_any(name: str, compiled_patterns: Iterable[re.Pattern]) -> bool:
    """
    Verify if a name matches at least one compiled regex pattern.

    Args:
        name: File base name to evaluate.
        compiled_patterns: Pre-compiled regex objects.

    Returns:
        bool: True if any match is found, False otherwise.
    """
    return any(rx.search(name) for rx in compiled_patterns)

# -----------------------------------------------------------------------------
# ENTRY CLASSIFICATION
# -----------------------------------------------------------------------------

def is_ignored_folder(folder_name: str, ignore_folder_names: Collection[str]) -> bool:
    """True when the directory must be pruned without visiting its contents."""
    return folder_name in ignore_folder_names


def is_ignored_file(
        file_name: str,
        ignore_file_names: Collection[str],
        ignore_rx: Iterable[re.Pattern],
) -> bool:
    """
    Check a file base name against the exact-name list, then the patterns.

    Args:
        file_name: Base name of the file.
        ignore_file_names: Exact names to skip.
        ignore_rx: Compiled ignore patterns.

    Returns:
        bool: True if the file must be left out of the tree.
    """
    if file_name in ignore_file_names:
        return True
    return matches_any(file_name, ignore_rx)
