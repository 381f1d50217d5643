from __future__ import annotations

"""
Scan Configuration Domain.

Defines the immutable ScanOptions consumed by the scanner, the merge rule
that appends user-supplied ignore rules to the defaults, and the optional
JSON config file holding a user's standing additions.
"""

import json
import logging
import os
import re
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from templatetree.domain.constants import (
    DEFAULT_IGNORE_FILE_NAMES,
    DEFAULT_IGNORE_FOLDER_NAMES,
    DEFAULT_IGNORE_PATTERNS,
    DEFAULT_MAX_FILE_SIZE,
)
from templatetree.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"

PatternLike = Union[str, "re.Pattern[str]"]

# -----------------------------------------------------------------------------
# CONFIGURATION MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ScanOptions:
    """
    Effective filtering policy for a single scan.

    Attributes:
        ignore_file_names: Exact base names of files to skip.
        ignore_folder_names: Exact directory names to prune.
        ignore_patterns: Regex sources searched against file base names.
        max_file_size: Byte cap above which content is replaced by a
                       placeholder. 0 disables the cap.
    """
    ignore_file_names: Tuple[str, ...] = field(
        default_factory=lambda: tuple(DEFAULT_IGNORE_FILE_NAMES)
    )
    ignore_folder_names: Tuple[str, ...] = field(
        default_factory=lambda: tuple(DEFAULT_IGNORE_FOLDER_NAMES)
    )
    ignore_patterns: Tuple[str, ...] = field(
        default_factory=lambda: tuple(DEFAULT_IGNORE_PATTERNS)
    )
    max_file_size: int = DEFAULT_MAX_FILE_SIZE

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly view, used by --dump-config."""
        return {k: list(v) if isinstance(v, tuple) else v for k, v in asdict(self).items()}


def build_scan_options(
        ignore_file_names: Optional[Iterable[str]] = None,
        ignore_folder_names: Optional[Iterable[str]] = None,
        ignore_patterns: Optional[Iterable[PatternLike]] = None,
        max_file_size: Optional[int] = None,
) -> ScanOptions:
    """
    Merge user-supplied rules into the defaults.

    Set-like options are appended to the defaults, never replacing them;
    duplicates are dropped while keeping first-seen order. ``max_file_size``
    replaces the default outright when given.

    Args:
        ignore_file_names: Extra file names to skip.
        ignore_folder_names: Extra directory names to prune.
        ignore_patterns: Extra regexes, as strings or compiled patterns.
        max_file_size: Replacement byte cap (0 disables it).

    Returns:
        ScanOptions: The merged, immutable option set.
    """
    patterns = [p.pattern if isinstance(p, re.Pattern) else p for p in (ignore_patterns or [])]

    return ScanOptions(
        ignore_file_names=_append_unique(DEFAULT_IGNORE_FILE_NAMES, ignore_file_names),
        ignore_folder_names=_append_unique(DEFAULT_IGNORE_FOLDER_NAMES, ignore_folder_names),
        ignore_patterns=_append_unique(DEFAULT_IGNORE_PATTERNS, patterns),
        max_file_size=DEFAULT_MAX_FILE_SIZE if max_file_size is None else int(max_file_size),
    )


def get_default_config() -> Dict[str, Any]:
    """
    Raw option additions applied when no config file is present.

    Returns:
        Dict[str, Any]: Empty additions and the default size cap.
    """
    return {
        "ignore_file_names": [],
        "ignore_folder_names": [],
        "ignore_patterns": [],
        "max_file_size": None,
    }

# -----------------------------------------------------------------------------
# PERSISTENCE LOGIC
# -----------------------------------------------------------------------------

def get_config_path() -> str:
    """Location of the user-level config file."""
    return os.path.join(get_user_data_dir(create=False), CONFIG_FILE_NAME)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load raw option additions from a JSON config file.

    Missing or corrupt files yield the defaults; unknown keys are ignored.
    The result is unvalidated and should go through ``validate_options``.

    Args:
        path: Explicit config file. Defaults to the user data directory.

    Returns:
        Dict[str, Any]: Raw option additions.
    """
    config_path = path or get_config_path()
    config = get_default_config()

    if not os.path.exists(config_path):
        logger.debug(f"Config file not found at {config_path}. Using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config '{config_path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file '{config_path}'. Using defaults.")
        return config

    for key in config:
        if key in data:
            config[key] = data[key]
    return config

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _append_unique(defaults: Iterable[str], extra: Optional[Iterable[str]]) -> Tuple[str, ...]:
    """Concatenate two sequences dropping repeated entries."""
    merged: List[str] = []
    for item in list(defaults) + list(extra or []):
        if item not in merged:
            merged.append(item)
    return tuple(merged)
