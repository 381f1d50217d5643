from __future__ import annotations

"""
Unit tests for the Entry Filtering Engine.

Verifies:
1. Regex compilation and matching logic.
2. Exact-name folder pruning.
3. File exclusion by name and by pattern, including the defaults.
"""

import re

from templatetree.core.pipeline.components.filters import (
    compile_patterns,
    is_ignored_file,
    is_ignored_folder,
    matches_any,
)
from templatetree.domain.constants import (
    DEFAULT_IGNORE_FILE_NAMES,
    DEFAULT_IGNORE_FOLDER_NAMES,
    DEFAULT_IGNORE_PATTERNS,
)


def test_compile_patterns_handles_valid_and_invalid():
    """Valid patterns compile and invalid ones are skipped."""
    compiled = compile_patterns([r"^valid.*", r"[invalid_regex", r"normal"])

    assert len(compiled) == 2
    assert all(isinstance(rx, re.Pattern) for rx in compiled)


def test_matches_any_uses_search():
    compiled = compile_patterns([r"~$", r"^\.#"])

    assert matches_any("draft.md~", compiled) is True
    assert matches_any(".#lockfile", compiled) is True
    assert matches_any("keep.md", compiled) is False


def test_folder_pruning_is_exact_name():
    assert is_ignored_folder("node_modules", DEFAULT_IGNORE_FOLDER_NAMES) is True
    assert is_ignored_folder(".git", DEFAULT_IGNORE_FOLDER_NAMES) is True
    assert is_ignored_folder("node_modules_backup", DEFAULT_IGNORE_FOLDER_NAMES) is False
    assert is_ignored_folder("src", DEFAULT_IGNORE_FOLDER_NAMES) is False


def test_default_file_rules_block_common_noise():
    """Lockfiles, env files, swap files and backups are excluded by default."""
    rx = compile_patterns(DEFAULT_IGNORE_PATTERNS)

    noise = [
        "package-lock.json",
        "yarn.lock",
        ".DS_Store",
        ".env",
        ".env.production",
        ".index.ts.swp",
        ".#main.py",
        "README.md~",
    ]
    for name in noise:
        assert is_ignored_file(name, DEFAULT_IGNORE_FILE_NAMES, rx) is True, name

    kept = ["index.ts", "package.json", ".eslintrc", "env.ts", "a.txt"]
    for name in kept:
        assert is_ignored_file(name, DEFAULT_IGNORE_FILE_NAMES, rx) is False, name


def test_user_pattern_excludes_lockfile_extension():
    rx = compile_patterns(list(DEFAULT_IGNORE_PATTERNS) + [r"\.lockfile$"])
    assert is_ignored_file("b.lockfile", DEFAULT_IGNORE_FILE_NAMES, rx) is True
    assert is_ignored_file("a.txt", DEFAULT_IGNORE_FILE_NAMES, rx) is False
