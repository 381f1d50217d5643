from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures building small template directories on disk.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def template_project(tmp_path: Path) -> Path:
    """
    Create a small template project containing retained files and noise.

    Structure:
    /my-app
      package.json
      package-lock.json        (ignored by name)
      README.md
      .env                     (ignored by name)
      notes.txt~               (ignored by pattern)
      /src
        index.ts
        /utils
          helper.ts
      /node_modules            (pruned)
        /lodash
          index.js
      /.git                    (pruned)
        HEAD
    """
    root = tmp_path / "my-app"
    root.mkdir()

    (root / "package.json").write_text('{"name": "my-app"}', encoding="utf-8")
    (root / "package-lock.json").write_text("{}", encoding="utf-8")
    (root / "README.md").write_text("# My App\n", encoding="utf-8")
    (root / ".env").write_text("SECRET=1", encoding="utf-8")
    (root / "notes.txt~").write_text("backup", encoding="utf-8")

    utils = root / "src" / "utils"
    utils.mkdir(parents=True)
    (root / "src" / "index.ts").write_text("export * from './utils/helper';\n", encoding="utf-8")
    (utils / "helper.ts").write_text("export const add = (a: number, b: number) => a + b;\n", encoding="utf-8")

    lodash = root / "node_modules" / "lodash"
    lodash.mkdir(parents=True)
    (lodash / "index.js").write_text("module.exports = {};", encoding="utf-8")

    git_dir = root / ".git"
    git_dir.mkdir()
    (git_dir / "HEAD").write_text("ref: refs/heads/main", encoding="utf-8")

    return root
