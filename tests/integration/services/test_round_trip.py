from __future__ import annotations

"""
Integration tests for the scan -> save -> load cycle.

A tree read back from a saved document must be structurally identical to
the tree produced by a direct scan of the same directory.
"""

import asyncio
import os
import sys
from pathlib import Path

import pytest

from templatetree.core.services.persistence import (
    read_template_structure,
    save_template_structure,
)
from templatetree.core.services.scanner import scan_template_directory
from templatetree.domain.config import build_scan_options
from templatetree.domain.template_models import TemplateFolder


def _cycle(root: Path, doc: Path, options=None):
    async def run():
        scanned = await scan_template_directory(str(root), options)
        await save_template_structure(str(root), str(doc), options)
        loaded = await read_template_structure(str(doc))
        return scanned, loaded
    return asyncio.run(run())


def test_round_trip_preserves_structure(template_project: Path, tmp_path: Path) -> None:
    scanned, loaded = _cycle(template_project, tmp_path / "doc.json")

    assert isinstance(loaded, TemplateFolder)
    assert loaded == scanned
    assert loaded.folder_name == "my-app"


def test_round_trip_with_awkward_content(tmp_path: Path) -> None:
    root = tmp_path / "awkward"
    (root / "deep" / "er" / "est").mkdir(parents=True)
    (root / "deep" / "er" / "est" / "unicode.md").write_text("héllo 🌍\n\t\"quoted\" \\ back", encoding="utf-8")
    (root / "crlf.txt").write_bytes(b"a\r\nb\r\n")
    (root / "binary.dat").write_bytes(bytes(range(256)))
    (root / "empty").mkdir()
    (root / "big.log").write_bytes(b"." * 64)

    options = build_scan_options(max_file_size=32)
    scanned, loaded = _cycle(root, tmp_path / "out" / "doc.json", options)

    assert loaded == scanned


def test_round_trip_of_missing_root(tmp_path: Path) -> None:
    scanned, loaded = _cycle(tmp_path / "missing", tmp_path / "doc.json")
    assert loaded == scanned
    assert loaded.items == ()


@pytest.mark.skipif(sys.platform in ("win32", "darwin"), reason="needs byte-string file names")
def test_round_trip_with_undecodable_file_name(tmp_path: Path) -> None:
    root = tmp_path / "names"
    root.mkdir()
    (root / "good.txt").write_text("ok", encoding="utf-8")
    try:
        with open(os.fsencode(str(root)) + b"/bad\xff.txt", "wb") as fh:
            fh.write(b"bytes")
    except OSError:
        pytest.skip("filesystem rejects non-UTF-8 names")

    doc = tmp_path / "doc.json"
    scanned, loaded = _cycle(root, doc)

    assert len(scanned.items) == 2
    assert loaded == scanned
    assert "bad\\udcff" in doc.read_text(encoding="utf-8")


@pytest.mark.skipif(os.name == "nt", reason="path length limits")
def test_round_trip_of_very_deep_tree(tmp_path: Path) -> None:
    root = tmp_path / "deep"
    chain = [str(root)]
    for _ in range(1200):
        chain.append(os.path.join(chain[-1], "a"))
    for path in chain:
        os.mkdir(path)

    try:
        scanned, loaded = _cycle(root, tmp_path / "doc.json")
    finally:
        for path in reversed(chain):
            os.rmdir(path)

    assert scanned.folder_name == "deep"
    assert loaded == scanned
