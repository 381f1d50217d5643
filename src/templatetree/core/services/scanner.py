from __future__ import annotations

"""
Template Directory Scanner.

Walks a directory depth-first and builds the TemplateFolder tree mirroring
it. Every blocking filesystem call is pushed to a worker thread with
``asyncio.to_thread`` so the event loop stays responsive while the walk
proceeds one entry at a time in listing order.

The walk never raises to its caller for I/O problems:
- a missing or non-directory root yields the empty template;
- an unreadable directory listing yields a folder with no items;
- an unreadable file yields a file node with empty content;
- a directory nested past the depth limit yields a folder with no items.
"""

import asyncio
import logging
import os
import re
import stat
from typing import List, Optional, Sequence, Tuple

from templatetree.core.pipeline.components.filters import (
    compile_patterns,
    is_ignored_file,
    is_ignored_folder,
)
from templatetree.core.pipeline.components.reader import get_file_size, read_text_content
from templatetree.domain.config import ScanOptions
from templatetree.domain.constants import MAX_SCAN_DEPTH, ROOT_FOLDER_NAME
from templatetree.domain.template_models import (
    TemplateFile,
    TemplateFolder,
    TemplateItem,
    empty_template,
    too_large_marker,
)
from templatetree.infra.fs import split_entry_name

logger = logging.getLogger(__name__)

# (name, is_directory, is_regular_file) as reported by the listing
_Entry = Tuple[str, bool, bool]


# ==============================================================================
# PUBLIC API
# ==============================================================================

async def scan_template_directory(
        template_path: str,
        options: Optional[ScanOptions] = None,
) -> TemplateFolder:
    """
    Scan a directory and return its structured tree representation.

    Args:
        template_path: Root directory to scan. It need not exist.
        options: Effective filtering policy. Defaults to ``ScanOptions()``.

    Returns:
        TemplateFolder: Tree rooted at the scanned directory, or the empty
                        template when the root is missing or not a directory.
    """
    opts = options or ScanOptions()

    if not await _is_directory(template_path):
        logger.warning(f"Template directory not found: {template_path}")
        return empty_template()

    ignore_rx = compile_patterns(opts.ignore_patterns)
    folder_name = _root_folder_name(template_path)

    logger.debug(f"Scanning template directory '{template_path}' as '{folder_name}'")
    tree = await _process_directory(folder_name, template_path, opts, ignore_rx)
    logger.debug(f"Finished scanning '{template_path}': {len(tree.items)} top-level items")
    return tree


def scan_template_directory_sync(
        template_path: str,
        options: Optional[ScanOptions] = None,
) -> TemplateFolder:
    """Blocking wrapper around ``scan_template_directory`` for scripts."""
    return asyncio.run(scan_template_directory(template_path, options))


# ==============================================================================
# RECURSIVE TRAVERSAL
# ==============================================================================

async def _process_directory(
        folder_name: str,
        folder_path: str,
        options: ScanOptions,
        ignore_rx: Sequence[re.Pattern],
        depth: int = 0,
) -> TemplateFolder:
    """
    Build the folder node for one directory, recursing into retained children.

    Ignored folders are pruned before descent: their contents are never
    listed, so permission problems inside them cannot surface.

    Directories nested deeper than ``MAX_SCAN_DEPTH`` below the root are
    kept as empty folders, which keeps every scanned tree within what the
    document codec can write and read back.
    """
    if depth > MAX_SCAN_DEPTH:
        logger.warning(f"Nesting limit ({MAX_SCAN_DEPTH}) reached, contents skipped: {folder_path}")
        return TemplateFolder(folder_name=folder_name, items=())

    try:
        entries = await asyncio.to_thread(_list_entries, folder_path)
    except OSError as e:
        logger.warning(f"Error processing directory {folder_path}: {e}")
        return TemplateFolder(folder_name=folder_name, items=())

    items: List[TemplateItem] = []

    for entry_name, is_dir, is_file in entries:
        entry_path = os.path.join(folder_path, entry_name)

        if is_dir:
            if is_ignored_folder(entry_name, options.ignore_folder_names):
                logger.debug(f"Pruned folder: {entry_path}")
                continue
            try:
                child = await _process_directory(
                    entry_name, entry_path, options, ignore_rx, depth + 1
                )
            except RecursionError:
                logger.warning(f"Nesting too deep to descend, contents skipped: {entry_path}")
                child = TemplateFolder(folder_name=entry_name, items=())
            items.append(child)

        elif is_file:
            if is_ignored_file(entry_name, options.ignore_file_names, ignore_rx):
                logger.debug(f"Ignored file: {entry_path}")
                continue
            items.append(await _process_file(entry_name, entry_path, options))

    return TemplateFolder(folder_name=folder_name, items=tuple(items))


async def _process_file(file_name: str, file_path: str, options: ScanOptions) -> TemplateFile:
    """
    Build the file node, replacing oversized content by a size marker.

    Read failures degrade to an empty-content node.
    """
    stem, extension = split_entry_name(file_name)

    try:
        size = await asyncio.to_thread(get_file_size, file_path)
        if options.max_file_size and size > options.max_file_size:
            logger.debug(f"File above size cap ({size} bytes): {file_path}")
            content = too_large_marker(size)
        else:
            content = await asyncio.to_thread(read_text_content, file_path)
    except OSError as e:
        logger.warning(f"Unreadable file kept with empty content: {file_path} ({e})")
        content = ""

    return TemplateFile(filename=stem, file_extension=extension, content=content)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

async def _is_directory(path: str) -> bool:
    """True if ``path`` exists and resolves to a directory."""
    try:
        st = await asyncio.to_thread(os.stat, path)
    except (OSError, ValueError):
        return False
    return stat.S_ISDIR(st.st_mode)


def _list_entries(folder_path: str) -> List[_Entry]:
    """
    Read a directory listing in the order the filesystem yields it.

    Symbolic links are reported as neither directory nor file, so they are
    never followed. Entries whose type cannot be determined are dropped.

    Raises:
        OSError: If the directory itself cannot be listed.
    """
    entries: List[_Entry] = []
    with os.scandir(folder_path) as it:
        for entry in it:
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = entry.is_file(follow_symlinks=False)
            except OSError as e:
                logger.warning(f"Cannot determine type of {entry.path}: {e}")
                continue
            entries.append((entry.name, is_dir, is_file))
    return entries


def _root_folder_name(template_path: str) -> str:
    """Last path segment of the root, tolerant of trailing separators."""
    abs_path = os.path.abspath(template_path)
    return os.path.basename(abs_path) or ROOT_FOLDER_NAME
