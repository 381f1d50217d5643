from __future__ import annotations

"""
Template Persistence Adapter.

Stores a scanned tree as a JSON document and reads it back. Both directions
degrade to the empty template instead of raising: ``save`` always leaves a
valid document behind, ``read`` always returns a tree. The only error that
escapes is an OSError when even the fallback document cannot be written.
"""

import asyncio
import logging
from typing import Optional

from templatetree.core.services.scanner import scan_template_directory
from templatetree.core.services.serializer import TemplateDocumentError, dumps_tree, loads_tree
from templatetree.domain.config import ScanOptions
from templatetree.domain.template_models import TemplateFolder, empty_template
from templatetree.infra.fs import ensure_parent_dir

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

async def save_template_structure(
        template_path: str,
        output_path: str,
        options: Optional[ScanOptions] = None,
) -> None:
    """
    Scan ``template_path`` and write the tree document to ``output_path``.

    Missing parent directories are created. If scanning, encoding or writing
    fails, the empty template document is written instead.

    Args:
        template_path: Root directory to scan.
        output_path: Destination document path.
        options: Effective filtering policy.

    Raises:
        OSError: If the fallback document cannot be written either.
    """
    try:
        tree = await scan_template_directory(template_path, options)
        await _write_document(output_path, dumps_tree(tree))
        logger.info(f"Template structure saved to {output_path}")
    except Exception as e:
        logger.warning(f"Template generation failed, writing empty template: {e}", exc_info=True)
        await _write_document(output_path, dumps_tree(empty_template()))


async def read_template_structure(file_path: str) -> TemplateFolder:
    """
    Read a tree document, returning the empty template on any failure.

    Args:
        file_path: Path of the stored document.

    Returns:
        TemplateFolder: The decoded tree or the empty template.
    """
    try:
        text = await asyncio.to_thread(_read_text, file_path)
        return loads_tree(text)
    except (OSError, UnicodeDecodeError, TemplateDocumentError) as e:
        logger.warning(f"Cannot read template structure from {file_path}: {e}")
        return empty_template()


def save_template_structure_sync(
        template_path: str,
        output_path: str,
        options: Optional[ScanOptions] = None,
) -> None:
    """Blocking wrapper around ``save_template_structure``."""
    asyncio.run(save_template_structure(template_path, output_path, options))


def read_template_structure_sync(file_path: str) -> TemplateFolder:
    """Blocking wrapper around ``read_template_structure``."""
    return asyncio.run(read_template_structure(file_path))


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

async def _write_document(output_path: str, text: str) -> None:
    await asyncio.to_thread(ensure_parent_dir, output_path)
    await asyncio.to_thread(_write_text, output_path, text)


def _write_text(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def _read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()
