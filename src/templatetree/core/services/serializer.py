from __future__ import annotations

"""
Template Document Codec.

Converts a TemplateFolder tree to and from its JSON document form:

    {"folderName": str, "items": [<folder or file>, ...]}
    {"filename": str, "fileExtension": str, "content": str}

Decoding validates the shape strictly so that a malformed document is
rejected as a whole rather than producing a partial tree.
"""

import json
from typing import Any, Dict

from templatetree.domain.constants import DOCUMENT_INDENT
from templatetree.domain.template_models import TemplateFile, TemplateFolder, TemplateItem


class TemplateDocumentError(ValueError):
    """Raised when a document does not describe a valid template tree."""


# -----------------------------------------------------------------------------
# ENCODING
# -----------------------------------------------------------------------------

def tree_to_dict(node: TemplateItem) -> Dict[str, Any]:
    """Convert a node and its descendants into plain JSON-compatible dicts."""
    if isinstance(node, TemplateFolder):
        return {
            "folderName": node.folder_name,
            "items": [tree_to_dict(item) for item in node.items],
        }
    return {
        "filename": node.filename,
        "fileExtension": node.file_extension,
        "content": node.content,
    }


def dumps_tree(tree: TemplateFolder) -> str:
    """
    Serialize a tree to the pretty-printed document text.

    Non-ASCII text is escaped, so names carrying surrogate-escaped bytes
    (undecodable on disk) survive the write and decode back unchanged.
    """
    return json.dumps(tree_to_dict(tree), ensure_ascii=True, indent=DOCUMENT_INDENT)

# -----------------------------------------------------------------------------
# DECODING
# -----------------------------------------------------------------------------

def tree_from_dict(data: Any) -> TemplateFolder:
    """
    Rebuild a tree from its dict form. The root must be a folder.

    Raises:
        TemplateDocumentError: If the structure or any field type is invalid.
    """
    try:
        node = _node_from_dict(data, "$")
    except RecursionError as e:
        raise TemplateDocumentError("Document is nested too deeply.") from e
    if not isinstance(node, TemplateFolder):
        raise TemplateDocumentError("Document root must be a folder.")
    return node


def loads_tree(text: str) -> TemplateFolder:
    """
    Parse document text into a tree.

    Raises:
        TemplateDocumentError: If the text is not valid JSON or not a tree.
    """
    try:
        data = json.loads(text)
    except ValueError as e:
        raise TemplateDocumentError(f"Malformed JSON: {e}") from e
    except RecursionError as e:
        raise TemplateDocumentError("Document is nested too deeply.") from e
    return tree_from_dict(data)


def _node_from_dict(data: Any, where: str) -> TemplateItem:
    if not isinstance(data, dict):
        raise TemplateDocumentError(f"{where}: expected object, found {type(data).__name__}.")

    if "folderName" in data:
        name = _require_str(data, "folderName", where)
        raw_items = data.get("items")
        if not isinstance(raw_items, list):
            raise TemplateDocumentError(f"{where}.items: expected array.")
        items = tuple(
            _node_from_dict(item, f"{where}.items[{i}]") for i, item in enumerate(raw_items)
        )
        return TemplateFolder(folder_name=name, items=items)

    if "filename" in data:
        return TemplateFile(
            filename=_require_str(data, "filename", where),
            file_extension=_require_str(data, "fileExtension", where),
            content=_require_str(data, "content", where),
        )

    raise TemplateDocumentError(f"{where}: object is neither a folder nor a file.")


def _require_str(data: Dict[str, Any], key: str, where: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise TemplateDocumentError(f"{where}.{key}: expected string.")
    return value
