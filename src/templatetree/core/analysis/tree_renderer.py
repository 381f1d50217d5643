from __future__ import annotations

"""
Tree Renderer.

Converts a TemplateFolder into an ASCII representation for terminal
display and computes simple node statistics.
"""

from typing import List, Tuple

from templatetree.domain.template_models import TemplateFile, TemplateFolder

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree_lines(tree: TemplateFolder) -> List[str]:
    """
    Render a tree as lines using standard connectors (├──, └──).

    Items appear in stored order. Folders carry a trailing slash and files
    are shown with their extension re-attached.

    Args:
        tree: Root folder to render.

    Returns:
        List[str]: One line per node, root first.
    """
    lines: List[str] = [f"{tree.folder_name}/"]
    _render_items(tree, lines, prefix="")
    return lines


def count_nodes(tree: TemplateFolder) -> Tuple[int, int]:
    """
    Count the folders and files below the root (root excluded).

    Returns:
        Tuple[int, int]: (folders, files).
    """
    folders = 0
    files = 0
    for item in tree.items:
        if isinstance(item, TemplateFolder):
            sub_folders, sub_files = count_nodes(item)
            folders += 1 + sub_folders
            files += sub_files
        else:
            files += 1
    return folders, files


def display_name(node: TemplateFile) -> str:
    """Base name of a file node as it appeared on disk (extension lower-cased)."""
    if node.file_extension:
        return f"{node.filename}.{node.file_extension}"
    return node.filename

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _render_items(folder: TemplateFolder, lines: List[str], prefix: str) -> None:
    total = len(folder.items)

    for i, node in enumerate(folder.items):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "

        if isinstance(node, TemplateFolder):
            lines.append(f"{prefix}{connector}{node.folder_name}/")
            _render_items(node, lines, prefix + ("    " if is_last else "│   "))
        else:
            lines.append(f"{prefix}{connector}{display_name(node)}")
