from __future__ import annotations

"""
Template Tree Data Models.

A template tree is a closed two-variant structure: a TemplateFolder owns an
ordered tuple of items, each of which is either a TemplateFile or another
TemplateFolder. Both nodes are frozen, so a tree handed to a consumer
cannot be altered after the scan that produced it.
"""

from dataclasses import dataclass, field
from typing import Tuple, Union

from templatetree.domain.constants import EMPTY_TEMPLATE_NAME, TOO_LARGE_MARKER

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TemplateFile:
    """
    Leaf entry of the template tree.

    Attributes:
        filename: Base name without the extension.
        file_extension: Lower-cased extension without the leading dot.
        content: Verbatim text, a size placeholder, or '' when unreadable.
    """
    filename: str
    file_extension: str
    content: str = ""


@dataclass(frozen=True)
class TemplateFolder:
    """
    Directory entry of the template tree.

    Attributes:
        folder_name: Single path segment naming the directory.
        items: Children in filesystem listing order.
    """
    folder_name: str
    items: Tuple["TemplateItem", ...] = field(default_factory=tuple)


TemplateItem = Union[TemplateFile, TemplateFolder]

# -----------------------------------------------------------------------------
# FACTORIES
# -----------------------------------------------------------------------------

def empty_template() -> TemplateFolder:
    """Return the canonical zero-item fallback tree."""
    return TemplateFolder(folder_name=EMPTY_TEMPLATE_NAME, items=())


def too_large_marker(size: int) -> str:
    """Placeholder content for files above the configured size cap."""
    return TOO_LARGE_MARKER.format(size=size)
