from __future__ import annotations

"""
Unit tests for the Template Document Codec.

Verifies the document schema, pretty-printing and strict rejection of
malformed documents.
"""

import json

import pytest

from templatetree.core.services.serializer import (
    TemplateDocumentError,
    dumps_tree,
    loads_tree,
    tree_from_dict,
    tree_to_dict,
)
from templatetree.domain.template_models import TemplateFile, TemplateFolder


@pytest.fixture
def sample_tree() -> TemplateFolder:
    return TemplateFolder("app", (
        TemplateFile("package", "json", '{"name": "app"}'),
        TemplateFolder("src", (
            TemplateFile("main", "ts", "console.log('ñ');\r\n"),
            TemplateFolder("empty", ()),
        )),
    ))


def test_tree_to_dict_schema(sample_tree: TemplateFolder) -> None:
    data = tree_to_dict(sample_tree)

    assert data["folderName"] == "app"
    assert data["items"][0] == {
        "filename": "package",
        "fileExtension": "json",
        "content": '{"name": "app"}',
    }
    assert data["items"][1]["folderName"] == "src"
    assert data["items"][1]["items"][1] == {"folderName": "empty", "items": []}


def test_dumps_tree_uses_two_space_indent(sample_tree: TemplateFolder) -> None:
    text = dumps_tree(sample_tree)
    assert text.splitlines()[1].startswith('  "folderName"')
    assert "ñ" not in text
    assert "\\u00f1" in text


def test_dumps_tree_escapes_undecodable_names() -> None:
    tree = TemplateFolder("r", (TemplateFile("bad\udcff", "txt", ""),))
    text = dumps_tree(tree)
    text.encode("utf-8")
    assert loads_tree(text) == tree


def test_loads_reverses_dumps(sample_tree: TemplateFolder) -> None:
    assert loads_tree(dumps_tree(sample_tree)) == sample_tree


def test_items_order_is_preserved() -> None:
    tree = TemplateFolder("r", tuple(TemplateFile(n, "txt", n) for n in ("z", "a", "m")))
    restored = loads_tree(dumps_tree(tree))
    assert [i.filename for i in restored.items] == ["z", "a", "m"]


@pytest.mark.parametrize("text", [
    "",
    "{not json",
    "[]",
    '"just a string"',
    '{"filename": "a", "fileExtension": "txt", "content": ""}',
    '{"folderName": "r"}',
    '{"folderName": "r", "items": {}}',
    '{"folderName": 3, "items": []}',
    '{"folderName": "r", "items": [{"filename": "a", "fileExtension": "txt"}]}',
    '{"folderName": "r", "items": [{"name": "a"}]}',
    '{"folderName": "r", "items": [42]}',
])
def test_loads_rejects_malformed_documents(text: str) -> None:
    with pytest.raises(TemplateDocumentError):
        loads_tree(text)


def test_document_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        tree_from_dict(None)


def test_dumped_document_is_plain_json(sample_tree: TemplateFolder) -> None:
    assert json.loads(dumps_tree(sample_tree)) == tree_to_dict(sample_tree)


# -----------------------------------------------------------------------------
# NESTING DEPTH
# -----------------------------------------------------------------------------

def _nested_document(depth: int, closed: bool = True) -> str:
    text = '{"folderName": "x", "items": [' * depth
    if closed:
        text += "]}" * depth
    return text


def test_loads_rejects_unterminated_deep_nesting() -> None:
    with pytest.raises(TemplateDocumentError):
        loads_tree(_nested_document(5000, closed=False))


def test_loads_rejects_well_formed_deep_nesting() -> None:
    with pytest.raises(TemplateDocumentError):
        loads_tree(_nested_document(1500))


def test_moderately_nested_document_round_trips() -> None:
    tree = TemplateFolder("leaf", ())
    for _ in range(150):
        tree = TemplateFolder("x", (tree,))
    assert loads_tree(dumps_tree(tree)) == tree
