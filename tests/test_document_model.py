import pytest

from sluatypes.document import (
    CloseEvent,
    DocumentBuilder,
    ElementNode,
    MapNode,
    OpenEvent,
    TextEvent,
    process_events,
)
from sluatypes.errors import DocumentStructureError


def _leaf(tag: str, text: str) -> ElementNode:
    node = ElementNode(tag)
    node.text = text
    node.close()
    return node


def test_map_node_records_value_after_key() -> None:
    node = MapNode()
    key = _leaf("key", "x")
    value = _leaf("string", "hello")

    node.append(key)
    node.append(value)

    assert node.get("x") is value
    assert node.get_text("x") == "hello"
    assert len(node) == 1


def test_map_node_ignores_value_without_preceding_key() -> None:
    node = MapNode()
    node.append(_leaf("string", "orphan"))
    node.append(_leaf("integer", "1"))

    assert node.entries == ()
    assert node.get("orphan") is None
    assert len(node.children) == 2


def test_map_node_missing_key_returns_none() -> None:
    node = MapNode()
    node.append(_leaf("key", "a"))
    node.append(_leaf("string", "1"))

    assert node.get("b") is None
    assert node.get_text("b") is None


def test_closed_node_rejects_children() -> None:
    node = ElementNode("array")
    node.close()

    with pytest.raises(DocumentStructureError, match="closed"):
        node.append(_leaf("string", "late"))


def test_builder_attaches_children_on_close() -> None:
    builder = DocumentBuilder()
    process_events(
        builder,
        [
            OpenEvent("llsd"),
            OpenEvent("map"),
            OpenEvent("key"),
            TextEvent("name"),
            CloseEvent(),
            OpenEvent("string"),
            TextEvent("value"),
            CloseEvent(),
            CloseEvent(),
            CloseEvent(),
        ],
    )

    root = builder.finish()
    top = root.child(0)

    assert root.tag == "llsd"
    assert isinstance(top, MapNode)
    assert top.get_text("name") == "value"
    assert builder.depth == 0


def test_builder_text_overwrites_and_normalizes() -> None:
    builder = DocumentBuilder(text_normalizer=str.upper)
    builder.open("llsd")
    builder.open("string")
    builder.text("first")
    builder.text("second")
    builder.close()
    builder.close()

    root = builder.finish()
    child = root.child(0)

    assert child is not None
    assert child.text == "SECOND"


def test_builder_close_on_empty_stack_aborts() -> None:
    builder = DocumentBuilder()

    with pytest.raises(DocumentStructureError, match="close"):
        builder.close()


def test_builder_finish_reports_unclosed_elements() -> None:
    builder = DocumentBuilder()
    builder.open("llsd")
    builder.open("map")

    with pytest.raises(DocumentStructureError, match="Unclosed"):
        builder.finish()


def test_builder_finish_requires_root() -> None:
    builder = DocumentBuilder()
    builder.open("map")
    builder.close()

    with pytest.raises(DocumentStructureError, match="no <llsd>"):
        builder.finish()


def test_text_outside_elements_is_ignored() -> None:
    builder = DocumentBuilder()
    builder.text("stray")
    builder.open("llsd")
    builder.close()

    assert builder.finish().text == ""
