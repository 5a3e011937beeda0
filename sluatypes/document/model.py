"""Ordered document tree built from markup events.

Two node kinds exist. `ElementNode` is any element; `MapNode` is the
`<map>` element, which additionally indexes its children as key/value
pairs. In LLSD a `<key>` element is always immediately followed by the
element holding its value, so the index is maintained on append.
"""

from __future__ import annotations

from typing import Final, TypeAlias

from sluatypes.errors import DocumentStructureError

MAP_TAG: Final = "map"
KEY_TAG: Final = "key"
ROOT_TAG: Final = "llsd"


class _Node:
    __slots__ = ("_tag", "_children", "_closed", "text")

    def __init__(self, tag: str) -> None:
        self._tag = tag
        self._children: list[DocumentNode] = []
        self._closed = False
        self.text = ""

    def __repr__(self) -> str:
        return f"[{self._tag}:{self.text}]"

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def children(self) -> tuple[DocumentNode, ...]:
        return tuple(self._children)

    def child(self, index: int) -> DocumentNode | None:
        if 0 <= index < len(self._children):
            return self._children[index]
        return None

    def is_tag(self, tag: str) -> bool:
        return self._tag == tag

    def append(self, node: DocumentNode) -> None:
        if self._closed:
            raise DocumentStructureError(f"Cannot append <{node.tag}> to closed <{self._tag}>")
        self._children.append(node)

    def close(self) -> None:
        self._closed = True


class ElementNode(_Node):
    """Generic element: tag, text and ordered children."""

    __slots__ = ()


class MapNode(_Node):
    """`<map>` element with key -> value lookup."""

    __slots__ = ("_entries",)

    def __init__(self, tag: str = MAP_TAG) -> None:
        super().__init__(tag)
        self._entries: dict[str, DocumentNode] = {}

    def __repr__(self) -> str:
        pairs = ", ".join(f"{key}: {value.text} ({value.tag})" for key, value in self._entries.items())
        return f"[{self._tag}: {pairs} ]"

    def append(self, node: DocumentNode) -> None:
        previous = self._children[-1] if self._children else None
        super().append(node)
        if previous is not None and previous.is_tag(KEY_TAG):
            self._entries[previous.text] = node

    def get(self, key: str) -> DocumentNode | None:
        return self._entries.get(key)

    def get_text(self, key: str) -> str | None:
        node = self._entries.get(key)
        return None if node is None else node.text

    @property
    def entries(self) -> tuple[tuple[str, DocumentNode], ...]:
        return tuple(self._entries.items())

    def __len__(self) -> int:
        return len(self._entries)


DocumentNode: TypeAlias = ElementNode | MapNode


def new_node(tag: str) -> DocumentNode:
    if tag == MAP_TAG:
        return MapNode(tag)
    return ElementNode(tag)
