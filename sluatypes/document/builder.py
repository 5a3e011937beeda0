"""Tree sink that turns markup events into a document tree."""

from __future__ import annotations

from collections.abc import Callable

from sluatypes.document.model import ROOT_TAG, DocumentNode, new_node
from sluatypes.errors import DocumentStructureError


class DocumentBuilder:
    """Builds nodes on a depth stack; a node is attached to its parent when it closes."""

    def __init__(
        self,
        *,
        text_normalizer: Callable[[str], str] | None = None,
        root_tag: str = ROOT_TAG,
    ) -> None:
        self._stack: list[DocumentNode] = []
        self._root: DocumentNode | None = None
        self._root_tag = root_tag
        self._text_normalizer = text_normalizer

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def root(self) -> DocumentNode | None:
        return self._root

    def open(self, tag: str) -> None:
        self._stack.append(new_node(tag))

    def text(self, content: str) -> None:
        # Text outside the outermost element has no owner.
        if not self._stack:
            return
        if self._text_normalizer is not None:
            content = self._text_normalizer(content)
        self._stack[-1].text = content

    def close(self) -> None:
        if not self._stack:
            raise DocumentStructureError("close() called more often than open()")

        node = self._stack.pop()
        node.close()
        if self._stack:
            self._stack[-1].append(node)
        if node.is_tag(self._root_tag):
            self._root = node

    def finish(self) -> DocumentNode:
        if self._stack:
            unclosed = ", ".join(f"<{node.tag}>" for node in self._stack)
            raise DocumentStructureError(f"Unclosed elements at end of input: {unclosed}")
        if self._root is None:
            raise DocumentStructureError(f"Document has no <{self._root_tag}> element")
        return self._root
