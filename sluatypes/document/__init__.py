"""Document model built from markup events (open/text/close)."""

from sluatypes.document.builder import DocumentBuilder
from sluatypes.document.event import (
    CloseEvent,
    MarkupEvent,
    MarkupSink,
    OpenEvent,
    TextEvent,
    process_events,
)
from sluatypes.document.model import (
    KEY_TAG,
    MAP_TAG,
    ROOT_TAG,
    DocumentNode,
    ElementNode,
    MapNode,
)

__all__ = [
    "KEY_TAG",
    "MAP_TAG",
    "ROOT_TAG",
    "CloseEvent",
    "DocumentBuilder",
    "DocumentNode",
    "ElementNode",
    "MapNode",
    "MarkupEvent",
    "MarkupSink",
    "OpenEvent",
    "TextEvent",
    "process_events",
]
