"""LLSD keyword XML reader.

`xml.sax` is the event source; every element start, text run and element
end is forwarded to a `MarkupSink`. SAX may split one text run into
several `characters` callbacks, so runs are buffered and forwarded as a
single text event before the next tag event.
"""

from __future__ import annotations

import logging
from pathlib import Path
import xml.sax
from xml.sax.handler import ContentHandler
from xml.sax.xmlreader import AttributesImpl

from sluatypes.document import DocumentBuilder, MapNode, MarkupSink
from sluatypes.errors import CatalogueFormatError, DocumentStructureError
from sluatypes.llsd.text import clean_text

logger = logging.getLogger(__name__)


class SaxEventSource(ContentHandler):
    """Adapts SAX callbacks to open/text/close markup events."""

    def __init__(self, sink: MarkupSink) -> None:
        super().__init__()
        self._sink = sink
        self._pending: list[str] = []

    def startElement(self, name: str, attrs: AttributesImpl) -> None:
        self._flush_text()
        self._sink.open(name)

    def endElement(self, name: str) -> None:
        self._flush_text()
        self._sink.close()

    def characters(self, content: str) -> None:
        self._pending.append(content)

    def endDocument(self) -> None:
        self._flush_text()

    def _flush_text(self) -> None:
        if not self._pending:
            return
        text = "".join(self._pending)
        self._pending.clear()
        self._sink.text(text)


def parse_keywords_xml(source: str | bytes) -> MapNode:
    """Parse LLSD keyword XML and return the map directly under `<llsd>`."""
    builder = DocumentBuilder(text_normalizer=clean_text)
    data = source.encode("utf-8") if isinstance(source, str) else source
    try:
        xml.sax.parseString(data, SaxEventSource(builder))
    except xml.sax.SAXParseException as exc:
        raise CatalogueFormatError(f"Malformed keywords XML: {exc}") from exc

    try:
        root = builder.finish()
    except DocumentStructureError as exc:
        raise CatalogueFormatError(f"Unable to parse keywords XML: {exc}") from exc

    top = root.child(0)
    if not isinstance(top, MapNode):
        raise CatalogueFormatError("Unable to parse keywords XML: <llsd> does not start with a <map>")
    logger.debug("Parsed keywords XML with %d top-level sections", len(top))
    return top


def read_keywords_xml(path: str | Path) -> MapNode:
    return parse_keywords_xml(Path(path).read_bytes())
