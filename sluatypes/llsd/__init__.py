"""LLSD keyword XML event source and text normalization."""

from sluatypes.llsd.reader import SaxEventSource, parse_keywords_xml, read_keywords_xml
from sluatypes.llsd.text import clean_text, unescape_entities

__all__ = [
    "SaxEventSource",
    "clean_text",
    "parse_keywords_xml",
    "read_keywords_xml",
    "unescape_entities",
]
