"""Text normalization applied to every LLSD text run."""

from __future__ import annotations

import re

_NEWLINE_TOKEN = "%%%%%%"

_NAMED_ENTITIES = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#39;": "'",
}
# Named and numeric references share one pass, so a decoded `&` never starts a new reference.
_ENTITY_RE = re.compile(r"&(?:amp|lt|gt|quot|#39);|&#(?:([0-9]+)|[xX]([0-9a-fA-F]+));")


def clean_text(text: str) -> str:
    """Collapse whitespace and decode entities the way keyword tooltips are published.

    Escaped newlines (a literal backslash followed by `n`) survive as real
    newlines; raw newlines are dropped; runs of spaces collapse to one;
    finally the basic HTML entities and numeric character references are
    decoded once.
    """
    text = text.replace("\\n", _NEWLINE_TOKEN)
    text = text.replace("\n", "")
    while "  " in text:
        text = text.replace("  ", " ")
    text = text.replace(_NEWLINE_TOKEN, "\n")
    return unescape_entities(text)


def unescape_entities(text: str) -> str:
    return _ENTITY_RE.sub(_decode_entity, text)


def _decode_entity(match: re.Match[str]) -> str:
    entity = match.group(0)
    if entity in _NAMED_ENTITIES:
        return _NAMED_ENTITIES[entity]
    decimal, hexadecimal = match.group(1), match.group(2)
    code_point = int(decimal) if decimal is not None else int(hexadecimal, 16)
    if code_point > 0x10FFFF:
        return entity
    return chr(code_point)
