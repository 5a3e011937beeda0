"""Catalogue extraction from the LLSD document model."""

from __future__ import annotations

from collections.abc import Mapping
import logging

from sluatypes.catalogue.model import ArgDef, Catalogue, ConstDef, EventDef, FuncDef, TypeDef
from sluatypes.catalogue.result import ExtractResult, ExtractSink
from sluatypes.catalogue.values import (
    cast_value,
    clean_tooltip,
    has_effect,
    parse_js_int,
    wiki_link,
)
from sluatypes.diagnostics import CATALOGUE_MALFORMED_ARGUMENT
from sluatypes.document import DocumentNode, MapNode

logger = logging.getLogger(__name__)

_SKIPPED_CONSTANTS = frozenset({"default"})


def extract_catalogue(
    root: MapNode,
    *,
    side_effects: Mapping[str, bool] | None = None,
) -> ExtractResult:
    """Walk the root `<map>` of a keywords document into a catalogue.

    Extraction only reads the tree, so running it twice over the same root
    yields equal catalogues.
    """
    sink = ExtractSink()
    catalogue = Catalogue(
        functions=_extract_functions(_section(root, "functions"), sink, side_effects),
        constants=_extract_constants(_section(root, "constants"), sink),
        events=_extract_events(_section(root, "events"), sink),
        types=_extract_types(_section(root, "types")),
    )
    return sink.finish(catalogue)


def _section(root: MapNode, name: str) -> MapNode | None:
    node = root.get(name)
    if isinstance(node, MapNode):
        return node
    logger.debug("Keywords document has no <map> section %r", name)
    return None


def _entries(section: MapNode | None) -> list[tuple[str, MapNode]]:
    if section is None:
        return []
    return [(name, node) for name, node in section.entries if isinstance(node, MapNode)]


def _text_or(entry: MapNode, key: str, default: str) -> str:
    """Text of `key`, or `default` only when the key is absent."""
    text = entry.get_text(key)
    return default if text is None else text


def _extract_functions(
    section: MapNode | None,
    sink: ExtractSink,
    side_effects: Mapping[str, bool] | None,
) -> dict[str, FuncDef]:
    out: dict[str, FuncDef] = {}
    for name, entry in _entries(section):
        out[name] = FuncDef(
            name=name,
            args=_extract_arguments(name, entry.get("arguments"), sink),
            result=_text_or(entry, "return", "void"),
            desc=clean_tooltip(_text_or(entry, "tooltip", "")),
            energy=parse_js_int(_text_or(entry, "energy", "10")),
            sleep=parse_js_int(_text_or(entry, "sleep", "0")),
            must_use=not has_effect(name, side_effects),
            link=wiki_link(name),
        )
    return out


def _extract_arguments(owner: str, arguments: DocumentNode | None, sink: ExtractSink) -> tuple[ArgDef, ...]:
    if arguments is None or not arguments.is_tag("array"):
        return ()

    out: list[ArgDef] = []
    for index, arg_map in enumerate(arguments.children):
        if not isinstance(arg_map, MapNode):
            continue
        if len(arg_map) != 1:
            sink.warn(CATALOGUE_MALFORMED_ARGUMENT, owner, f"(argument #{index}: {arg_map!r})")
            continue
        ((name, definition),) = arg_map.entries
        if not isinstance(definition, MapNode):
            continue
        out.append(
            ArgDef(
                name=name,
                type=_text_or(definition, "type", "n/a"),
                desc=_text_or(definition, "tooltip", ""),
            )
        )
    return tuple(out)


def _extract_constants(section: MapNode | None, sink: ExtractSink) -> dict[str, ConstDef]:
    out: dict[str, ConstDef] = {}
    for name, entry in _entries(section):
        if name in _SKIPPED_CONSTANTS:
            continue

        value_raw = _text_or(entry, "value", "")
        type_name = _text_or(entry, "type", "void")
        value, problem = cast_value(value_raw, type_name)
        if problem is not None:
            sink.warn(problem, name, f"(type {type_name!r}, value {value_raw!r})")

        out[name] = ConstDef(
            name=name,
            type=type_name,
            value_raw=value_raw,
            value=value,
            desc=clean_tooltip(_text_or(entry, "tooltip", "")),
            link=wiki_link(name, capitalize=False),
        )
    return out


def _extract_events(section: MapNode | None, sink: ExtractSink) -> dict[str, EventDef]:
    out: dict[str, EventDef] = {}
    for name, entry in _entries(section):
        out[name] = EventDef(
            name=name,
            args=_extract_arguments(name, entry.get("arguments"), sink),
            desc=clean_tooltip(_text_or(entry, "tooltip", "")),
            link=wiki_link(name),
        )
    return out


def _extract_types(section: MapNode | None) -> dict[str, TypeDef]:
    return {
        name: TypeDef(name=name, desc=clean_tooltip(_text_or(entry, "tooltip", "")))
        for name, entry in _entries(section)
    }
