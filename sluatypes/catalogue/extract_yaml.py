"""Catalogue extraction from the YAML keyword definitions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import yaml

from sluatypes.catalogue.model import ArgDef, Catalogue, ConstDef, EventDef, FuncDef, TypeDef
from sluatypes.catalogue.result import ExtractResult, ExtractSink
from sluatypes.catalogue.values import cast_value, clean_tooltip, has_effect, wiki_link
from sluatypes.diagnostics import CATALOGUE_MALFORMED_ARGUMENT
from sluatypes.errors import CatalogueFormatError

# The YAML definitions carry no types section.
LSL_TYPE_DESCRIPTIONS: dict[str, str] = {
    "float": "32 bit floating point value.\nThe range is 1.175494351E-38 to 3.402823466E+38.",
    "integer": (
        "32 bit integer value.\n−2,147,483,648 and +2,147,483,647 "
        "(that is 0x80000000 to 0x7FFFFFFF in hex)."
    ),
    "key": (
        "A 128 bit unique identifier (UUID).\nThe key is represented as hexidecimal characters "
        "(A-F and 0-9), grouped into sections (8,4,4,4,12 characters) and separated by hyphens "
        '(for a total of 36 characters). e.g. "A822FF2B-FF02-461D-B45D-DCD10A2DE0C2".'
    ),
    "list": (
        "A collection of other data types.\nLists are signified by square brackets surrounding "
        "their elements; the elements inside are separated by commas. "
        'e.g. [0, 1, 2, 3, 4] or ["Yes", "No", "Perhaps"].'
    ),
    "quaternion": (
        "The quaternion type is a left over from way back when LSL was created. It was later "
        "renamed to <rotation> to make it more user friendly, but it appears someone forgot to "
        "remove it ;-)"
    ),
    "rotation": (
        "The rotation type is one of several ways to represent an orientation in 3D.\nIt is a "
        "mathematical object called a quaternion. You can think of a quaternion as four numbers "
        "(x, y, z, w), three of which represent the direction an object is facing and a fourth "
        "that represents the object's banking left or right around that direction."
    ),
    "string": "Text data.\nThe editor accepts UTF-8 encoded text.",
    "vector": (
        "A vector is a data type that contains a set of three float values.\nVectors are used "
        "to represent colors (RGB), positions, and directions/velocities."
    ),
}


def parse_definitions_yaml(text: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise CatalogueFormatError(f"Malformed keywords YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise CatalogueFormatError("Keywords YAML must be a mapping at the top level")
    return data


def extract_catalogue_yaml(
    data: Mapping[str, Any],
    *,
    side_effects: Mapping[str, bool] | None = None,
) -> ExtractResult:
    """Build a catalogue from decoded YAML definitions."""
    sink = ExtractSink()

    functions: dict[str, FuncDef] = {}
    for name, entry in _section(data, "functions"):
        private = bool(entry.get("private", False))
        functions[name] = FuncDef(
            name=name,
            args=_extract_arguments(name, entry.get("arguments"), sink),
            result=entry.get("return"),
            desc=clean_tooltip(_text(entry.get("tooltip"))),
            energy=entry.get("energy"),
            sleep=entry.get("sleep"),
            must_use=not has_effect(name, side_effects),
            link="" if private else wiki_link(name),
            private=private,
            deprecated=bool(entry.get("deprecated", False)),
            god_mode=bool(entry.get("god-mode", False)),
            linden_experience=bool(entry.get("linden-experience", False)),
        )

    constants: dict[str, ConstDef] = {}
    for name, entry in _section(data, "constants"):
        value_raw = _text(entry.get("value"))
        type_name = entry.get("type")
        value, problem = cast_value(value_raw, type_name)
        if problem is not None:
            sink.warn(problem, name, f"(type {type_name!r}, value {value_raw!r})")
        constants[name] = ConstDef(
            name=name,
            type=type_name,
            value_raw=value_raw,
            value=value,
            desc=clean_tooltip(_text(entry.get("tooltip"))),
            link=wiki_link(name, capitalize=False),
            deprecated=bool(entry.get("deprecated", False)),
            private=bool(entry.get("private", False)),
        )

    events: dict[str, EventDef] = {}
    for name, entry in _section(data, "events"):
        events[name] = EventDef(
            name=name,
            args=_extract_arguments(name, entry.get("arguments"), sink),
            desc=clean_tooltip(_text(entry.get("tooltip"))),
            link=wiki_link(name),
            deprecated=bool(entry.get("deprecated", False)),
        )

    types = {name: TypeDef(name=name, desc=desc) for name, desc in LSL_TYPE_DESCRIPTIONS.items()}
    return sink.finish(Catalogue(functions=functions, constants=constants, events=events, types=types))


def _section(data: Mapping[str, Any], name: str) -> list[tuple[str, Mapping[str, Any]]]:
    section = data.get(name) or {}
    if not isinstance(section, Mapping):
        raise CatalogueFormatError(f"Keywords YAML section {name!r} must be a mapping")
    out: list[tuple[str, Mapping[str, Any]]] = []
    for key, entry in section.items():
        if entry is None:
            entry = {}
        elif not isinstance(entry, Mapping):
            raise CatalogueFormatError(f"Keywords YAML entry {key!r} in {name!r} must be a mapping")
        out.append((str(key), entry))
    return out


def _extract_arguments(owner: str, arguments: Any, sink: ExtractSink) -> tuple[ArgDef, ...]:
    out: list[ArgDef] = []
    for index, arg in enumerate(arguments or ()):
        if not isinstance(arg, Mapping) or len(arg) != 1:
            sink.warn(CATALOGUE_MALFORMED_ARGUMENT, owner, f"(argument #{index}: {arg!r})")
            continue
        ((name, definition),) = arg.items()
        if definition is None:
            definition = {}
        elif not isinstance(definition, Mapping):
            sink.warn(CATALOGUE_MALFORMED_ARGUMENT, owner, f"(argument #{index}: {arg!r})")
            continue
        out.append(
            ArgDef(
                name=str(name),
                type=definition.get("type"),
                desc=clean_tooltip(_text(definition.get("tooltip"))),
            )
        )
    return tuple(out)


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
