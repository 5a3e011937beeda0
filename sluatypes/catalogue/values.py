"""Field-level helpers shared by the XML and YAML extractors."""

from __future__ import annotations

from collections.abc import Mapping
import math
import re
from typing import Final

from sluatypes.catalogue.model import ConstValue
from sluatypes.diagnostics import (
    CATALOGUE_CONSTANT_CAST_FAILED,
    CATALOGUE_UNKNOWN_CONSTANT_TYPE,
    DiagnosticSpec,
)

WIKI_BASE_URL: Final = "https://wiki.secondlife.com/wiki/"

_INT_PREFIX = re.compile(r"^[+-]?\d+")
_HEX_PREFIX = re.compile(r"^([+-]?)0[xX]([0-9a-fA-F]+)")
_FLOAT_PREFIX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_RAW_VALUE_TYPES = frozenset({"string", "key", "vector", "rotation"})

_KNOWN_SIDE_EFFECTS = frozenset(
    {
        "llForceMouselook",
        "llGetNextEmail",
        "llGroundRepel",
        "llDeleteCharacter",
        "llHttpResponse",
        "llMinEventDelay",
        "llModifLand",
        "llNavigateTo",
        "llOffsetTexture",
        "llParcelMediaCommandList",
        "llPursue",
        "llPushObject",
        "llWhisper",
        "llShout",
        "llScaleByFactor",
        "llScaleTexture",
        "llScriptProfiler",
        "llSitOnLink",
        "llSleep",
        "llStartAnimation",
        "llStartObjectAnimation",
        "llDialog",
        "llTextBox",
        "llUnSit",
        "llVolumeDetect",
        "llWanderWithin",
    }
)

_KNOWN_EFFECTLESS = frozenset(
    {
        "llAvatarOnLinkSitTarget",
        "llAvatarOnSitTarget",
        "llGetExperienceErrorMessage",
        "llGetEnvironment",
    }
)

_SIDE_EFFECT_KEYWORDS: Final = (
    "Set",
    "Say",
    "Request",
    "Write",
    "Reset",
    "Particle",
    "Add",
    "Adjust",
    "Apply",
    "AttachTo",
    "Clear",
    "Sound",
    "Notecard",
    "Give",
    "KeyValue",
    "LinksetDataDelete",
    "LinksetDataWrite",
    "Target",
    "Listen",
    "Load",
    "Manage",
    "Map",
    "Message",
    "Pass",
    "Release",
    "Remove",
    "Return",
    "Environment",
    "RezObject",
    "RezAt",
    "Rotate",
    "LookAt",
    "Sensor",
    "Stop",
    "Controls",
    "Teleport",
    "Transfer",
    "Trigger",
    "Update",
)


def parse_js_int(text: str) -> int | None:
    """Leading-integer parse with `0x` hex support; None where the source would yield NaN."""
    stripped = text.lstrip()
    hex_match = _HEX_PREFIX.match(stripped)
    if hex_match is not None:
        value = int(hex_match.group(2), 16)
        return -value if hex_match.group(1) == "-" else value
    match = _INT_PREFIX.match(stripped)
    if match is None:
        return None
    return int(match.group(0))


def parse_js_float(text: str) -> float | None:
    stripped = text.lstrip()
    match = _FLOAT_PREFIX.match(stripped)
    if match is None:
        return None
    value = float(match.group(0))
    return value if math.isfinite(value) else None


def cast_value(raw: str, type_name: str | None) -> tuple[ConstValue, DiagnosticSpec | None]:
    """Cast a constant's raw text by its declared type.

    Never raises: a failed numeric cast or an unknown type yields None
    together with the diagnostic describing why.
    """
    match type_name:
        case "integer":
            value = parse_js_int(raw)
            return value, (CATALOGUE_CONSTANT_CAST_FAILED if value is None else None)
        case "float":
            number = parse_js_float(raw)
            return number, (CATALOGUE_CONSTANT_CAST_FAILED if number is None else None)
        case str() if type_name in _RAW_VALUE_TYPES:
            return raw, None
        case _:
            return None, CATALOGUE_UNKNOWN_CONSTANT_TYPE


def clean_tooltip(tip: str) -> str:
    tip = tip.strip()
    tip = tip.replace("\\n", "\n")
    return tip.replace("\n\n               ", "\n")


def has_effect(name: str, side_effects: Mapping[str, bool] | None = None) -> bool:
    """Approximate whether calling `name` has side effects.

    This is a name-pattern heuristic, not an analysis: an authoritative
    table wins when supplied, then the effectless allow-list, then keyword
    substrings (never at position 0), then the explicit side-effect list.
    """
    if side_effects is not None and name in side_effects:
        return side_effects[name]
    if name in _KNOWN_EFFECTLESS:
        return False
    for keyword in _SIDE_EFFECT_KEYWORDS:
        if name.find(keyword) > 0:
            return True
    return name in _KNOWN_SIDE_EFFECTS


def uc_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def wiki_link(name: str, *, capitalize: bool = True) -> str:
    return WIKI_BASE_URL + (uc_first(name) if capitalize else name)
