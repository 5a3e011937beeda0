"""Typed patch records: a path of key/index segments plus a literal value."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
import json
from typing import Any, TypeAlias, assert_never

from sluatypes.errors import PatchError
from sluatypes.plain import PlainValue


@dataclass(frozen=True, slots=True)
class KeySegment:
    """Object property lookup."""

    key: str


@dataclass(frozen=True, slots=True)
class IndexSegment:
    """Array element lookup."""

    index: int


PathSegment: TypeAlias = KeySegment | IndexSegment


@dataclass(frozen=True, slots=True)
class Patch:
    path: tuple[PathSegment, ...]
    value: PlainValue

    def describe(self) -> str:
        return json.dumps({"key": [_segment_value(s) for s in self.path], "value": self.value})


def _segment_value(segment: PathSegment) -> str | int:
    match segment:
        case KeySegment(key=key):
            return key
        case IndexSegment(index=index):
            return index
        case _:
            assert_never(segment)


def parse_segment(raw: Any) -> PathSegment:
    # bool is an int subclass; it is never a valid index.
    if isinstance(raw, bool):
        raise PatchError(f"Patch path segment must be a string or integer, got {raw!r}")
    if isinstance(raw, str):
        return KeySegment(raw)
    if isinstance(raw, int):
        if raw < 0:
            raise PatchError(f"Patch path index must not be negative, got {raw}")
        return IndexSegment(raw)
    raise PatchError(f"Patch path segment must be a string or integer, got {raw!r}")


def parse_patch(record: Any) -> Patch:
    """Parse one `{"key": [...], "value": ...}` record."""
    if not isinstance(record, Mapping) or "key" not in record or "value" not in record:
        raise PatchError(f"Patch record must be an object with 'key' and 'value': {record!r}")
    raw_path = record["key"]
    if not isinstance(raw_path, list) or not raw_path:
        raise PatchError(f"Patch key must be a non-empty array: {record!r}")
    return Patch(path=tuple(parse_segment(raw) for raw in raw_path), value=record["value"])


def parse_patches(records: Any) -> tuple[Patch, ...]:
    if not isinstance(records, list):
        raise PatchError("Patch list must be a JSON array")
    return tuple(parse_patch(record) for record in records)


def make_patch(path: Iterable[str | int], value: PlainValue) -> Patch:
    segments = tuple(parse_segment(raw) for raw in path)
    if not segments:
        raise PatchError("Patch path must not be empty")
    return Patch(path=segments, value=value)
