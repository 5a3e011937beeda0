"""Accessors for JSON-like plain data read back into typed models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeAlias

from sluatypes.errors import DocumentShapeError

PlainValue: TypeAlias = "None | bool | int | float | str | list[PlainValue] | dict[str, PlainValue]"


def require_mapping(value: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise DocumentShapeError(f"{where}: expected an object, got {type(value).__name__}")
    return value


def require_list(value: Any, where: str) -> list[Any]:
    if not isinstance(value, list):
        raise DocumentShapeError(f"{where}: expected an array, got {type(value).__name__}")
    return value


def require_field(data: Mapping[str, Any], key: str, where: str) -> Any:
    if key not in data:
        raise DocumentShapeError(f"{where}: missing field {key!r}")
    return data[key]


def require_str(data: Mapping[str, Any], key: str, where: str) -> str:
    value = require_field(data, key, where)
    if not isinstance(value, str):
        raise DocumentShapeError(f"{where}: field {key!r} must be a string")
    return value


def optional_str(data: Mapping[str, Any], key: str, where: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise DocumentShapeError(f"{where}: field {key!r} must be a string or null")
    return value


def flag(data: Mapping[str, Any], key: str, where: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise DocumentShapeError(f"{where}: field {key!r} must be a boolean")
    return value


def expect_def(data: Mapping[str, Any], expected: str, where: str) -> None:
    kind = data.get("def")
    if kind != expected:
        raise DocumentShapeError(f"{where}: expected def {expected!r}, got {kind!r}")
