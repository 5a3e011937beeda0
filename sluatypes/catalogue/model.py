"""Normalized, language-agnostic keyword catalogue."""

from __future__ import annotations

from typing import TypeAlias

from dataclasses import dataclass, field

ConstValue: TypeAlias = int | float | str | None
CostValue: TypeAlias = int | float | None


@dataclass(frozen=True, slots=True)
class ArgDef:
    """One declared argument of a function or event."""

    name: str
    type: str | None
    desc: str = ""


@dataclass(frozen=True, slots=True)
class FuncDef:
    """Catalogue function. `result` of None means no return value."""

    name: str
    args: tuple[ArgDef, ...]
    result: str | None
    desc: str
    energy: CostValue
    sleep: CostValue
    must_use: bool
    link: str | None
    private: bool = False
    deprecated: bool = False
    god_mode: bool = False
    linden_experience: bool = False


@dataclass(frozen=True, slots=True)
class ConstDef:
    name: str
    type: str | None
    value_raw: str | None
    value: ConstValue
    desc: str
    link: str
    deprecated: bool = False
    private: bool = False


@dataclass(frozen=True, slots=True)
class EventDef:
    name: str
    args: tuple[ArgDef, ...]
    desc: str
    link: str
    deprecated: bool = False


@dataclass(frozen=True, slots=True)
class TypeDef:
    """Documentation-only type entry."""

    name: str
    desc: str


@dataclass(frozen=True, slots=True)
class Catalogue:
    """Four independent maps keyed by identifier."""

    functions: dict[str, FuncDef] = field(default_factory=dict)
    constants: dict[str, ConstDef] = field(default_factory=dict)
    events: dict[str, EventDef] = field(default_factory=dict)
    types: dict[str, TypeDef] = field(default_factory=dict)
