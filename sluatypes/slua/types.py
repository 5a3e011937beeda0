"""Target type-system model.

Base types form a closed union (`BaseType`); every consumer matches on it
exhaustively. Custom types are references resolved by name through
`TypeSystemDocument.types`, never inlined.
"""

from __future__ import annotations

import typing

from dataclasses import dataclass, field
from typing import Final

from sluatypes.catalogue.model import ConstValue, CostValue

SIMPLE_TYPE_NAMES: Final = frozenset(
    {
        "string",
        "boolean",
        "number",
        "integer",
        "vector",
        "buffer",
        "{}",
        "quaternion",
        "uuid",
        "nil",
        "list",
        "self",
        "any",
        "()",
        "numeric",
    }
)


@dataclass(frozen=True, slots=True)
class SimpleType:
    """Primitive or built-in named type."""

    name: str

    def __post_init__(self) -> None:
        if self.name not in SIMPLE_TYPE_NAMES:
            raise ValueError(f"Not a simple type name: {self.name!r}")


@dataclass(frozen=True, slots=True)
class ValueType:
    """Fixed literal such as `true` or `"lljson"`."""

    value: str | int | float


@dataclass(frozen=True, slots=True)
class CustomType:
    """Reference to a named entry of `TypeSystemDocument.types`."""

    name: str


@dataclass(frozen=True, slots=True)
class FunctionType:
    signature: FuncSignature


@dataclass(frozen=True, slots=True)
class TableType:
    """Array-like table whose elements are one of `elements`."""

    elements: tuple[BaseType, ...]


BaseType: typing.TypeAlias = SimpleType | ValueType | CustomType | FunctionType | TableType


def _require_types(owner: str, types: tuple[BaseType, ...]) -> None:
    if not types:
        raise ValueError(f"{owner} must admit at least one type")


@dataclass(frozen=True, slots=True)
class FuncArg:
    name: str
    desc: str
    types: tuple[BaseType, ...]
    variadic: bool = False
    optional: bool = False

    def __post_init__(self) -> None:
        _require_types(f"Argument {self.name!r}", self.types)


@dataclass(frozen=True, slots=True)
class FuncResult:
    name: str
    desc: str
    types: tuple[BaseType, ...]
    variadic: bool = False
    optional: bool = False

    def __post_init__(self) -> None:
        _require_types(f"Result {self.name!r}", self.types)


NamedVarType: typing.TypeAlias = FuncArg | FuncResult


@dataclass(frozen=True, slots=True)
class FuncSignature:
    """One overload: ordered arguments and ordered results."""

    args: tuple[FuncArg, ...] = ()
    results: tuple[FuncResult, ...] = ()


@dataclass(frozen=True, slots=True)
class FuncDef:
    name: str
    desc: str
    link: str | None
    signatures: tuple[FuncSignature, ...]
    energy: CostValue = 0
    sleep: CostValue = 0
    must_use: bool = False
    private: bool = False
    deprecated: bool = False
    god_mode: bool = False
    linden_experience: bool = False
    takes_self: bool = False

    def __post_init__(self) -> None:
        if not self.signatures:
            raise ValueError(f"Function {self.name!r} must have at least one signature")


@dataclass(frozen=True, slots=True)
class ConstDef:
    name: str
    desc: str
    type: BaseType
    value: ConstValue = None
    value_raw: str | None = None
    link: str = ""


@dataclass(frozen=True, slots=True)
class EventDef:
    name: str
    desc: str
    link: str
    args: tuple[FuncArg, ...] = ()


@dataclass(frozen=True, slots=True)
class ClassDef:
    """Hand-declared value type (vector, quaternion, ...)."""

    name: str
    funcs: dict[str, FuncDef] = field(default_factory=dict)
    props: dict[str, ConstDef] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class TableDef:
    name: str
    props: dict[str, TableProp] = field(default_factory=dict)


TableProp: typing.TypeAlias = ConstDef | FuncDef | ClassDef | TableDef


@dataclass(frozen=True, slots=True)
class TypeAlias:
    name: str
    desc: str
    types: tuple[BaseType, ...]

    def __post_init__(self) -> None:
        _require_types(f"Type alias {self.name!r}", self.types)


@dataclass(frozen=True, slots=True)
class TypeSystemDocument:
    """Root namespace plus named types, classes and events."""

    global_table: TableDef
    types: dict[str, TypeAlias] = field(default_factory=dict)
    classes: dict[str, ClassDef] = field(default_factory=dict)
    events: dict[str, EventDef] = field(default_factory=dict)
