"""Luau-flavoured text for types, arguments and signatures."""

from __future__ import annotations

from collections.abc import Sequence
from typing import assert_never

from sluatypes.slua.types import (
    BaseType,
    CustomType,
    FuncSignature,
    FunctionType,
    NamedVarType,
    SimpleType,
    TableType,
    ValueType,
)

_UUID = SimpleType("uuid")
_STRING = SimpleType("string")


def clean_types(types: Sequence[BaseType]) -> tuple[BaseType, ...]:
    """Collapse the identifier union `uuid|string` to `uuid` for display."""
    if len(types) == 2 and _UUID in types and _STRING in types:
        return (_UUID,)
    return tuple(types)


def format_type(type_: BaseType) -> str:
    match type_:
        case SimpleType(name=name) | CustomType(name=name):
            return name
        case ValueType(value=value):
            return str(value)
        case FunctionType(signature=signature):
            return format_signature(signature)
        case TableType(elements=elements):
            return "{" + "|".join(format_type(element) for element in elements) + "}"
        case _:
            assert_never(type_)


def format_var(var: NamedVarType, *, cleanup: bool = False) -> str:
    """`name: a|b`, `...(a|b)`, `name: a?`; `self` types are never printed."""
    types = clean_types(var.types) if cleanup else var.types
    text = "|".join(t for t in (format_type(t) for t in types) if t != "self")

    if var.variadic or var.optional:
        if len(var.types) > 1:
            text = f"({text})"
        if var.variadic:
            text = f"...{text}"
        if var.optional:
            text = f"{text}?"

    if var.name and not var.variadic:
        text = f"{var.name}: {text}" if text else var.name
    return text


def format_args(args: Sequence[NamedVarType], *, cleanup: bool = False) -> str:
    return ", ".join(format_var(arg, cleanup=cleanup) for arg in args)


def format_results(results: Sequence[NamedVarType]) -> str:
    return ", ".join(format_var(result) for result in results)


def format_signature(signature: FuncSignature, *, separator: str = " -> ", cleanup: bool = False) -> str:
    return f"({format_args(signature.args, cleanup=cleanup)}){separator}{format_results(signature.results)}"
