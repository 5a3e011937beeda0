"""Shorthand constructors for hand-authored type-system entries.

A type spec is a base type, a simple type name, or a sequence of either;
plain strings always mean `SimpleType`.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeAlias

from sluatypes.slua.types import (
    BaseType,
    ConstDef,
    CustomType,
    FuncArg,
    FuncDef,
    FuncResult,
    FuncSignature,
    SimpleType,
    ValueType,
)

TypeSpec: TypeAlias = BaseType | str | Sequence[BaseType | str]


def to_types(spec: TypeSpec) -> tuple[BaseType, ...]:
    if isinstance(spec, str):
        return (SimpleType(spec),)
    if isinstance(spec, Sequence):
        return tuple(SimpleType(item) if isinstance(item, str) else item for item in spec)
    return (spec,)


def custom(name: str) -> CustomType:
    return CustomType(name)


def literal(value: str | int | float) -> ValueType:
    return ValueType(value)


def arg(
    name: str,
    desc: str,
    spec: TypeSpec,
    *,
    variadic: bool = False,
    optional: bool = False,
) -> FuncArg:
    return FuncArg(name=name, desc=desc, types=to_types(spec), variadic=variadic, optional=optional)


def opt_arg(name: str, desc: str, spec: TypeSpec) -> FuncArg:
    return arg(name, desc, spec, optional=True)


def var_arg(name: str, desc: str, spec: TypeSpec) -> FuncArg:
    return arg(name, desc, spec, variadic=True)


def result(spec: TypeSpec, desc: str = "", *, variadic: bool = False, optional: bool = False) -> FuncResult:
    return FuncResult(name="", desc=desc, types=to_types(spec), variadic=variadic, optional=optional)


def sig(returns: TypeSpec, args: Iterable[FuncArg] = ()) -> FuncSignature:
    """Signature with a single unnamed result."""
    return FuncSignature(args=tuple(args), results=(result(returns),))


def func(
    name: str,
    desc: str,
    signatures: Iterable[FuncSignature],
    *,
    link: str = "",
    takes_self: bool = False,
) -> FuncDef:
    return FuncDef(
        name=name,
        desc=desc,
        link=link,
        signatures=tuple(signatures),
        must_use=True,
        takes_self=takes_self,
    )


def const(name: str, desc: str, spec: BaseType | str) -> ConstDef:
    (type_,) = to_types(spec)
    return ConstDef(name=name, desc=desc, type=type_)
