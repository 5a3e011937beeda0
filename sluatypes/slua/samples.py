"""Deterministic code samples for documentation.

Each argument gets a fixed literal for its type. Where a literal is
"random" (numeric and integer arguments) it comes from a `random.Random`
seeded with the qualified name, signature index and union offset, so the
same document always produces the same samples.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
import random
from typing import Final, assert_never

from sluatypes.slua.format import format_args, format_results
from sluatypes.slua.types import (
    BaseType,
    CustomType,
    FuncDef,
    FuncSignature,
    FunctionType,
    SimpleType,
    TableType,
    TypeSystemDocument,
    ValueType,
)

VERBOSE_ARG_THRESHOLD: Final = 3
PREFERRED_OFFSETS: Final = 5
INTEGER_WRAPPER: Final = "integer("

_FIXED_LITERALS: Final[dict[str, str]] = {
    "quaternion": "quaternion(0,0,0,1)",
    "number": "3.14",
    "list": "{}",
    "{}": "{}",
    "vector": "vector(1,1,1)",
    "boolean": "true",
    "string": "'test'",
    "self": "self",
    "nil": "nil",
    "buffer": "buffer.create(0)",
    "any": "nil",
    "()": "nil",
}


@dataclass(frozen=True, slots=True)
class CodeSample:
    text: str
    signature_index: int


def qualified_name(prefix: Sequence[str], func: FuncDef) -> str:
    if not prefix:
        return func.name
    return ".".join(prefix) + (":" if func.takes_self else ".") + func.name


def simple_literal(type_: SimpleType, rng: random.Random, *, verbose: bool = False) -> str:
    match type_.name:
        case "numeric":
            return str(rng.randrange(16))
        case "integer":
            return f"integer({rng.randrange(16)})"
        case "uuid":
            return "uuid('677bf9a4-bba5-4cf9-a4ad-4802a0f7ef46')" if verbose else "uuid(<key>)"
        case name:
            return _FIXED_LITERALS[name]


def function_stub(signature: FuncSignature, name: str = "") -> str:
    """`local name = function(params) : results` with an empty body."""
    named = replace(signature, args=tuple(replace(a, name=a.name or "arg") for a in signature.args))
    head = f"local {name} = " if name else ""
    return (
        f"{head}function({format_args(named.args, cleanup=True)}) : "
        f"{format_results(named.results)}\n  -- Your code\nend"
    )


def _pick(types: Sequence[BaseType], offset: int) -> BaseType:
    return types[offset] if offset < len(types) else types[0]


def _arg_sample(
    arg_name: str,
    type_: BaseType,
    document: TypeSystemDocument,
    rng: random.Random,
    stubs: list[str],
    verbose: bool,
) -> str:
    match type_:
        case SimpleType():
            return simple_literal(type_, rng, verbose=verbose)
        case ValueType(value=value):
            return str(value)
        case FunctionType(signature=signature):
            stubs.append(function_stub(signature, arg_name))
            return arg_name
        case TableType():
            return "{}"
        case CustomType(name=name):
            alias = document.types.get(name)
            if alias is None:
                return name
            match alias.types[0]:
                case SimpleType() as first:
                    return simple_literal(first, rng, verbose=verbose)
                case ValueType(value=value):
                    return str(value)
                case FunctionType(signature=signature):
                    stubs.append(function_stub(signature, arg_name))
                    return arg_name
                case _:
                    return name
        case _:
            assert_never(type_)


def sample_for_signature(
    prefix: Sequence[str],
    func: FuncDef,
    signature_index: int,
    document: TypeSystemDocument,
    *,
    offset: int = 0,
    verbose: bool | None = None,
) -> str:
    """Render one call sample; `offset` picks which union member each argument uses."""
    signature = func.signatures[signature_index]
    name = qualified_name(prefix, func)
    if verbose is None:
        verbose = len(signature.args) > VERBOSE_ARG_THRESHOLD

    rng = random.Random(f"{name}:{signature_index}:{offset}")
    stubs: list[str] = []
    args = [
        _arg_sample(arg.name, _pick(arg.types, offset), document, rng, stubs, verbose)
        for arg in signature.args
    ]
    if func.takes_self and args:
        args.pop(0)

    head = "\n\n".join(stubs) + "\n\n" if stubs else ""
    if verbose:
        return f"{head}{name}(\n  " + ",\n  ".join(args) + "\n)"
    return f"{head}{name}({', '.join(args)})"


def preferred_sample(prefix: Sequence[str], func: FuncDef, document: TypeSystemDocument) -> CodeSample:
    """Best sample across overloads.

    Candidates are signature 0 at offset 0 and every later signature at
    offsets 0-4. The winner has the fewest `integer(` wrappers, then the
    most arguments; the earliest candidate wins a full tie.
    """

    def ranked(index: int, offset: int) -> tuple[tuple[int, int], CodeSample]:
        text = sample_for_signature(prefix, func, index, document, offset=offset)
        key = (text.count(INTEGER_WRAPPER), -len(func.signatures[index].args))
        return key, CodeSample(text=text, signature_index=index)

    best = ranked(0, 0)
    for index in range(1, len(func.signatures)):
        for offset in range(PREFERRED_OFFSETS):
            candidate = ranked(index, offset)
            if candidate[0] < best[0]:
                best = candidate
    return best[1]
