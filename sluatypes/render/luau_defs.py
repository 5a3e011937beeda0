"""Luau declaration file for the type checker (luau-lsp `--definitions`)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import assert_never

from sluatypes.slua import (
    ClassDef,
    ConstDef,
    FuncDef,
    TableDef,
    TableProp,
    TypeAlias,
    TypeSystemDocument,
    format_args,
    format_results,
    format_signature,
    format_type,
)

HEADER = (
    "\n"
    "----------------------------------\n"
    "---------- LSL LUAU DEFS ---------\n"
    "----------------------------------\n"
    "\n"
)
INDENT = "  "


def render_luau_defs(document: TypeSystemDocument) -> str:
    return (
        HEADER
        + render_type_aliases(document.types)
        + "\n\n"
        + render_classes(document.classes)
        + "\n\n"
        + render_globals(document.global_table.props)
    )


def _comment(desc: str) -> str:
    if not desc:
        return ""
    return " -- " + desc.replace("\n", " ")


def _overloads(func: FuncDef) -> str:
    rendered = [format_signature(signature) for signature in func.signatures]
    if len(rendered) == 1:
        return rendered[0]
    return "(" + ") & (".join(rendered) + ")"


def render_type_aliases(types: Mapping[str, TypeAlias]) -> str:
    lines = [f"type {alias.name} = " + "|".join(format_type(t) for t in alias.types) for alias in types.values()]
    return "\n".join(lines) + "\n"


def render_classes(classes: Mapping[str, ClassDef]) -> str:
    out: list[str] = []
    for cls in classes.values():
        out.append(f"declare class {cls.name}\n")
        for prop in cls.props.values():
            out.append(f"{INDENT}{prop.name} : {format_type(prop.type)}{_comment(prop.desc)}\n")
        for func in cls.funcs.values():
            for signature in func.signatures:
                out.append(
                    f"{INDENT}function {func.name}({format_args(signature.args)}): "
                    f"{format_results(signature.results)}{_comment(func.desc)}\n"
                )
        out.append("end\n\n")
    return "".join(out)


def render_globals(props: Mapping[str, TableProp]) -> str:
    out: list[str] = []
    for key, prop in props.items():
        match prop:
            case ConstDef():
                out.append(f"declare {prop.name} : {format_type(prop.type)}{_comment(prop.desc)}\n")
            case FuncDef() if len(prop.signatures) == 1:
                (signature,) = prop.signatures
                out.append(
                    f"declare function {prop.name}({format_args(signature.args)}): "
                    f"{format_results(signature.results)}{_comment(prop.desc)}\n"
                )
            case FuncDef():
                out.append(f"declare {prop.name}: {_overloads(prop)}{_comment(prop.desc)}\n")
            case TableDef():
                out.append("\n---------------------------\n")
                out.append(f"-- Global Table: {prop.name}\n")
                out.append("---------------------------\n\n")
                out.append(f"declare {key}: {_table_body(prop, 1)}\n\n")
            case ClassDef():
                out.append(f"declare {key}: {prop.name}\n")
            case _:
                assert_never(prop)
    return "".join(out)


def _table_body(table: TableDef, depth: int) -> str:
    pad = INDENT * depth
    lines: list[str] = []
    for key in sorted(table.props):
        prop = table.props[key]
        match prop:
            case ConstDef():
                lines.append(f"{pad}{key}: {format_type(prop.type)},{_comment(prop.desc)}")
            case FuncDef():
                lines.append(f"{pad}{key}: {_overloads(prop)},{_comment(prop.desc)}")
            case TableDef():
                lines.append(f"{pad}{key}: {_table_body(prop, depth + 1)},")
            case ClassDef():
                lines.append(f"{pad}{key}: {prop.name},")
            case _:
                assert_never(prop)
    return "{\n" + "\n".join(lines) + f"\n{INDENT * (depth - 1)}}}"
