"""luau-lsp documentation database (`--docs`)."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
import json
from typing import Any, Final, TypeAlias, assert_never

from sluatypes.slua import (
    ClassDef,
    ConstDef,
    FuncDef,
    TableDef,
    TableProp,
    TypeSystemDocument,
    preferred_sample,
)

DOC_KEY_PREFIX: Final = "@roblox/global/"
TRANSITION_LINK: Final = "https://wiki.secondlife.com/wiki/SLua_Alpha#Transitioning_from_LSL_to_SLua"

DocEntry: TypeAlias = dict[str, str]

# Curated entries; they take precedence over generated ones.
FIXED_DOCS: Final[dict[str, DocEntry]] = {
    "ll": {
        "documentation": "The global LL object that stored all the ll specific functions",
        "learn_more_link": "https://wiki.secondlife.com/wiki/Category:LSL_Functions",
        "code_sample": "ll.Foo(...)",
    },
    "integer": {
        "documentation": "function that returns an LL integer type for a given number",
        "learn_more_link": TRANSITION_LINK,
        "code_sample": "integer(123)",
    },
    "quaternion": {
        "documentation": "function to create an LL quaternion value from 4 numbers",
        "learn_more_link": TRANSITION_LINK,
        "code_sample": "quaternion(0,0,0,1)",
    },
    "uuid": {
        "documentation": "function to create an LL UUID value from a string",
        "learn_more_link": TRANSITION_LINK,
        "code_sample": "uuid('677bf9a4-bba5-4cf9-a4ad-4802a0f7ef46')",
    },
}


def build_luau_docs(document: TypeSystemDocument) -> dict[str, DocEntry]:
    docs: dict[str, DocEntry] = {}
    _collect(document.global_table.props, (), document, docs)
    for path, entry in FIXED_DOCS.items():
        docs[DOC_KEY_PREFIX + path] = dict(entry)
    return docs


def render_luau_docs(document: TypeSystemDocument) -> str:
    return json.dumps(build_luau_docs(document), indent=2, ensure_ascii=False)


def _format_value(value: Any) -> str:
    return "nil" if value is None else str(value)


def _collect(
    props: Mapping[str, TableProp],
    section: Sequence[str],
    document: TypeSystemDocument,
    docs: dict[str, DocEntry],
) -> None:
    for prop in props.values():
        path = ".".join([*section, prop.name])
        match prop:
            case ConstDef():
                docs[DOC_KEY_PREFIX + path] = {
                    "documentation": f"{_format_value(prop.value)} : {prop.desc or 'n/a'}",
                    "learn_more_link": prop.link,
                    "code_sample": path,
                }
            case FuncDef():
                entry: DocEntry = {
                    "documentation": prop.desc or "n/a",
                    "code_sample": preferred_sample(section, prop, document).text,
                }
                if prop.link:
                    entry["learn_more_link"] = prop.link
                docs[DOC_KEY_PREFIX + path] = entry
            case TableDef():
                docs[DOC_KEY_PREFIX + path] = {"documentation": f"Global table {prop.name}"}
                _collect(prop.props, [*section, prop.name], document, docs)
            case ClassDef():
                continue
            case _:
                assert_never(prop)
