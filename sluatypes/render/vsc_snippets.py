"""VS Code snippets for event handlers."""

from __future__ import annotations

import json
import re

from sluatypes.slua import FuncArg, TypeSystemDocument, format_type

_CAMEL_WORD = re.compile(r"(?<!^)([A-Z][a-z]+)")
_STRIPPED_PREFIXES = ("number_of_", "http_", "start_", "senders_")


def snake_case(name: str) -> str:
    return _CAMEL_WORD.sub(r"_\1", name).lower()


def simplify_name(name: str) -> str:
    if name.endswith("id"):
        return "id"
    for prefix in _STRIPPED_PREFIXES:
        if name.startswith(prefix):
            return name.replace(prefix, "", 1)
    return name


def format_snippet_arg(arg: FuncArg) -> str:
    types = " | ".join(format_type(t) for t in arg.types)
    return f"{simplify_name(snake_case(arg.name))}: {types}"


def build_vsc_snippets(document: TypeSystemDocument) -> dict[str, dict[str, object]]:
    snippets: dict[str, dict[str, object]] = {}
    for name, event in document.events.items():
        args = ", ".join(format_snippet_arg(arg) for arg in event.args)
        snippets[name] = {
            "scope": "luau",
            "prefix": name,
            "body": [f"function {name}({args})"],
            "description": event.desc or f"Triggered when {name} occurs.",
        }
    return snippets


def render_vsc_snippets(document: TypeSystemDocument) -> str:
    return json.dumps(build_vsc_snippets(document), indent=2, ensure_ascii=False)
