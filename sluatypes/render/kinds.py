"""Output kind selector."""

from __future__ import annotations

from enum import StrEnum


class OutputKind(StrEnum):
    LSL_JSON = "lsl-json"
    SLUA_JSON = "slua-json"
    SLUA_DEFS = "slua-defs"
    SLUA_DOCS = "slua-docs"
    VSC_SNIPPETS = "vsc-snippets"


_ALIASES: dict[str, OutputKind] = {
    "defs": OutputKind.SLUA_DEFS,
    "luau-lsp-defs": OutputKind.SLUA_DEFS,
    "docs": OutputKind.SLUA_DOCS,
    "luau-lsp-docs": OutputKind.SLUA_DOCS,
}


def resolve_output_kind(name: str) -> OutputKind | None:
    """Map a kind name or alias to its `OutputKind`; unknown names give None."""
    key = name.strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return OutputKind(key)
    except ValueError:
        return None


def output_kind_names() -> tuple[str, ...]:
    return tuple(sorted([kind.value for kind in OutputKind] + list(_ALIASES)))
