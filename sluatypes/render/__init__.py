"""Renderers over the catalogue and the type-system document."""

from sluatypes.render.dispatch import render
from sluatypes.render.json_dump import render_lsl_json, render_slua_json
from sluatypes.render.kinds import OutputKind, output_kind_names, resolve_output_kind
from sluatypes.render.luau_defs import render_luau_defs
from sluatypes.render.luau_docs import build_luau_docs, render_luau_docs
from sluatypes.render.vsc_snippets import build_vsc_snippets, render_vsc_snippets

__all__ = [
    "OutputKind",
    "build_luau_docs",
    "build_vsc_snippets",
    "output_kind_names",
    "render",
    "render_luau_defs",
    "render_luau_docs",
    "render_lsl_json",
    "render_slua_json",
    "render_vsc_snippets",
    "resolve_output_kind",
]
