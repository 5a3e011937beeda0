"""Dispatch from an output kind to its renderer."""

from __future__ import annotations

import logging
from typing import assert_never

from sluatypes.catalogue import Catalogue
from sluatypes.render.json_dump import render_lsl_json, render_slua_json
from sluatypes.render.kinds import OutputKind, resolve_output_kind
from sluatypes.render.luau_defs import render_luau_defs
from sluatypes.render.luau_docs import render_luau_docs
from sluatypes.render.vsc_snippets import render_vsc_snippets
from sluatypes.slua import TypeSystemDocument

logger = logging.getLogger(__name__)


def render(kind: str | OutputKind, *, catalogue: Catalogue, document: TypeSystemDocument) -> str | None:
    """Render one output; an unknown kind renders nothing."""
    resolved = kind if isinstance(kind, OutputKind) else resolve_output_kind(kind)
    if resolved is None:
        logger.warning("Unknown output kind %r; nothing rendered", kind)
        return None

    match resolved:
        case OutputKind.LSL_JSON:
            return render_lsl_json(catalogue)
        case OutputKind.SLUA_JSON:
            return render_slua_json(document)
        case OutputKind.SLUA_DEFS:
            return render_luau_defs(document)
        case OutputKind.SLUA_DOCS:
            return render_luau_docs(document)
        case OutputKind.VSC_SNIPPETS:
            return render_vsc_snippets(document)
        case _:
            assert_never(resolved)
