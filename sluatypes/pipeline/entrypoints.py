"""Entrypoints that run load -> patch -> remap -> render over one input file."""

from __future__ import annotations

import logging
from pathlib import Path

from sluatypes.catalogue import Catalogue, load_catalogue
from sluatypes.diagnostics import collect_diagnostics, summarize_diagnostics
from sluatypes.pipeline.options import GenerateOptions
from sluatypes.pipeline.results import BuildRunResult, GenerateRunResult
from sluatypes.render import OutputKind, render, resolve_output_kind
from sluatypes.slua import Builtins, TypeSystemDocument, remap

logger = logging.getLogger(__name__)


def build_type_system(
    catalogue: Catalogue,
    options: GenerateOptions | None = None,
    *,
    builtins: Builtins | None = None,
) -> TypeSystemDocument:
    resolved = options if options is not None else GenerateOptions()
    return remap(catalogue, builtins, resolved.document_patches, mode=resolved.mode)


def run_build(
    path: str | Path,
    options: GenerateOptions | None = None,
    *,
    builtins: Builtins | None = None,
) -> BuildRunResult:
    """Load, patch and remap one keyword file."""
    resolved = options if options is not None else GenerateOptions()
    extracted = load_catalogue(
        path,
        patches=resolved.catalogue_patches,
        side_effects=resolved.side_effects,
    )
    document = build_type_system(extracted.catalogue, resolved, builtins=builtins)
    diagnostics = collect_diagnostics(extracted.diagnostics)
    logger.info("Built %s: %s", path, summarize_diagnostics(diagnostics))
    return BuildRunResult(
        catalogue=extracted.catalogue,
        document=document,
        diagnostics=diagnostics,
    )


def run_generate(
    path: str | Path,
    kind: str | OutputKind = OutputKind.SLUA_DEFS,
    options: GenerateOptions | None = None,
    *,
    build: BuildRunResult | None = None,
) -> GenerateRunResult:
    """Build (or reuse `build`) and render one output kind."""
    resolved_build = build if build is not None else run_build(path, options)
    resolved_kind = kind if isinstance(kind, OutputKind) else resolve_output_kind(kind)
    logger.info("Rendering %s from %s", resolved_kind or kind, path)
    output = render(kind, catalogue=resolved_build.catalogue, document=resolved_build.document)
    return GenerateRunResult(build=resolved_build, kind=resolved_kind or kind, output=output)
