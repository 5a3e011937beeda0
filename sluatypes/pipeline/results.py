"""Pipeline run result carriers."""

from __future__ import annotations

from dataclasses import dataclass

from sluatypes.catalogue import Catalogue
from sluatypes.diagnostics import Diagnostic
from sluatypes.render import OutputKind
from sluatypes.slua import TypeSystemDocument


@dataclass(frozen=True, slots=True)
class BuildRunResult:
    """Catalogue and type-system document from one input file."""

    catalogue: Catalogue
    document: TypeSystemDocument
    diagnostics: list[Diagnostic]


@dataclass(frozen=True, slots=True)
class GenerateRunResult:
    """Rendered output for one kind; `output` is None for unknown kinds."""

    build: BuildRunResult
    kind: OutputKind | str
    output: str | None
