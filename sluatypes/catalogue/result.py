"""Extraction result carrier."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from sluatypes.catalogue.model import Catalogue
from sluatypes.diagnostics import Diagnostic, DiagnosticSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExtractResult:
    """Extracted catalogue plus the data-quality warnings raised on the way."""

    catalogue: Catalogue
    diagnostics: tuple[Diagnostic, ...] = ()


class ExtractSink:
    """Collects skip/cast warnings; each one is also logged."""

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def warn(self, spec: DiagnosticSpec, subject: str, detail: str | None = None) -> None:
        diagnostic = spec.emit(subject=subject, detail=detail)
        logger.warning("%s [%s] %s", subject, diagnostic.code, diagnostic.message)
        self._diagnostics.append(diagnostic)

    def finish(self, catalogue: Catalogue) -> ExtractResult:
        return ExtractResult(catalogue=catalogue, diagnostics=tuple(self._diagnostics))
