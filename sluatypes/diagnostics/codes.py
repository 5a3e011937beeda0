"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from sluatypes.diagnostics.diagnostic import Diagnostic, Severity


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None

    def emit(self, subject: str | None = None, detail: str | None = None) -> Diagnostic:
        message = self.message if detail is None else f"{self.message} {detail}"
        return Diagnostic(
            code=self.code,
            message=message,
            subject=subject,
            severity=self.severity,
            hint=self.hint,
            category=self.category,
        )


CATALOGUE_MALFORMED_ARGUMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="CATALOGUE_MALFORMED_ARGUMENT",
    message="Argument entry must hold exactly one name -> definition pair; entry skipped.",
    hint="Split the entry so that every argument map carries a single key.",
    severity="warning",
    category="catalogue",
)

CATALOGUE_CONSTANT_CAST_FAILED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="CATALOGUE_CONSTANT_CAST_FAILED",
    message="Constant value could not be cast to its declared numeric type; value set to null.",
    severity="warning",
    category="catalogue",
)

CATALOGUE_UNKNOWN_CONSTANT_TYPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="CATALOGUE_UNKNOWN_CONSTANT_TYPE",
    message="Constant has a type with no cast rule; value set to null.",
    severity="warning",
    category="catalogue",
)
