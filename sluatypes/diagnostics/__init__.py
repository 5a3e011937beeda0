"""Diagnostics."""

from sluatypes.diagnostics.codes import (
    CATALOGUE_CONSTANT_CAST_FAILED,
    CATALOGUE_MALFORMED_ARGUMENT,
    CATALOGUE_UNKNOWN_CONSTANT_TYPE,
    DiagnosticSpec,
)
from sluatypes.diagnostics.diagnostic import Diagnostic, Severity
from sluatypes.diagnostics.report import collect_diagnostics, summarize_diagnostics

__all__ = [
    "CATALOGUE_CONSTANT_CAST_FAILED",
    "CATALOGUE_MALFORMED_ARGUMENT",
    "CATALOGUE_UNKNOWN_CONSTANT_TYPE",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "summarize_diagnostics",
]
