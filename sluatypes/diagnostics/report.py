"""Diagnostics helpers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from sluatypes.diagnostics.diagnostic import Diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def summarize_diagnostics(diagnostics: Iterable[Diagnostic]) -> str:
    """One line per run, e.g. `2 diagnostics: CATALOGUE_MALFORMED_ARGUMENT x2`."""
    counts = Counter(d.code for d in diagnostics)
    total = sum(counts.values())
    if not total:
        return "no diagnostics"
    noun = "diagnostic" if total == 1 else "diagnostics"
    parts = ", ".join(f"{code} x{count}" for code, count in sorted(counts.items()))
    return f"{total} {noun}: {parts}"
