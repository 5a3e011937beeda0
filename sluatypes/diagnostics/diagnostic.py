"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by catalogue extraction."""

    code: str
    message: str
    subject: str | None = None
    severity: Severity = "warning"
    hint: str | None = None
    category: str | None = None
