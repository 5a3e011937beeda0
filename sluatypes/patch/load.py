"""Patch file loading."""

from __future__ import annotations

import json
from pathlib import Path

from sluatypes.errors import PatchError
from sluatypes.patch.path import Patch, parse_patches


def loads_patches(text: str) -> tuple[Patch, ...]:
    try:
        records = json.loads(text)
    except json.JSONDecodeError as exc:
        raise PatchError(f"Malformed patch JSON: {exc}") from exc
    return parse_patches(records)


def load_patches(path: str | Path) -> tuple[Patch, ...]:
    """Read a JSON array of `{"key": [...], "value": ...}` records."""
    file_path = Path(path)
    try:
        return loads_patches(file_path.read_text(encoding="utf-8"))
    except PatchError as exc:
        raise PatchError(f"{file_path}: {exc}") from exc
