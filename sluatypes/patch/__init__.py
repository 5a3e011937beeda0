"""Declarative path + value overrides for JSON-like documents."""

from sluatypes.patch.apply import apply_patch, apply_patches
from sluatypes.patch.load import load_patches, loads_patches
from sluatypes.patch.path import (
    IndexSegment,
    KeySegment,
    Patch,
    PathSegment,
    make_patch,
    parse_patch,
    parse_patches,
    parse_segment,
)

__all__ = [
    "IndexSegment",
    "KeySegment",
    "Patch",
    "PathSegment",
    "apply_patch",
    "apply_patches",
    "load_patches",
    "loads_patches",
    "make_patch",
    "parse_patch",
    "parse_patches",
    "parse_segment",
]
