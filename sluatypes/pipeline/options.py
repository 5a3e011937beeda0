"""Generation options."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from sluatypes.patch import Patch
from sluatypes.slua import RemapMode


@dataclass(frozen=True, slots=True)
class GenerateOptions:
    """Remap mode, both override lists and the optional side-effect table."""

    mode: RemapMode = RemapMode.STRICT
    catalogue_patches: tuple[Patch, ...] = ()
    document_patches: tuple[Patch, ...] = ()
    side_effects: Mapping[str, bool] | None = None
