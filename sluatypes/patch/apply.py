"""Patch interpreter over JSON-like trees."""

from __future__ import annotations

from collections.abc import Iterable
import copy
import logging
from typing import Any

from sluatypes.errors import PatchError
from sluatypes.patch.path import IndexSegment, KeySegment, Patch, PathSegment

logger = logging.getLogger(__name__)


def apply_patch(data: Any, patch: Patch) -> None:
    """Assign `patch.value` at `patch.path` inside `data`, in place.

    Every segment but the last must resolve to an existing object or array.
    Only the terminal key of an object may be created.
    """
    if not patch.path:
        raise PatchError(f"Patch path must not be empty, patch {patch.describe()}")

    target = data
    for depth, segment in enumerate(patch.path[:-1]):
        target = _step(target, segment, patch, depth)

    terminal = patch.path[-1]
    match terminal:
        case KeySegment(key=key) if isinstance(target, dict):
            target[key] = copy.deepcopy(patch.value)
        case IndexSegment(index=index) if isinstance(target, list):
            if index >= len(target):
                raise PatchError(f"Path index {index} out of range, patch {patch.describe()}")
            target[index] = copy.deepcopy(patch.value)
        case _:
            raise PatchError(f"Path hit non indexable point, patch {patch.describe()}")


def apply_patches(data: Any, patches: Iterable[Patch]) -> Any:
    """Apply patches strictly in order to a deep copy of `data` and return it."""
    patched = copy.deepcopy(data)
    count = 0
    for patch in patches:
        apply_patch(patched, patch)
        count += 1
    logger.debug("Applied %d patch(es)", count)
    return patched


def _step(target: Any, segment: PathSegment, patch: Patch, depth: int) -> Any:
    match segment:
        case KeySegment(key=key) if isinstance(target, dict):
            if key not in target:
                raise PatchError(f"Path key {key!r} at depth {depth} does not exist, patch {patch.describe()}")
            return target[key]
        case IndexSegment(index=index) if isinstance(target, list):
            if index >= len(target):
                raise PatchError(f"Path index {index} at depth {depth} out of range, patch {patch.describe()}")
            return target[index]
        case _:
            raise PatchError(f"Path hit non indexable point, patch {patch.describe()}")
