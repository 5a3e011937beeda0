"""Catalogue loading with file-extension dispatch."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import replace
import logging
from pathlib import Path

from sluatypes.catalogue.data import catalogue_from_data, catalogue_to_data
from sluatypes.catalogue.extract_xml import extract_catalogue
from sluatypes.catalogue.extract_yaml import extract_catalogue_yaml, parse_definitions_yaml
from sluatypes.catalogue.model import Catalogue
from sluatypes.catalogue.result import ExtractResult
from sluatypes.errors import UnsupportedFormatError
from sluatypes.llsd import read_keywords_xml
from sluatypes.patch import Patch, apply_patches

logger = logging.getLogger(__name__)

XML_SUFFIXES = frozenset({".xml"})
YAML_SUFFIXES = frozenset({".yml", ".yaml"})


def load_catalogue(
    path: str | Path,
    *,
    patches: Sequence[Patch] = (),
    side_effects: Mapping[str, bool] | None = None,
) -> ExtractResult:
    """Read an XML or YAML keyword file, extract it, then apply catalogue patches."""
    file_path = Path(path)
    suffix = file_path.suffix.lower()
    if suffix in XML_SUFFIXES:
        logger.info("Reading keywords XML from %s", file_path)
        result = extract_catalogue(read_keywords_xml(file_path), side_effects=side_effects)
    elif suffix in YAML_SUFFIXES:
        logger.info("Reading keywords YAML from %s", file_path)
        data = parse_definitions_yaml(file_path.read_text(encoding="utf-8"))
        result = extract_catalogue_yaml(data, side_effects=side_effects)
    else:
        raise UnsupportedFormatError(file_path.suffix)

    if not patches:
        return result
    return replace(result, catalogue=patch_catalogue(result.catalogue, patches))


def patch_catalogue(catalogue: Catalogue, patches: Sequence[Patch]) -> Catalogue:
    return catalogue_from_data(apply_patches(catalogue_to_data(catalogue), patches))
