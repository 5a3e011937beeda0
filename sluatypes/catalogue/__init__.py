"""Normalized keyword catalogue: model, extractors and loading."""

from sluatypes.catalogue.data import catalogue_from_data, catalogue_to_data
from sluatypes.catalogue.extract_xml import extract_catalogue
from sluatypes.catalogue.extract_yaml import (
    LSL_TYPE_DESCRIPTIONS,
    extract_catalogue_yaml,
    parse_definitions_yaml,
)
from sluatypes.catalogue.load import load_catalogue, patch_catalogue
from sluatypes.catalogue.model import (
    ArgDef,
    Catalogue,
    ConstDef,
    ConstValue,
    CostValue,
    EventDef,
    FuncDef,
    TypeDef,
)
from sluatypes.catalogue.result import ExtractResult, ExtractSink
from sluatypes.catalogue.values import cast_value, clean_tooltip, has_effect, wiki_link

__all__ = [
    "LSL_TYPE_DESCRIPTIONS",
    "ArgDef",
    "Catalogue",
    "ConstDef",
    "ConstValue",
    "CostValue",
    "EventDef",
    "ExtractResult",
    "ExtractSink",
    "FuncDef",
    "TypeDef",
    "cast_value",
    "catalogue_from_data",
    "catalogue_to_data",
    "clean_tooltip",
    "extract_catalogue",
    "extract_catalogue_yaml",
    "has_effect",
    "load_catalogue",
    "parse_definitions_yaml",
    "patch_catalogue",
    "wiki_link",
]
