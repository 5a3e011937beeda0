"""SLua type system: model, built-ins, remapping and code samples."""

from sluatypes.slua.builtins import Builtins, default_builtins
from sluatypes.slua.data import document_from_data, document_to_data, type_from_data, type_to_data
from sluatypes.slua.format import clean_types, format_args, format_results, format_signature, format_type, format_var
from sluatypes.slua.remap import (
    SOURCE_TYPE_TABLE,
    RemapMode,
    remap,
    remap_arg_types,
    remap_const_type,
    remap_function,
    remap_return_types,
    remap_source_type,
)
from sluatypes.slua.samples import CodeSample, preferred_sample, qualified_name, sample_for_signature
from sluatypes.slua.types import (
    SIMPLE_TYPE_NAMES,
    BaseType,
    ClassDef,
    ConstDef,
    CustomType,
    EventDef,
    FuncArg,
    FuncDef,
    FuncResult,
    FuncSignature,
    FunctionType,
    SimpleType,
    TableDef,
    TableProp,
    TableType,
    TypeAlias,
    TypeSystemDocument,
    ValueType,
)

__all__ = [
    "SIMPLE_TYPE_NAMES",
    "SOURCE_TYPE_TABLE",
    "BaseType",
    "Builtins",
    "ClassDef",
    "CodeSample",
    "ConstDef",
    "CustomType",
    "EventDef",
    "FuncArg",
    "FuncDef",
    "FuncResult",
    "FuncSignature",
    "FunctionType",
    "RemapMode",
    "SimpleType",
    "TableDef",
    "TableProp",
    "TableType",
    "TypeAlias",
    "TypeSystemDocument",
    "ValueType",
    "clean_types",
    "default_builtins",
    "document_from_data",
    "document_to_data",
    "format_args",
    "format_results",
    "format_signature",
    "format_type",
    "format_var",
    "preferred_sample",
    "qualified_name",
    "remap",
    "remap_arg_types",
    "remap_const_type",
    "remap_function",
    "remap_return_types",
    "remap_source_type",
    "sample_for_signature",
    "type_from_data",
    "type_to_data",
]
