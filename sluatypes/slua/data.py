"""Type-system document <-> JSON-compatible plain data.

The plain form is what patches address, e.g.
`["global", "props", "ll", "props", "Say", "signatures", 0, "args", 1, "type"]`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, assert_never

from sluatypes.errors import DocumentShapeError
from sluatypes.plain import (
    PlainValue,
    expect_def,
    flag,
    optional_str,
    require_field,
    require_list,
    require_mapping,
    require_str,
)
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


def type_to_data(type_: BaseType) -> dict[str, PlainValue]:
    match type_:
        case SimpleType(name=name):
            return {"def": "simple", "value": name}
        case ValueType(value=value):
            return {"def": "value", "value": value}
        case CustomType(name=name):
            return {"def": "custom", "value": name}
        case FunctionType(signature=signature):
            return {"def": "function", "value": signature_to_data(signature)}
        case TableType(elements=elements):
            return {"def": "table", "value": [type_to_data(element) for element in elements]}
        case _:
            assert_never(type_)


def _var_to_data(kind: str, var: FuncArg | FuncResult) -> dict[str, PlainValue]:
    return {
        "def": kind,
        "name": var.name,
        "desc": var.desc,
        "type": [type_to_data(t) for t in var.types],
        "variadic": var.variadic,
        "optional": var.optional,
    }


def signature_to_data(signature: FuncSignature) -> dict[str, PlainValue]:
    return {
        "def": "signature",
        "args": [_var_to_data("arg", a) for a in signature.args],
        "result": [_var_to_data("result", r) for r in signature.results],
    }


def _func_to_data(func: FuncDef) -> dict[str, PlainValue]:
    out: dict[str, PlainValue] = {
        "def": "func",
        "name": func.name,
        "desc": func.desc,
        "link": func.link,
        "energy": func.energy,
        "sleep": func.sleep,
        "must_use": func.must_use,
        "signatures": [signature_to_data(s) for s in func.signatures],
    }
    for key, enabled in (
        ("private", func.private),
        ("deprecated", func.deprecated),
        ("god-mode", func.god_mode),
        ("linden-experience", func.linden_experience),
        ("takesSelf", func.takes_self),
    ):
        if enabled:
            out[key] = True
    return out


def _const_to_data(const: ConstDef) -> dict[str, PlainValue]:
    return {
        "def": "const",
        "name": const.name,
        "desc": const.desc,
        "type": type_to_data(const.type),
        "value": const.value,
        "valueRaw": const.value_raw,
        "link": const.link,
    }


def _class_to_data(cls: ClassDef) -> dict[str, PlainValue]:
    return {
        "def": "class",
        "name": cls.name,
        "funcs": {name: _func_to_data(f) for name, f in cls.funcs.items()},
        "props": {name: _const_to_data(c) for name, c in cls.props.items()},
    }


def _table_to_data(table: TableDef) -> dict[str, PlainValue]:
    return {
        "def": "table",
        "name": table.name,
        "props": {name: _prop_to_data(prop) for name, prop in table.props.items()},
    }


def _prop_to_data(prop: TableProp) -> dict[str, PlainValue]:
    match prop:
        case ConstDef():
            return _const_to_data(prop)
        case FuncDef():
            return _func_to_data(prop)
        case ClassDef():
            return _class_to_data(prop)
        case TableDef():
            return _table_to_data(prop)
        case _:
            assert_never(prop)


def _event_to_data(event: EventDef) -> dict[str, PlainValue]:
    return {
        "def": "event",
        "name": event.name,
        "desc": event.desc,
        "link": event.link,
        "args": [_var_to_data("arg", a) for a in event.args],
    }


def document_to_data(document: TypeSystemDocument) -> dict[str, PlainValue]:
    return {
        "global": _table_to_data(document.global_table),
        "types": {
            name: {
                "name": alias.name,
                "desc": alias.desc,
                "type": [type_to_data(t) for t in alias.types],
            }
            for name, alias in document.types.items()
        },
        "classes": {name: _class_to_data(cls) for name, cls in document.classes.items()},
        "events": {name: _event_to_data(event) for name, event in document.events.items()},
    }


def type_from_data(value: Any, where: str) -> BaseType:
    data = require_mapping(value, where)
    kind = data.get("def")
    payload = require_field(data, "value", where)
    match kind:
        case "simple":
            if not isinstance(payload, str) or payload not in SIMPLE_TYPE_NAMES:
                raise DocumentShapeError(f"{where}: unknown simple type {payload!r}")
            return SimpleType(payload)
        case "value":
            if isinstance(payload, bool) or not isinstance(payload, (str, int, float)):
                raise DocumentShapeError(f"{where}: literal type value must be a string or number")
            return ValueType(payload)
        case "custom":
            if not isinstance(payload, str):
                raise DocumentShapeError(f"{where}: custom type name must be a string")
            return CustomType(payload)
        case "function":
            return FunctionType(signature_from_data(payload, f"{where}.value"))
        case "table":
            items = require_list(payload, f"{where}.value")
            return TableType(tuple(type_from_data(item, f"{where}.value[{i}]") for i, item in enumerate(items)))
        case _:
            raise DocumentShapeError(f"{where}: unknown type def {kind!r}")


def _types_from_data(value: Any, where: str) -> tuple[BaseType, ...]:
    items = require_list(value, where)
    if not items:
        raise DocumentShapeError(f"{where}: type list must not be empty")
    return tuple(type_from_data(item, f"{where}[{i}]") for i, item in enumerate(items))


def _var_fields(value: Any, kind: str, where: str) -> dict[str, Any]:
    data = require_mapping(value, where)
    expect_def(data, kind, where)
    return {
        "name": data.get("name") or "",
        "desc": data.get("desc") or "",
        "types": _types_from_data(require_field(data, "type", where), f"{where}.type"),
        "variadic": flag(data, "variadic", where),
        "optional": flag(data, "optional", where),
    }


def _args_from_data(value: Any, where: str) -> tuple[FuncArg, ...]:
    items = require_list(value, where)
    return tuple(FuncArg(**_var_fields(item, "arg", f"{where}[{i}]")) for i, item in enumerate(items))


def signature_from_data(value: Any, where: str) -> FuncSignature:
    data = require_mapping(value, where)
    results = require_list(data.get("result", []), f"{where}.result")
    return FuncSignature(
        args=_args_from_data(data.get("args", []), f"{where}.args"),
        results=tuple(
            FuncResult(**_var_fields(item, "result", f"{where}.result[{i}]")) for i, item in enumerate(results)
        ),
    )


def _number_or_none(data: Mapping[str, Any], key: str, where: str) -> int | float | None:
    value = data.get(key)
    if value is None or (isinstance(value, (int, float)) and not isinstance(value, bool)):
        return value
    raise DocumentShapeError(f"{where}: field {key!r} must be a number or null")


def _func_from_data(value: Any, where: str) -> FuncDef:
    data = require_mapping(value, where)
    expect_def(data, "func", where)
    signatures = require_list(require_field(data, "signatures", where), f"{where}.signatures")
    if not signatures:
        raise DocumentShapeError(f"{where}: function needs at least one signature")
    return FuncDef(
        name=require_str(data, "name", where),
        desc=data.get("desc") or "",
        link=optional_str(data, "link", where),
        signatures=tuple(signature_from_data(s, f"{where}.signatures[{i}]") for i, s in enumerate(signatures)),
        energy=_number_or_none(data, "energy", where),
        sleep=_number_or_none(data, "sleep", where),
        must_use=flag(data, "must_use", where),
        private=flag(data, "private", where),
        deprecated=flag(data, "deprecated", where),
        god_mode=flag(data, "god-mode", where),
        linden_experience=flag(data, "linden-experience", where),
        takes_self=flag(data, "takesSelf", where),
    )


def _const_from_data(value: Any, where: str) -> ConstDef:
    data = require_mapping(value, where)
    expect_def(data, "const", where)
    const_value = data.get("value")
    if isinstance(const_value, bool) or not (const_value is None or isinstance(const_value, (int, float, str))):
        raise DocumentShapeError(f"{where}: field 'value' must be a number, string or null")
    return ConstDef(
        name=require_str(data, "name", where),
        desc=data.get("desc") or "",
        type=type_from_data(require_field(data, "type", where), f"{where}.type"),
        value=const_value,
        value_raw=optional_str(data, "valueRaw", where),
        link=optional_str(data, "link", where) or "",
    )


def _class_from_data(value: Any, where: str) -> ClassDef:
    data = require_mapping(value, where)
    expect_def(data, "class", where)
    funcs = require_mapping(data.get("funcs", {}), f"{where}.funcs")
    props = require_mapping(data.get("props", {}), f"{where}.props")
    return ClassDef(
        name=require_str(data, "name", where),
        funcs={str(k): _func_from_data(v, f"{where}.funcs.{k}") for k, v in funcs.items()},
        props={str(k): _const_from_data(v, f"{where}.props.{k}") for k, v in props.items()},
    )


def _table_from_data(value: Any, where: str) -> TableDef:
    data = require_mapping(value, where)
    expect_def(data, "table", where)
    props = require_mapping(data.get("props", {}), f"{where}.props")
    return TableDef(
        name=require_str(data, "name", where),
        props={str(k): _prop_from_data(v, f"{where}.props.{k}") for k, v in props.items()},
    )


def _prop_from_data(value: Any, where: str) -> TableProp:
    kind = require_mapping(value, where).get("def")
    match kind:
        case "const":
            return _const_from_data(value, where)
        case "func":
            return _func_from_data(value, where)
        case "class":
            return _class_from_data(value, where)
        case "table":
            return _table_from_data(value, where)
        case _:
            raise DocumentShapeError(f"{where}: unknown table property def {kind!r}")


def _event_from_data(value: Any, where: str) -> EventDef:
    data = require_mapping(value, where)
    expect_def(data, "event", where)
    return EventDef(
        name=require_str(data, "name", where),
        desc=data.get("desc") or "",
        link=optional_str(data, "link", where) or "",
        args=_args_from_data(data.get("args", []), f"{where}.args"),
    )


def _alias_from_data(value: Any, where: str) -> TypeAlias:
    data = require_mapping(value, where)
    return TypeAlias(
        name=require_str(data, "name", where),
        desc=data.get("desc") or "",
        types=_types_from_data(require_field(data, "type", where), f"{where}.type"),
    )


def document_from_data(data: Any) -> TypeSystemDocument:
    """Read a (possibly patched) plain document back into the typed model."""
    root = require_mapping(data, "document")
    types = require_mapping(root.get("types", {}), "types")
    classes = require_mapping(root.get("classes", {}), "classes")
    events = require_mapping(root.get("events", {}), "events")
    return TypeSystemDocument(
        global_table=_table_from_data(require_field(root, "global", "document"), "global"),
        types={str(k): _alias_from_data(v, f"types.{k}") for k, v in types.items()},
        classes={str(k): _class_from_data(v, f"classes.{k}") for k, v in classes.items()},
        events={str(k): _event_from_data(v, f"events.{k}") for k, v in events.items()},
    )
