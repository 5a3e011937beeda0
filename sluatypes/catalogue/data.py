"""Catalogue <-> JSON-compatible plain data."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

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
from sluatypes.errors import DocumentShapeError
from sluatypes.plain import (
    PlainValue,
    expect_def,
    flag,
    optional_str,
    require_list,
    require_mapping,
    require_str,
)


def catalogue_to_data(catalogue: Catalogue) -> dict[str, PlainValue]:
    return {
        "functions": {name: _func_to_data(func) for name, func in catalogue.functions.items()},
        "constants": {name: _const_to_data(const) for name, const in catalogue.constants.items()},
        "events": {name: _event_to_data(event) for name, event in catalogue.events.items()},
        "types": {name: {"name": t.name, "desc": t.desc} for name, t in catalogue.types.items()},
    }


def catalogue_from_data(data: Any) -> Catalogue:
    """Read a (possibly patched) plain catalogue back into the typed model."""
    root = require_mapping(data, "catalogue")
    return Catalogue(
        functions={
            str(name): _func_from_data(entry, f"functions.{name}")
            for name, entry in _section(root, "functions").items()
        },
        constants={
            str(name): _const_from_data(entry, f"constants.{name}")
            for name, entry in _section(root, "constants").items()
        },
        events={
            str(name): _event_from_data(entry, f"events.{name}")
            for name, entry in _section(root, "events").items()
        },
        types={
            str(name): _type_from_data(entry, f"types.{name}")
            for name, entry in _section(root, "types").items()
        },
    )


def _args_to_data(args: tuple[ArgDef, ...]) -> list[PlainValue]:
    return [{"def": "arg", "name": arg.name, "type": arg.type, "desc": arg.desc} for arg in args]


def _func_to_data(func: FuncDef) -> dict[str, PlainValue]:
    out: dict[str, PlainValue] = {
        "def": "func",
        "name": func.name,
        "args": _args_to_data(func.args),
        "result": func.result,
        "desc": func.desc,
        "energy": func.energy,
        "sleep": func.sleep,
        "must_use": func.must_use,
        "link": func.link,
        "private": func.private,
    }
    if func.deprecated:
        out["deprecated"] = True
    if func.god_mode:
        out["god-mode"] = True
    if func.linden_experience:
        out["linden-experience"] = True
    return out


def _const_to_data(const: ConstDef) -> dict[str, PlainValue]:
    out: dict[str, PlainValue] = {
        "def": "const",
        "name": const.name,
        "type": const.type,
        "valueRaw": const.value_raw,
        "value": const.value,
        "desc": const.desc,
        "link": const.link,
    }
    if const.deprecated:
        out["deprecated"] = True
    if const.private:
        out["private"] = True
    return out


def _event_to_data(event: EventDef) -> dict[str, PlainValue]:
    out: dict[str, PlainValue] = {
        "def": "event",
        "name": event.name,
        "args": _args_to_data(event.args),
        "desc": event.desc,
        "link": event.link,
    }
    if event.deprecated:
        out["deprecated"] = True
    return out


def _section(root: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    return require_mapping(root.get(name, {}), name)


def _args_from_data(value: Any, where: str) -> tuple[ArgDef, ...]:
    out: list[ArgDef] = []
    for index, item in enumerate(require_list(value, f"{where}.args")):
        arg_where = f"{where}.args[{index}]"
        arg = require_mapping(item, arg_where)
        expect_def(arg, "arg", arg_where)
        out.append(
            ArgDef(
                name=require_str(arg, "name", arg_where),
                type=optional_str(arg, "type", arg_where),
                desc=arg.get("desc") or "",
            )
        )
    return tuple(out)


def _cost(data: Mapping[str, Any], key: str, where: str) -> CostValue:
    value = data.get(key)
    if value is None or (isinstance(value, (int, float)) and not isinstance(value, bool)):
        return value
    raise DocumentShapeError(f"{where}: field {key!r} must be a number or null")


def _const_value(data: Mapping[str, Any], where: str) -> ConstValue:
    value = data.get("value")
    if value is None or (isinstance(value, (int, float, str)) and not isinstance(value, bool)):
        return value
    raise DocumentShapeError(f"{where}: field 'value' must be a number, string or null")


def _func_from_data(value: Any, where: str) -> FuncDef:
    data = require_mapping(value, where)
    expect_def(data, "func", where)
    return FuncDef(
        name=require_str(data, "name", where),
        args=_args_from_data(data.get("args", []), where),
        result=optional_str(data, "result", where),
        desc=data.get("desc") or "",
        energy=_cost(data, "energy", where),
        sleep=_cost(data, "sleep", where),
        must_use=flag(data, "must_use", where),
        link=optional_str(data, "link", where),
        private=flag(data, "private", where),
        deprecated=flag(data, "deprecated", where),
        god_mode=flag(data, "god-mode", where),
        linden_experience=flag(data, "linden-experience", where),
    )


def _const_from_data(value: Any, where: str) -> ConstDef:
    data = require_mapping(value, where)
    expect_def(data, "const", where)
    return ConstDef(
        name=require_str(data, "name", where),
        type=optional_str(data, "type", where),
        value_raw=optional_str(data, "valueRaw", where),
        value=_const_value(data, where),
        desc=data.get("desc") or "",
        link=optional_str(data, "link", where) or "",
        deprecated=flag(data, "deprecated", where),
        private=flag(data, "private", where),
    )


def _event_from_data(value: Any, where: str) -> EventDef:
    data = require_mapping(value, where)
    expect_def(data, "event", where)
    return EventDef(
        name=require_str(data, "name", where),
        args=_args_from_data(data.get("args", []), where),
        desc=data.get("desc") or "",
        link=optional_str(data, "link", where) or "",
        deprecated=flag(data, "deprecated", where),
    )


def _type_from_data(value: Any, where: str) -> TypeDef:
    data = require_mapping(value, where)
    return TypeDef(name=require_str(data, "name", where), desc=data.get("desc") or "")
