"""Catalogue -> type-system remapping.

Every source type name maps to exactly one target type through
`SOURCE_TYPE_TABLE`; a name outside the table raises
`UnknownSourceTypeError` instead of being guessed. Argument widening
depends on `RemapMode`, which is passed explicitly to every call.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
import logging
from typing import Final

from sluatypes.catalogue import ArgDef, Catalogue
from sluatypes.catalogue import ConstDef as CatalogueConst
from sluatypes.catalogue import EventDef as CatalogueEvent
from sluatypes.catalogue import FuncDef as CatalogueFunc
from sluatypes.errors import UnknownSourceTypeError
from sluatypes.patch import Patch, apply_patches
from sluatypes.slua.builtins import Builtins, default_builtins
from sluatypes.slua.data import document_from_data, document_to_data
from sluatypes.slua.types import (
    BaseType,
    ConstDef,
    EventDef,
    FuncArg,
    FuncDef,
    FuncResult,
    FuncSignature,
    SimpleType,
    TableDef,
    TableProp,
    TypeSystemDocument,
)

logger = logging.getLogger(__name__)

GLOBAL_TABLE_NAME: Final = "SLua"
LL_TABLE_NAME: Final = "ll"
LL_PREFIX: Final = "ll"
SKIPPED_EVENT_PREFIX: Final = "state_"

SOURCE_TYPE_TABLE: Final[dict[str, str]] = {
    "integer": "integer",
    "float": "number",
    "void": "()",
    "list": "list",
    "rotation": "quaternion",
    "null": "nil",
    "key": "uuid",
    "string": "string",
    "vector": "vector",
}

_INTEGER = SimpleType("integer")
_NUMBER = SimpleType("number")
_UUID = SimpleType("uuid")
_STRING = SimpleType("string")
_BOOLEAN = SimpleType("boolean")
_NUMERIC = SimpleType("numeric")
_NO_VALUE = SimpleType("()")


class RemapMode(StrEnum):
    """Argument widening policy."""

    STRICT = "strict"
    LOOSE = "loose"


def remap_source_type(type_name: str | None) -> SimpleType:
    if type_name is None or type_name not in SOURCE_TYPE_TABLE:
        raise UnknownSourceTypeError(type_name)
    return SimpleType(SOURCE_TYPE_TABLE[type_name])


def remap_arg_types(type_name: str | None, mode: RemapMode) -> tuple[BaseType, ...]:
    target = remap_source_type(type_name)
    if target == _INTEGER:
        types: tuple[BaseType, ...] = (_INTEGER, _NUMBER)
    elif target == _UUID:
        types = (_UUID, _STRING)
    else:
        types = (target,)

    if mode is RemapMode.LOOSE and types in ((_NUMBER,), (_BOOLEAN,)):
        return (_NUMERIC,)
    return types


def remap_return_types(type_name: str | None) -> tuple[BaseType, ...]:
    """Return types never widen; a missing return type means no value."""
    if type_name is None:
        return (_NO_VALUE,)
    target = remap_source_type(type_name)
    return (_NUMBER,) if target == _INTEGER else (target,)


def remap_const_type(type_name: str | None) -> BaseType:
    target = remap_source_type(type_name)
    return _NUMBER if target == _INTEGER else target


def remap_arguments(args: Sequence[ArgDef], mode: RemapMode) -> tuple[FuncArg, ...]:
    return tuple(
        FuncArg(name=arg.name, desc=arg.desc, types=remap_arg_types(arg.type, mode))
        for arg in args
    )


def remap_function(func: CatalogueFunc, mode: RemapMode) -> FuncDef:
    signature = FuncSignature(
        args=remap_arguments(func.args, mode),
        results=(FuncResult(name="", desc="", types=remap_return_types(func.result)),),
    )
    return FuncDef(
        name=func.name.removeprefix(LL_PREFIX),
        desc=func.desc,
        link=func.link,
        signatures=(signature,),
        energy=func.energy,
        sleep=func.sleep,
        must_use=func.must_use,
        private=func.private,
        deprecated=func.deprecated,
        god_mode=func.god_mode,
        linden_experience=func.linden_experience,
    )


def remap_constant(const: CatalogueConst) -> ConstDef:
    return ConstDef(
        name=const.name,
        desc=const.desc,
        type=remap_const_type(const.type),
        value=const.value,
        value_raw=const.value_raw,
        link=const.link,
    )


def remap_event(event: CatalogueEvent, mode: RemapMode) -> EventDef:
    return EventDef(
        name=event.name,
        desc=event.desc,
        link=event.link,
        args=remap_arguments(event.args, mode),
    )


def remap(
    catalogue: Catalogue,
    builtins: Builtins | None = None,
    patches: Sequence[Patch] = (),
    *,
    mode: RemapMode = RemapMode.STRICT,
) -> TypeSystemDocument:
    """Build the type-system document.

    Later sources win on name conflicts: catalogue entries, then built-in
    functions and tables, then `patches` applied in list order.
    """
    resolved = builtins if builtins is not None else default_builtins()

    ll_props: dict[str, TableProp] = {}
    for func in catalogue.functions.values():
        remapped = remap_function(func, mode)
        ll_props[remapped.name] = remapped

    props: dict[str, TableProp] = {LL_TABLE_NAME: TableDef(name=LL_TABLE_NAME, props=ll_props)}
    for name in sorted(catalogue.constants):
        props[name] = remap_constant(catalogue.constants[name])
    props.update(resolved.functions)
    props.update(resolved.tables)

    events: dict[str, EventDef] = {}
    for name in sorted(catalogue.events):
        if name.startswith(SKIPPED_EVENT_PREFIX):
            continue
        events[name] = remap_event(catalogue.events[name], mode)

    document = TypeSystemDocument(
        global_table=TableDef(name=GLOBAL_TABLE_NAME, props=props),
        types=dict(resolved.types),
        classes=dict(resolved.classes),
        events=events,
    )
    logger.debug(
        "Remapped %d functions, %d constants and %d events (%s mode)",
        len(ll_props),
        len(catalogue.constants),
        len(events),
        mode,
    )

    if not patches:
        return document
    return document_from_data(apply_patches(document_to_data(document), patches))
