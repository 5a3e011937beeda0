"""Hand-authored library tables, classes and types merged into every document."""

from __future__ import annotations

from dataclasses import dataclass, field

from sluatypes.slua.builders import (
    TypeSpec,
    arg,
    const,
    custom,
    func,
    literal,
    opt_arg,
    sig,
    var_arg,
)
from sluatypes.slua.types import (
    ClassDef,
    ConstDef,
    FuncArg,
    FuncDef,
    FuncSignature,
    SimpleType,
    TableDef,
    TableType,
    TypeAlias,
)

LUAU_LIBRARY_URL = "https://luau.org/library#{section}-library"

_JSON_VALUE_TYPES = ("string", "number", "integer", "vector", "uuid", "quaternion", "boolean", "{}", "nil")
_INT_OR_NUMBER = ("integer", "number")


@dataclass(frozen=True, slots=True)
class Builtins:
    """Entries that never come from the catalogue."""

    functions: dict[str, FuncDef] = field(default_factory=dict)
    tables: dict[str, TableDef] = field(default_factory=dict)
    classes: dict[str, ClassDef] = field(default_factory=dict)
    types: dict[str, TypeAlias] = field(default_factory=dict)


def default_builtins() -> Builtins:
    return Builtins(
        functions=_global_functions(),
        tables={
            "bit32": _bit32(),
            "lljson": _lljson(),
            "llbase64": _llbase64(),
            "vector": _vector(),
        },
        classes=_classes(),
        types=_types(),
    )


def _table(name: str, *entries: ConstDef | FuncDef) -> TableDef:
    return TableDef(name=name, props={entry.name: entry for entry in entries})


def _library_func(section: str, name: str, desc: str, signatures: list[FuncSignature]) -> FuncDef:
    return func(name, desc, signatures, link=LUAU_LIBRARY_URL.format(section=section))


def _global_functions() -> dict[str, FuncDef]:
    caveat = (
        "\n\nInvalid strings will return `nil`\n\n#### Caveat\n\n"
        "Due to an old error from lsl strings that match upto the closing `>` are interpreted as valid\n\n"
    )
    entries = [
        func(
            "integer",
            "Creates an integer value from argument",
            [sig("integer", [arg("value", "value to be convetered to an integer", ["string", "number"])])],
        ),
        func(
            "uuid",
            "Creates a uuid from a string argument",
            [sig("uuid", [arg("str", "string to create uuid from", "string")])],
        ),
        func(
            "toquaternion",
            "Creates a quaternion from a string argument in format `<1,1,1,1>`"
            + caveat
            + "So `<1,1,1,1` and `<1,1,1,1spoon` are both cast to `<1,1,1,1>`\n\n"
            "When testing if a string is a quaternion or a vector, you should test with `toquaternion` first.",
            [sig(["quaternion", "nil"], [arg("str", "string to create quaternion from", "string")])],
        ),
        func(
            "tovector",
            "Creates a vector from a string argument in format `<1,1,1>`"
            + caveat
            + "So `<1,1,1`, `<1,1,1,1` and `<1,1,1spoon` are all cast to `<1,1,1>`\n\n"
            "When testing if a string is a quaternion or a vector, you should test with `toquaternion` first.",
            [sig(["vector", "nil"], [arg("str", "string to create vector from", "string")])],
        ),
        func(
            "quaternion",
            "Creates a quaternion from x,y,z,s",
            [
                sig(
                    "quaternion",
                    [arg(axis, f"{axis} value of quaternion", "number") for axis in ("x", "y", "z", "s")],
                )
            ],
        ),
    ]
    return {entry.name: entry for entry in entries}


def _bit_pair(
    args: list[tuple[str, str, str]],
    *,
    variadic: bool = False,
    tail_optional: bool = False,
) -> list[FuncSignature]:
    """Integer overload followed by the integer-or-number overload."""

    def build(spec: TypeSpec, integer_only: bool) -> list[FuncArg]:
        out: list[FuncArg] = []
        for index, (name, int_desc, num_desc) in enumerate(args):
            desc = int_desc if integer_only else num_desc
            optional = tail_optional and index == len(args) - 1
            out.append(arg(name, desc, spec, variadic=variadic, optional=optional))
        return out

    return [sig("integer", build("integer", True)), sig("number", build(_INT_OR_NUMBER, False))]


def _bit32() -> TableDef:
    def bit(name: str, desc: str, signatures: list[FuncSignature]) -> FuncDef:
        return _library_func("bit32", name, desc, signatures)

    shift_args = [("n", "", ""), ("i", "", "")]
    return _table(
        "bit32",
        bit(
            "arshift",
            "Shifts `n` by `i` bits to the right (if `i` is negative, a left shift is performed instead).\n"
            "The most significant bit of `n` is propagated during the shift.\n"
            "When `i` is larger than `31`, returns an integer with all bits set to the sign bit of `n`.\n"
            "When `i` is smaller than `-31`, `0` is returned",
            _bit_pair([("n", "number to be shifted", "number to be shifted"), ("i", "bits to shift by", "bits to shift by")]),
        ),
        bit(
            "band",
            "Performs a bitwise and of all input numbers and returns the result.\n"
            "If the function is called with no arguments, an integer with all bits set to `1` is returned.",
            _bit_pair([("args", "integers to and together", "numbers to and together")], variadic=True),
        ),
        bit(
            "bnot",
            "Returns a bitwise negation of the input number.",
            _bit_pair([("n", "integers to not", "number to not")]),
        ),
        bit(
            "bor",
            "Performs a bitwise or of all input numbers and returns the result.\n"
            "If the function is called with no arguments, `0` is returned.",
            _bit_pair([("args", "integers to or together", "numbers to or together")], variadic=True),
        ),
        bit(
            "bxor",
            "Performs a bitwise xor (exclusive or) of all input numbers and returns the result.\n"
            "If the function is called with no arguments, `0` is returned.",
            _bit_pair([("args", "integers to xor together", "numbers to xor together")], variadic=True),
        ),
        bit(
            "btest",
            "Perform a bitwise and of all input numbers, and return `true` if the result is not `0`.\n"
            "If the function is called with no arguments, `true` is returned.",
            [sig("boolean", [var_arg("args", "values to test together", _INT_OR_NUMBER)])],
        ),
        bit(
            "extract",
            "Extracts bits of `n` at position `f` with `a` width of `w`, and returns the resulting integer.\n"
            "`w` defaults to 1, so a two-argument version of extract returns the bit value at position `f`.\n"
            "Bits are indexed starting at `0`.\n"
            "Errors if `f` and `f+w-1` are not between `0` and `31`.",
            _bit_pair([("n", "", ""), ("f", "", ""), ("w", "", "")]),
        ),
        bit(
            "lrotate",
            "Rotates `n` to the left by `i` bits (if `i` is negative, a right rotate is performed instead)\n"
            "The bits that are shifted past the bit width are shifted back from the right.",
            _bit_pair(shift_args),
        ),
        bit(
            "lshift",
            "Shifts `n` to the left by `i` bits (if `i` is negative, a right shift is performed instead).\n"
            "When `i` is outside of `[-31..31]` range, returns `0`.",
            _bit_pair(shift_args),
        ),
        bit(
            "replace",
            "Replaces bits of `n` at position `f` and width `w` with `r`, and returns the resulting integer.\n"
            "`w` defaults to `1`, so a three-argument version of replace changes one bit at position `f` "
            "to `r` (which should be `0` or `1`) and returns the result.\n"
            "Bits are indexed starting at `0`.\n"
            "Errors if `f` and `f+w-1` are not between `0` and `31`.",
            _bit_pair([("n", "", ""), ("r", "", ""), ("f", "", ""), ("w", "", "")], tail_optional=True),
        ),
        bit(
            "rrotate",
            "Rotates `n` to the right by `i` bits (if `i` is negative, a left rotate is performed instead)\n"
            "The bits that are shifted past the bit width are shifted back from the left.",
            _bit_pair(shift_args),
        ),
        bit(
            "rshift",
            "Shifts `n` to the right by `i` bits (if `i` is negative, a left shift is performed instead).\n"
            "When `i` is outside of `[-31..31]` range, returns `0`.",
            _bit_pair(shift_args),
        ),
        bit(
            "countlz",
            "Returns the number of consecutive zero bits in the 32-bit representation of `n` starting from "
            "the left-most (most significant) bit.\nReturns `32` if `n` is `0`.",
            _bit_pair([("n", "", "")]),
        ),
        bit(
            "countrz",
            "Returns the number of consecutive zero bits in the 32-bit representation of `n` starting from "
            "the right-most (least significant) bit.\nReturns `32` if `n` is `0`.",
            _bit_pair([("n", "", "")]),
        ),
        bit(
            "byteswap",
            "Returns n with the order of the bytes swapped.",
            _bit_pair([("n", "", "")]),
        ),
    )


def _lljson() -> TableDef:
    return _table(
        "lljson",
        const("_NAME", "Name of the lljson table", literal('"lljson"')),
        const("_VERSION", "Version of the lljson library (based on the lua-cjson library)", "string"),
        const("array_mt", "Metatable for declaring table as an array for json encode", "{}"),
        const("empty_array_mt", "Metatable for declaring table as an empty array for json encode", "{}"),
        const("empty_array", "A constant to pass for an empty array to json encode", custom("lljson_constant")),
        const("null", "A constant to pass for null to json encode", custom("lljson_constant")),
        func(
            "encode",
            "encode lua value as json",
            [sig("string", [arg("value", "value to encode", _JSON_VALUE_TYPES)])],
        ),
        func(
            "decode",
            "decode json string to lua value",
            [sig(_JSON_VALUE_TYPES, [arg("json", "json string to decode", "string")])],
        ),
    )


def _llbase64() -> TableDef:
    source = arg("base64", "base64 string to decode", "string")
    return _table(
        "llbase64",
        func(
            "encode",
            "encode a string or buffer to base64",
            [sig("string", [arg("value", "value to encode", ["string", "buffer"])])],
        ),
        func(
            "decode",
            "decode a base64 string, to a buffer or string",
            [
                sig("string", [source]),
                sig("buffer", [source, arg("asBuffer", "", literal("true"))]),
                sig("string", [source, arg("asBuffer", "", literal("false"))]),
            ],
        ),
    )


def _vector() -> TableDef:
    def vec(name: str, desc: str, signatures: list[FuncSignature]) -> FuncDef:
        return _library_func("vector", name, desc, signatures)

    one = [arg("vec", "", "vector")]
    two = [arg("vec1", "", "vector"), arg("vec2", "", "vector")]
    return _table(
        "vector",
        const("zero", "A Zero vector <0,0,0>", "vector"),
        const("one", "A one vector <1,1,1>", "vector"),
        vec(
            "create",
            "Creates a new vector with the given component values",
            [sig("vector", [arg(axis, f"{axis} value of vector", ["number", "integer"]) for axis in ("x", "y", "z")])],
        ),
        vec("magnitude", "Calculates the magnitude of a given vector.", [sig("number", one)]),
        vec("normalize", "Computes the normalized version (unit vector) of a given vector.", [sig("vector", one)]),
        vec("cross", "Computes the cross product of two vectors.", [sig("vector", two)]),
        vec("dot", "Computes the dot product of two vectors.", [sig("number", two)]),
        vec(
            "angle",
            "Computes the angle between two vectors in radians. "
            "The axis, if specified, is used to determine the sign of the angle.",
            [sig("number", [*two, opt_arg("axis", "", "vector")])],
        ),
        vec("floor", "Applies `math.floor` to every component of the input vector.", [sig("vector", one)]),
        vec("ceil", "Applies `math.ceil` to every component of the input vector.", [sig("vector", one)]),
        vec("abs", "Applies `math.abs` to every component of the input vector.", [sig("vector", one)]),
        vec("sign", "Applies `math.sign` to every component of the input vector.", [sig("vector", one)]),
        vec(
            "clamp",
            "Applies `math.clamp` to every component of the input vector.",
            [sig("vector", [*one, arg("min", "", "vector"), arg("max", "", "vector")])],
        ),
        vec(
            "max",
            "Applies `math.max` to the corresponding components of the input vectors.",
            [sig("vector", [var_arg("vecs", "", "vector")])],
        ),
        vec(
            "min",
            "Applies `math.min` to the corresponding components of the input vectors.",
            [sig("vector", [var_arg("vecs", "", "vector")])],
        ),
    )


def _method(name: str, desc: str, signatures: list[FuncSignature]) -> FuncDef:
    return func(name, desc, signatures, takes_self=True)


def _classes() -> dict[str, ClassDef]:
    self_arg = arg("self", "", "self")

    def binary(returns: TypeSpec, other: TypeSpec) -> FuncSignature:
        return sig(returns, [self_arg, arg("other", "", other)])

    def unary(returns: TypeSpec) -> FuncSignature:
        return sig(returns, [self_arg])

    def props(owner: str, axes: str) -> dict[str, ConstDef]:
        return {axis: const(axis, f"{axis} property of {owner}", "number") for axis in axes}

    by_any = [binary("vector", "vector"), binary("vector", "quaternion"), binary("vector", "number")]
    int_or_number = [binary("integer", "integer"), binary("number", "number")]
    compare = [binary("integer", "integer")]

    classes = [
        ClassDef(
            name="uuid",
            props={"istruthy": const("istruthy", "property to check if uuid is valid", "boolean")},
            funcs={"__tostring": _method("__tostring", "converts uuid to a string", [unary("string")])},
        ),
        ClassDef(
            name="quaternion",
            props=props("quaternion", "xyzs"),
            funcs={
                "__mul": _method(
                    "__mul",
                    "multiply vector/quaternion by quaternion",
                    [binary("vector", "vector"), binary("quaternion", "quaternion")],
                )
            },
        ),
        ClassDef(
            name="vector",
            props=props("vector", "xyz"),
            funcs={
                method.name: method
                for method in (
                    _method("__mul", "multiply vector by number, vector, or quaternion", by_any),
                    _method("__div", "divide vector by number, vector, or quaternion", by_any),
                    _method("__idiv", "floor divide vector by number, vector, or quaternion", by_any),
                    _method("__add", "add two vectors", [binary("vector", "vector")]),
                    _method("__sub", "subtract vector from vector", [binary("vector", "vector")]),
                    _method("__unm", "negate a vector", [unary("vector")]),
                )
            },
        ),
        ClassDef(
            name="integer",
            funcs={
                method.name: method
                for method in (
                    _method("__add", "Meta function to allow for '+' operation", int_or_number),
                    _method("__sub", "Meta function to allow for '-' operation", int_or_number),
                    _method("__mul", "Meta function to allow for '*' operation", int_or_number),
                    _method(
                        "__div",
                        "Meta function to allow for '/' operation",
                        [binary("number", "integer"), binary("number", "number")],
                    ),
                    _method("__unm", "Meta function to allow for '-' negation", [unary("integer")]),
                    _method("__mod", "Meta function to allow for '%' operation", int_or_number),
                    _method("__pow", "Meta function to allow for '^' operation", int_or_number),
                    _method("__idiv", "Meta function to allow for '//' operation", int_or_number),
                    _method("__eq", "Meta function to allow for '==' operation", compare),
                    _method("__lt", "Meta function to allow for '<' and '>' operation", compare),
                    _method("__le", "Meta function to allow for '<=' and '>=' operation", compare),
                )
            },
        ),
    ]
    return {cls.name: cls for cls in classes}


def _types() -> dict[str, TypeAlias]:
    aliases = [
        TypeAlias(
            name="numeric",
            desc="numeric type to genericize for functions that accept any numric type",
            types=(SimpleType("number"), SimpleType("boolean"), SimpleType("integer")),
        ),
        TypeAlias(
            name="list",
            desc="a table type to try and restrict LL functions that only accept flat lists",
            types=(
                TableType(
                    tuple(
                        SimpleType(name)
                        for name in ("string", "number", "integer", "vector", "uuid", "quaternion", "boolean")
                    )
                ),
            ),
        ),
        TypeAlias(
            name="lljson_constant",
            desc="A set of constants for changing json encode output",
            types=(SimpleType("number"),),
        ),
    ]
    return {alias.name: alias for alias in aliases}
