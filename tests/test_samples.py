import re

from sluatypes.catalogue import Catalogue
from sluatypes.slua import (
    CodeSample,
    FuncDef,
    FunctionType,
    TableDef,
    TypeSystemDocument,
    default_builtins,
    preferred_sample,
    qualified_name,
    remap,
    sample_for_signature,
)
from sluatypes.slua.builders import arg, custom, func, sig
from tests._shared_cases import say_catalogue


def _document() -> TypeSystemDocument:
    return remap(Catalogue())


def _library(table: str, name: str) -> FuncDef:
    entry = default_builtins().tables[table].props[name]
    assert isinstance(entry, FuncDef)
    return entry


def test_vector_create_compact_sample() -> None:
    create = _library("vector", "create")

    text = sample_for_signature(["vector"], create, 0, _document())

    assert text == "vector.create(3.14, 3.14, 3.14)"


def test_vector_create_verbose_sample() -> None:
    create = _library("vector", "create")

    text = sample_for_signature(["vector"], create, 0, _document(), verbose=True)

    assert text == "vector.create(\n  3.14,\n  3.14,\n  3.14\n)"


def test_more_than_three_arguments_switches_to_verbose() -> None:
    quaternion = default_builtins().functions["quaternion"]

    text = sample_for_signature([], quaternion, 0, _document())

    assert text == "quaternion(\n  3.14,\n  3.14,\n  3.14,\n  3.14\n)"


def test_preferred_sample_prefers_more_arguments() -> None:
    decode = _library("llbase64", "decode")

    assert preferred_sample(["llbase64"], decode, _document()) == CodeSample(
        text="llbase64.decode('test', true)", signature_index=1
    )


def test_preferred_sample_avoids_integer_wrappers() -> None:
    band = _library("bit32", "band")

    assert preferred_sample(["bit32"], band, _document()) == CodeSample(
        text="bit32.band(3.14)", signature_index=1
    )


def test_integer_literal_is_seeded_and_repeatable() -> None:
    document = remap(say_catalogue())
    ll = document.global_table.props["ll"]
    assert isinstance(ll, TableDef)
    say = ll.props["Say"]
    assert isinstance(say, FuncDef)

    first = preferred_sample(["ll"], say, document)
    second = preferred_sample(["ll"], say, remap(say_catalogue()))

    assert first == second
    assert first.signature_index == 0
    assert re.fullmatch(r"ll\.Say\(integer\((\d|1[0-5])\), 'test'\)", first.text)


def test_method_sample_uses_colon_and_drops_self() -> None:
    add = default_builtins().classes["vector"].funcs["__add"]

    assert qualified_name(["vector"], add) == "vector:__add"
    assert sample_for_signature(["vector"], add, 0, _document()) == "vector:__add(vector(1,1,1))"


def test_empty_prefix_renders_bare_name() -> None:
    integer = default_builtins().functions["integer"]

    assert qualified_name([], integer) == "integer"
    assert qualified_name(("a", "b"), integer) == "a.b.integer"


def test_identifier_literal_depends_on_verbosity() -> None:
    document = _document()
    target = func("Probe", "", [sig("()", [arg("id", "", ["uuid", "string"])])])

    assert sample_for_signature(["ll"], target, 0, document) == "ll.Probe(uuid(<key>))"
    assert sample_for_signature(["ll"], target, 0, document, verbose=True) == (
        "ll.Probe(\n  uuid('677bf9a4-bba5-4cf9-a4ad-4802a0f7ef46')\n)"
    )


def test_union_offset_selects_member_with_fallback() -> None:
    document = _document()
    target = func("Pick", "", [sig("()", [arg("a", "", ["string", "vector"]), arg("b", "", "boolean")])])

    assert sample_for_signature([], target, 0, document, offset=1) == "Pick(vector(1,1,1), true)"
    assert sample_for_signature([], target, 0, document, offset=3) == "Pick('test', true)"


def test_function_argument_gets_stub() -> None:
    callback = FunctionType(sig("()", [arg("value", "", "string")]))
    target = func("run", "", [sig("()", [arg("callback", "", callback)])])

    text = sample_for_signature([], target, 0, _document())

    assert text == "local callback = function(value: string) : ()\n  -- Your code\nend\n\nrun(callback)"


def test_custom_type_uses_first_alias_member() -> None:
    document = _document()
    target = func("flag", "", [sig("()", [arg("c", "", custom("lljson_constant")), arg("d", "", custom("mystery"))])])

    assert sample_for_signature([], target, 0, document) == "flag(3.14, mystery)"
