import json
import logging

import pytest

from sluatypes.render import (
    OutputKind,
    build_luau_docs,
    build_vsc_snippets,
    output_kind_names,
    render,
    render_luau_defs,
    resolve_output_kind,
)
from sluatypes.render.vsc_snippets import simplify_name, snake_case
from sluatypes.slua import Builtins, TypeSystemDocument, default_builtins, remap
from sluatypes.slua.builders import arg, func, sig
from tests._shared_cases import say_catalogue


def _bare_document(builtins: Builtins | None = None) -> TypeSystemDocument:
    return remap(say_catalogue(), builtins=builtins if builtins is not None else Builtins())


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("slua-defs", OutputKind.SLUA_DEFS),
        ("defs", OutputKind.SLUA_DEFS),
        ("luau-lsp-defs", OutputKind.SLUA_DEFS),
        ("docs", OutputKind.SLUA_DOCS),
        ("luau-lsp-docs", OutputKind.SLUA_DOCS),
        (" LSL-JSON ", OutputKind.LSL_JSON),
        ("vsc-snippets", OutputKind.VSC_SNIPPETS),
        ("selene", None),
    ],
)
def test_resolve_output_kind(name: str, expected: OutputKind | None) -> None:
    assert resolve_output_kind(name) is expected


def test_output_kind_names_include_aliases() -> None:
    names = output_kind_names()

    assert names == tuple(sorted(names))
    assert {"defs", "docs", "slua-json", "lsl-json"} <= set(names)


def test_unknown_kind_renders_nothing(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="sluatypes.render")

    output = render("markdown", catalogue=say_catalogue(), document=_bare_document())

    assert output is None
    assert "Unknown output kind 'markdown'" in caplog.text


def test_alias_and_canonical_kind_render_identically() -> None:
    document = _bare_document()

    assert render("defs", catalogue=say_catalogue(), document=document) == render_luau_defs(document)
    assert render(OutputKind.SLUA_DEFS, catalogue=say_catalogue(), document=document) == render_luau_defs(document)


def test_json_dumps() -> None:
    catalogue = say_catalogue()
    document = _bare_document()

    lsl = json.loads(render("lsl-json", catalogue=catalogue, document=document) or "")
    slua = json.loads(render("slua-json", catalogue=catalogue, document=document) or "")

    assert lsl["functions"]["llSay"]["def"] == "func"
    assert list(slua) == ["global", "types", "classes", "events"]
    assert list(slua["global"]["props"]["ll"]["props"]) == ["Say"]


def test_defs_globals_and_ll_table() -> None:
    text = render_luau_defs(_bare_document())

    assert text.startswith("\n----------------------------------\n---------- LSL LUAU DEFS ---------\n")
    assert "-- Global Table: ll\n" in text
    assert (
        "declare ll: {\n"
        "  Say: (channel: integer|number, msg: string) -> (), -- Says Text on Channel.\n"
        "}\n"
    ) in text
    assert "declare PI : number -- The number of radians in a semi-circle.\n" in text


def test_defs_function_forms() -> None:
    builtins = Builtins(
        functions={
            "single": func("single", "one\nline", [sig("string", [arg("a", "", "string")])]),
            "pick": func("pick", "", [sig("string", [arg("a", "", "string")]), sig("number")]),
        }
    )

    text = render_luau_defs(_bare_document(builtins))

    assert "declare function single(a: string): string -- one line\n" in text
    assert "declare pick: ((a: string) -> string) & (() -> number)\n" in text


def test_defs_classes_and_aliases() -> None:
    defaults = default_builtins()
    builtins = Builtins(classes={"uuid": defaults.classes["uuid"]}, types=defaults.types)

    text = render_luau_defs(_bare_document(builtins))

    assert "type numeric = number|boolean|integer\n" in text
    assert "type list = {string|number|integer|vector|uuid|quaternion|boolean}\n" in text
    assert (
        "declare class uuid\n"
        "  istruthy : boolean -- property to check if uuid is valid\n"
        "  function __tostring(self): string -- converts uuid to a string\n"
        "end\n"
    ) in text


def test_docs_entries() -> None:
    docs = build_luau_docs(remap(say_catalogue()))

    say = docs["@roblox/global/ll.Say"]
    assert say["documentation"] == "Says Text on Channel."
    assert say["learn_more_link"] == "https://wiki.secondlife.com/wiki/LlSay"
    assert say["code_sample"].startswith("ll.Say(integer(")

    assert docs["@roblox/global/PI"] == {
        "documentation": "3.14159 : The number of radians in a semi-circle.",
        "learn_more_link": "https://wiki.secondlife.com/wiki/PI",
        "code_sample": "PI",
    }
    assert docs["@roblox/global/lljson.null"]["documentation"].startswith("nil : ")
    assert docs["@roblox/global/vector"] == {"documentation": "Global table vector"}
    assert "learn_more_link" not in docs["@roblox/global/tovector"]


def test_curated_docs_win() -> None:
    docs = build_luau_docs(remap(say_catalogue()))

    assert docs["@roblox/global/integer"]["code_sample"] == "integer(123)"
    assert docs["@roblox/global/ll"]["code_sample"] == "ll.Foo(...)"
    assert not any(key.startswith("@roblox/global/__") for key in docs)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("NumberOfTouches", "touches"),
        ("InventoryItemID", "id"),
        ("HTTPRequestID", "id"),
        ("Channel", "channel"),
        ("StartParameter", "parameter"),
    ],
)
def test_snippet_argument_names(name: str, expected: str) -> None:
    assert simplify_name(snake_case(name)) == expected


def test_snippets_cover_events_only() -> None:
    snippets = build_vsc_snippets(remap(say_catalogue()))

    assert snippets == {
        "touch_start": {
            "scope": "luau",
            "prefix": "touch_start",
            "body": ["function touch_start(touches: integer | number)"],
            "description": "Triggered by the start of agent clicking on task.",
        }
    }
