import logging
from pathlib import Path

import pytest

from sluatypes.catalogue import (
    LSL_TYPE_DESCRIPTIONS,
    catalogue_from_data,
    catalogue_to_data,
    extract_catalogue,
    extract_catalogue_yaml,
    has_effect,
    load_catalogue,
    parse_definitions_yaml,
)
from sluatypes.catalogue.values import cast_value, clean_tooltip, parse_js_float, parse_js_int
from sluatypes.diagnostics import (
    CATALOGUE_CONSTANT_CAST_FAILED,
    CATALOGUE_MALFORMED_ARGUMENT,
    CATALOGUE_UNKNOWN_CONSTANT_TYPE,
)
from sluatypes.errors import CatalogueFormatError, UnsupportedFormatError
from sluatypes.llsd import parse_keywords_xml
from sluatypes.patch import make_patch
from tests._shared_cases import (
    EMPTY_FIELDS_XML,
    KEYWORDS_XML,
    KEYWORDS_YAML,
    MALFORMED_ARGUMENT_XML,
    write_case,
)


def test_extract_function_fields_from_xml() -> None:
    result = extract_catalogue(parse_keywords_xml(KEYWORDS_XML))
    say = result.catalogue.functions["llSay"]

    assert [(arg.name, arg.type) for arg in say.args] == [("Channel", "integer"), ("Text", "string")]
    assert say.result == "void"
    assert say.energy == 10
    assert say.sleep == 0
    assert say.desc == "Says Text on Channel.\nThis chat method has a range of 20m radius."
    assert say.link == "https://wiki.secondlife.com/wiki/LlSay"
    assert say.must_use is False
    assert result.diagnostics == ()


def test_extract_function_defaults_from_xml() -> None:
    get_key = extract_catalogue(parse_keywords_xml(KEYWORDS_XML)).catalogue.functions["llGetKey"]

    assert get_key.args == ()
    assert get_key.result == "key"
    assert get_key.energy == 10
    assert get_key.sleep == 0
    assert get_key.must_use is True


def test_present_but_empty_xml_fields_keep_their_text() -> None:
    blank = extract_catalogue(parse_keywords_xml(EMPTY_FIELDS_XML)).catalogue.functions["llBlank"]

    assert blank.result == ""
    assert blank.energy is None
    assert blank.sleep == 0


def test_xml_argument_tooltip_is_not_trimmed() -> None:
    blank = extract_catalogue(parse_keywords_xml(EMPTY_FIELDS_XML)).catalogue.functions["llBlank"]

    assert [(arg.name, arg.desc) for arg in blank.args] == [("Value", " Padded tooltip. ")]


def test_extract_constant_casts_value() -> None:
    constants = extract_catalogue(parse_keywords_xml(KEYWORDS_XML)).catalogue.constants

    assert constants["PI"].value == 3.14159
    assert constants["PI"].value_raw == "3.14159"
    assert constants["PI"].type == "float"
    assert constants["PI"].link == "https://wiki.secondlife.com/wiki/PI"
    assert constants["DEBUG_CHANNEL"].value == 0x7FFFFFFF
    assert constants["NULL_KEY"].value == "00000000-0000-0000-0000-000000000000"
    assert "default" not in constants


def test_extract_events_and_types_from_xml() -> None:
    catalogue = extract_catalogue(parse_keywords_xml(KEYWORDS_XML)).catalogue

    touch = catalogue.events["touch_start"]
    assert [(arg.name, arg.type, arg.desc) for arg in touch.args] == [
        ("NumberOfTouches", "integer", "Number of agents touching.")
    ]
    assert touch.link == "https://wiki.secondlife.com/wiki/Touch_start"
    assert "state_entry" in catalogue.events
    assert catalogue.types["float"].desc == "32 bit floating point value."


def test_extraction_is_idempotent_over_one_tree() -> None:
    root = parse_keywords_xml(KEYWORDS_XML)

    first = extract_catalogue(root)
    second = extract_catalogue(root)

    assert first == second
    assert catalogue_to_data(first.catalogue) == catalogue_to_data(second.catalogue)


def test_malformed_argument_map_is_skipped_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="sluatypes"):
        result = extract_catalogue(parse_keywords_xml(MALFORMED_ARGUMENT_XML))

    set_text = result.catalogue.functions["llSetText"]
    assert [arg.name for arg in set_text.args] == ["Opacity"]
    assert [d.code for d in result.diagnostics] == [CATALOGUE_MALFORMED_ARGUMENT.code]
    assert result.diagnostics[0].subject == "llSetText"
    assert result.diagnostics[0].severity == "warning"
    assert CATALOGUE_MALFORMED_ARGUMENT.code in caplog.text


def test_extract_yaml_functions() -> None:
    result = extract_catalogue_yaml(parse_definitions_yaml(KEYWORDS_YAML))
    functions = result.catalogue.functions

    say = functions["llSay"]
    assert [(arg.name, arg.type) for arg in say.args] == [("Channel", "integer"), ("Text", "string")]
    assert say.energy == 10.0
    assert say.result == "void"

    god = functions["llGodLikeRezObject"]
    assert god.god_mode is True
    assert god.private is True
    assert god.link == ""
    assert [arg.type for arg in god.args] == ["key"]


def test_extract_yaml_skips_argument_without_definition_map() -> None:
    data = {
        "functions": {
            "llSay": {
                "arguments": [{"channel": "integer"}, {"msg": {"type": "string", "tooltip": "Message."}}],
                "return": "void",
            }
        }
    }

    result = extract_catalogue_yaml(data)

    assert [arg.name for arg in result.catalogue.functions["llSay"].args] == ["msg"]
    assert [d.code for d in result.diagnostics] == [CATALOGUE_MALFORMED_ARGUMENT.code]
    assert result.diagnostics[0].subject == "llSay"


def test_extract_yaml_keeps_argument_with_empty_definition() -> None:
    result = extract_catalogue_yaml({"events": {"timer": {"arguments": [{"tick": None}]}}})

    assert [(arg.name, arg.type) for arg in result.catalogue.events["timer"].args] == [("tick", None)]
    assert result.diagnostics == ()


def test_extract_yaml_constants_and_warnings() -> None:
    result = extract_catalogue_yaml(parse_definitions_yaml(KEYWORDS_YAML))
    constants = result.catalogue.constants

    assert constants["PI"].value == 3.14159
    assert constants["PI"].value_raw == "3.14159"
    assert constants["STATUS_PHYSICS"].value == 1
    assert constants["OLD_FLAG"].value is None
    assert constants["OLD_FLAG"].deprecated is True

    codes = [(d.subject, d.code) for d in result.diagnostics]
    assert ("llBroken", CATALOGUE_MALFORMED_ARGUMENT.code) in codes
    assert ("OLD_FLAG", CATALOGUE_CONSTANT_CAST_FAILED.code) in codes
    assert result.catalogue.functions["llBroken"].args == ()


def test_extract_yaml_supplies_fixed_type_descriptions() -> None:
    catalogue = extract_catalogue_yaml(parse_definitions_yaml(KEYWORDS_YAML)).catalogue

    assert set(catalogue.types) == set(LSL_TYPE_DESCRIPTIONS)
    assert catalogue.types["vector"].desc.startswith("A vector is a data type")


def test_parse_definitions_yaml_rejects_non_mapping() -> None:
    with pytest.raises(CatalogueFormatError, match="mapping"):
        parse_definitions_yaml("- just\n- a list\n")


@pytest.mark.parametrize(
    "data",
    [
        {"functions": {"llSay": "oops"}},
        {"constants": {"PI": [3.14159]}},
        {"events": {"touch_start": 1}},
    ],
)
def test_extract_yaml_rejects_non_mapping_entry(data: dict[str, object]) -> None:
    with pytest.raises(CatalogueFormatError, match=r"Keywords YAML entry '\w+' in '\w+' must be a mapping"):
        extract_catalogue_yaml(data)


def test_parse_definitions_yaml_rejects_malformed_yaml() -> None:
    with pytest.raises(CatalogueFormatError, match="Malformed keywords YAML"):
        parse_definitions_yaml("functions: [unclosed\n")


def test_load_catalogue_dispatches_on_extension(tmp_path: Path) -> None:
    xml_path = write_case(tmp_path, "keywords_lsl.xml", KEYWORDS_XML)
    yaml_path = write_case(tmp_path, "lsl_definitions.yaml", KEYWORDS_YAML)
    yml_path = write_case(tmp_path, "lsl_definitions.yml", KEYWORDS_YAML)

    assert "llGetKey" in load_catalogue(xml_path).catalogue.functions
    assert "llGodLikeRezObject" in load_catalogue(yaml_path).catalogue.functions
    assert "llGodLikeRezObject" in load_catalogue(yml_path).catalogue.functions


def test_load_catalogue_rejects_unsupported_extension(tmp_path: Path) -> None:
    path = write_case(tmp_path, "keywords.json", "{}")

    with pytest.raises(UnsupportedFormatError, match=r"Unsupported file format: \.json"):
        load_catalogue(path)


def test_load_catalogue_applies_patches(tmp_path: Path) -> None:
    path = write_case(tmp_path, "keywords_lsl.xml", KEYWORDS_XML)

    result = load_catalogue(
        path,
        patches=[make_patch(["functions", "llGetKey", "must_use"], False)],
    )

    assert result.catalogue.functions["llGetKey"].must_use is False
    assert result.catalogue.functions["llSay"].desc.startswith("Says Text")


def test_catalogue_data_round_trip() -> None:
    catalogue = extract_catalogue_yaml(parse_definitions_yaml(KEYWORDS_YAML)).catalogue

    data = catalogue_to_data(catalogue)

    assert data["functions"]["llGodLikeRezObject"]["god-mode"] is True
    assert data["constants"]["PI"]["valueRaw"] == "3.14159"
    assert catalogue_from_data(data) == catalogue


def test_side_effect_heuristic_is_approximate() -> None:
    # Name-pattern heuristic: keywords after position 0 mark side effects.
    assert has_effect("llSay") is True
    assert has_effect("llSetText") is True
    assert has_effect("llGetKey") is False
    assert has_effect("llSleep") is True
    assert has_effect("llGetEnvironment") is False
    assert has_effect("Say") is False
    assert has_effect("llGetKey", {"llGetKey": True}) is True


def test_value_casting_rules() -> None:
    assert parse_js_int("42abc") == 42
    assert parse_js_int("-0x10") == -16
    assert parse_js_int("abc") is None
    assert parse_js_float("1e3x") == 1000.0
    assert parse_js_float(".5") == 0.5
    assert parse_js_float("nope") is None
    assert cast_value("<1,2,3>", "vector") == ("<1,2,3>", None)
    assert cast_value("12", "bogus") == (None, CATALOGUE_UNKNOWN_CONSTANT_TYPE)


def test_clean_tooltip_collapses_wrapped_lines() -> None:
    assert clean_tooltip("  first\n\n               second  ") == "first\nsecond"
    assert clean_tooltip("a\\nb") == "a\nb"
