import copy
from pathlib import Path

import pytest

from sluatypes.errors import PatchError
from sluatypes.patch import (
    IndexSegment,
    KeySegment,
    apply_patch,
    apply_patches,
    load_patches,
    make_patch,
    parse_patch,
)


def _document() -> dict:
    return {
        "global": {
            "def": "table",
            "name": "SLua",
            "props": {
                "foo": "baz",
                "other": {"nested": [1, 2, 3]},
            },
        },
        "types": {},
    }


def test_patch_round_trip_changes_only_target_field() -> None:
    original = _document()

    patched = apply_patches(original, [parse_patch({"key": ["global", "props", "foo"], "value": "bar"})])

    expected = copy.deepcopy(original)
    expected["global"]["props"]["foo"] = "bar"
    assert patched == expected
    assert original["global"]["props"]["foo"] == "baz"


def test_patch_indexes_into_arrays() -> None:
    data = _document()

    apply_patch(data, make_patch(["global", "props", "other", "nested", 1], 20))

    assert data["global"]["props"]["other"]["nested"] == [1, 20, 3]


def test_patches_apply_in_list_order() -> None:
    patches = [
        make_patch(["global", "props", "foo"], "first"),
        make_patch(["global", "props", "foo"], "second"),
    ]

    assert apply_patches(_document(), patches)["global"]["props"]["foo"] == "second"


def test_terminal_key_may_be_created() -> None:
    patched = apply_patches(_document(), [make_patch(["global", "props", "added"], True)])

    assert patched["global"]["props"]["added"] is True


def test_missing_intermediate_key_fails_and_echoes_patch() -> None:
    patch = make_patch(["global", "missing", "foo"], "bar")

    with pytest.raises(PatchError, match=r'\["global", "missing", "foo"\]'):
        apply_patches(_document(), [patch])


def test_non_indexable_intermediate_fails() -> None:
    patch = make_patch(["global", "props", "foo", "deeper"], 1)

    with pytest.raises(PatchError, match="non indexable"):
        apply_patches(_document(), [patch])


def test_index_segment_on_object_fails() -> None:
    with pytest.raises(PatchError, match="non indexable"):
        apply_patches(_document(), [make_patch(["global", 0], 1)])


def test_terminal_index_out_of_range_fails() -> None:
    with pytest.raises(PatchError, match="out of range"):
        apply_patches(_document(), [make_patch(["global", "props", "other", "nested", 9], 1)])


def test_parse_patch_builds_typed_segments() -> None:
    patch = parse_patch({"key": ["global", "props", 0], "value": None})

    assert patch.path == (KeySegment("global"), KeySegment("props"), IndexSegment(0))
    assert patch.value is None


@pytest.mark.parametrize(
    "record",
    [
        {"key": [], "value": 1},
        {"key": "global", "value": 1},
        {"value": 1},
        {"key": ["a", True], "value": 1},
        {"key": ["a", -1], "value": 1},
        {"key": ["a", 1.5], "value": 1},
        ["a", 1],
    ],
)
def test_parse_patch_rejects_malformed_records(record: object) -> None:
    with pytest.raises(PatchError):
        parse_patch(record)


def test_load_patches_reads_json_file(tmp_path: Path) -> None:
    path = tmp_path / "overrides.json"
    path.write_text('[{"key": ["global", "props", "foo"], "value": "bar"}]', encoding="utf-8")

    patches = load_patches(path)

    assert len(patches) == 1
    assert patches[0].value == "bar"


def test_load_patches_reports_malformed_json(tmp_path: Path) -> None:
    path = tmp_path / "overrides.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(PatchError, match="Malformed patch JSON"):
        load_patches(path)
