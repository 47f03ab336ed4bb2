"""Tests for core.skill_tree."""

import json

import pytest

from core.errors import TreeParseError
from core.skill_tree import AssetReference, SkillTreeDescription, format_zoom_level


def _tree_json(**overrides):
    document = {
        "tree": "Default",
        "imageZoomLevels": [0.1246, 0.2109, 0.2972, 0.3835],
        "sprites": {
            "frame": {
                "0.1246": {"filename": "https://web.poecdn.com/image/frame-0.png?1", "w": 10},
                "0.3835": {"filename": "https://web.poecdn.com/image/frame-3.png?1", "w": 40},
            },
        },
    }
    document.update(overrides)
    return json.dumps(document).encode("utf-8")


# ---------------------------------------------------------------------------
# format_zoom_level
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("value, expected", [
    (1.0, "1"),
    (1, "1"),
    (100.0, "100"),
    (0.3835, "0.3835"),
    (2.6700000762939453, "2.6700000762939453"),
    (1e-05, "0.00001"),
    (1e16, "10000000000000000"),
])
def test_format_zoom_level(value, expected):
    assert format_zoom_level(value) == expected


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def test_from_json_parses_zoom_levels_and_sprites():
    tree = SkillTreeDescription.from_json(_tree_json())
    assert tree.image_zoom_levels == [0.1246, 0.2109, 0.2972, 0.3835]
    assert tree.preferred_zoom_level == 0.3835
    assert tree.sprites["frame"]["0.3835"] == AssetReference(
        filename="https://web.poecdn.com/image/frame-3.png?1"
    )


def test_from_json_integer_zoom_levels_become_floats():
    tree = SkillTreeDescription.from_json(_tree_json(imageZoomLevels=[1, 2]))
    assert tree.image_zoom_levels == [1.0, 2.0]
    assert format_zoom_level(tree.preferred_zoom_level) == "2"


def test_from_json_missing_filename_is_empty_reference():
    tree = SkillTreeDescription.from_json(_tree_json(sprites={"line": {"1": {"w": 1}}}))
    assert tree.sprites["line"]["1"].filename == ""


@pytest.mark.parametrize("payload", [
    b"not json",
    b"[1, 2, 3]",
    b"\xff\xfe",
])
def test_from_json_rejects_malformed_documents(payload):
    with pytest.raises(TreeParseError):
        SkillTreeDescription.from_json(payload)


@pytest.mark.parametrize("overrides", [
    {"imageZoomLevels": []},
    {"imageZoomLevels": None},
    {"imageZoomLevels": ["0.3835"]},
    {"sprites": None},
    {"sprites": {"frame": ["not", "a", "map"]}},
    {"sprites": {"frame": {"0.3835": "frame.png"}}},
    {"sprites": {"frame": {"0.3835": {"filename": 12}}}},
])
def test_from_json_rejects_unexpected_shapes(overrides):
    with pytest.raises(TreeParseError):
        SkillTreeDescription.from_json(_tree_json(**overrides))


def test_preferred_zoom_level_requires_levels():
    with pytest.raises(TreeParseError):
        SkillTreeDescription().preferred_zoom_level
