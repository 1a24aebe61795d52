"""
Tests for inline style parsing and overlay.
"""

from sitescribe_core.styles import merge_style, overlay_style, parse_style, serialize_style, set_property


def test_parse_trims_and_drops_empty_declarations():
    assert parse_style(" color : red ;; font-size:12px; ;broken") == {"color": "red", "font-size": "12px"}


def test_duplicate_keeps_first_position_with_later_value():
    props = parse_style("color: red; font-size: 12px; color: blue")
    assert list(props.items()) == [("color", "blue"), ("font-size", "12px")]


def test_value_may_contain_colon():
    assert parse_style("background: url(http://x/a.png)") == {"background": "url(http://x/a.png)"}


def test_serialize_joins_with_semicolon_space():
    assert serialize_style({"color": "red", "margin": "0"}) == "color: red; margin: 0"


def test_set_property_preserves_untouched_properties():
    assert set_property("color: red; font-size: 12px", "font-size", "16px") == "color: red; font-size: 16px"


def test_set_property_is_idempotent():
    once = set_property("color: red", "margin", "0")
    twice = set_property(once, "margin", "0")
    assert once == twice == "color: red; margin: 0"


def test_set_property_on_empty_style():
    assert set_property("", "color", "blue") == "color: blue"
    assert set_property(None, "color", "blue") == "color: blue"


def test_merge_patch_wins_and_new_keys_append():
    assert merge_style("color: red; padding: 1px", "margin: 0; color: blue") == "color: blue; padding: 1px; margin: 0"


def test_overlay_with_mapping():
    assert overlay_style("a: 1", {"b": "2", "a": "3"}) == "a: 3; b: 2"
