"""
Tests for blank-field stripping.
"""
from trip_tracker.core.utils import strip_blank_fields


def test_strip_removes_empty_strings_recursively():
    """Test that nested blank strings are dropped."""
    body = {"trip": {"city": "", "description": "Nice trip", "country": "FR"}}
    assert strip_blank_fields(body) == {"trip": {"description": "Nice trip", "country": "FR"}}


def test_strip_keeps_null_and_falsy_non_strings():
    """Test that None, 0, False and empty containers survive."""
    body = {"city": None, "count": 0, "flag": False, "tags": [], "extra": {}}
    assert strip_blank_fields(body) == body


def test_strip_keeps_whitespace_strings():
    """Only the exact empty string counts as blank."""
    assert strip_blank_fields({"city": " "}) == {"city": " "}


def test_strip_walks_lists_without_dropping_items():
    body = {"items": [{"a": "", "b": 1}, ""]}
    assert strip_blank_fields(body) == {"items": [{"b": 1}, ""]}


def test_strip_does_not_mutate_input():
    body = {"trip": {"city": ""}}
    strip_blank_fields(body)
    assert body == {"trip": {"city": ""}}


def test_strip_passes_scalars_through():
    assert strip_blank_fields("x") == "x"
    assert strip_blank_fields(None) is None
