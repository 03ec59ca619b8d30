"""Checked views over decoded JSON values."""

from __future__ import annotations

import pytest

from siren.errors import MissingRequiredKeyError, TypeMismatchError
from siren.utils.raw import (
    as_list,
    as_mapping,
    as_string_list,
    optional_mapping,
    optional_str,
    optional_string_list,
    require,
    require_str,
    skip_nulls,
)


def test_as_mapping_copies_the_mapping() -> None:
    source = {"a": 1}
    result = as_mapping(source)
    assert result == source
    assert result is not source


def test_as_mapping_rejects_lists_with_location() -> None:
    with pytest.raises(TypeMismatchError, match=r"Root\.properties: expected mapping, found list"):
        as_mapping([1], owner="Root", attribute="properties")


def test_as_list_accepts_tuples() -> None:
    assert as_list(("a", "b")) == ["a", "b"]


def test_as_list_rejects_strings() -> None:
    with pytest.raises(TypeMismatchError, match="expected list, found str"):
        as_list("abc")


def test_as_string_list_rejects_non_string_items() -> None:
    with pytest.raises(TypeMismatchError) as excinfo:
        as_string_list(["a", 1], owner="Link", attribute="rel")
    assert str(excinfo.value) == "Link.rel: expected list of strings, found int item"
    assert isinstance(excinfo.value, TypeError)


def test_skip_nulls_keeps_falsy_values_and_order() -> None:
    result = skip_nulls({"b": 0, "a": None, "c": [], "d": False})
    assert result == {"b": 0, "c": [], "d": False}
    assert list(result) == ["b", "c", "d"]


def test_require_treats_null_as_missing() -> None:
    with pytest.raises(MissingRequiredKeyError) as excinfo:
        require({"rel": None}, "rel", "Embedded")
    assert str(excinfo.value) == "Key rel is missing in the map."
    assert excinfo.value.key == "rel"
    assert excinfo.value.owner == "Embedded"
    assert isinstance(excinfo.value, KeyError)


def test_require_str_rejects_numbers() -> None:
    with pytest.raises(TypeMismatchError, match=r"Action\.name: expected string, found int"):
        require_str({"name": 3}, "name", "Action")


def test_optional_helpers_return_none_for_absent_or_null() -> None:
    raw = {"title": None}
    assert optional_str(raw, "title") is None
    assert optional_string_list(raw, "class") is None
    assert optional_mapping(raw, "properties") is None


def test_optional_str_rejects_wrong_type() -> None:
    with pytest.raises(TypeMismatchError):
        optional_str({"title": ["x"]}, "title", "Link")
