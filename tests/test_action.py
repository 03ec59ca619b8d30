"""Action: behaviours an entity exposes."""

from __future__ import annotations

import pytest

from siren import Action, Field, FieldType, InvalidUriError, Method, MissingRequiredKeyError


def test_defaults() -> None:
    action = Action.new_builder("refresh", "/orders/42").build()
    assert action.fields == ()
    assert action.class_ == ()
    assert action.method is None
    assert action.to_raw() == {"name": "refresh", "href": "/orders/42"}


def test_to_raw_key_order(add_item_action: Action) -> None:
    action = add_item_action.to_builder().class_("cart").build()
    assert list(action.to_raw()) == ["name", "title", "class", "method", "href", "type", "fields"]


def test_method_accepts_enum_or_text() -> None:
    assert Action.new_builder("a", "/a").method(Method.DELETE).build().method == "DELETE"
    assert Action.new_builder("a", "/a").method("PATCH").build().method == "PATCH"


def test_fields_varargs_and_list_are_equivalent() -> None:
    first = Field.new_builder("a").build()
    second = Field.new_builder("b").type(FieldType.EMAIL).build()
    assert (
        Action.new_builder("x", "/x").fields(first, second).build()
        == Action.new_builder("x", "/x").fields([first, second]).build()
    )


def test_explicit_empty_fields_are_written() -> None:
    action = Action.new_builder("search", "/search").fields([]).build()
    assert action.to_raw() == {"name": "search", "href": "/search", "fields": []}


def test_fields_none_resets() -> None:
    action = (
        Action.new_builder("search", "/search")
        .fields(Field.new_builder("q").build())
        .fields(None)
        .build()
    )
    assert action.fields == ()
    assert "fields" not in action.to_raw()


def test_from_raw_round_trip(add_item_action: Action) -> None:
    raw = add_item_action.to_raw()
    assert Action.from_raw(raw) == add_item_action
    assert Action.from_raw(raw).to_raw() == raw


def test_from_raw_requires_name() -> None:
    with pytest.raises(MissingRequiredKeyError, match=r"Key name is missing in the map\."):
        Action.from_raw({"href": "/a"})


def test_from_raw_requires_href() -> None:
    with pytest.raises(MissingRequiredKeyError) as excinfo:
        Action.from_raw({"name": "a"})
    assert excinfo.value.key == "href"


def test_invalid_href_names_action() -> None:
    with pytest.raises(InvalidUriError) as excinfo:
        Action.from_raw({"name": "a", "href": "::"})
    assert "::" in str(excinfo.value)
    assert "Action" in str(excinfo.value)


def test_builder_href_is_validated_on_change() -> None:
    builder = Action.new_builder("a", "/a")
    with pytest.raises(InvalidUriError):
        builder.href("::")


def test_to_builder_keeps_unset_attributes_unset(add_item_action: Action) -> None:
    renamed = add_item_action.to_builder().name("add-line").build()
    assert renamed.name == "add-line"
    assert renamed.fields == add_item_action.fields
    assert add_item_action.name == "add-item"

    bare = Action.new_builder("a", "/a").build().to_builder().build()
    assert bare.to_raw() == {"name": "a", "href": "/a"}
