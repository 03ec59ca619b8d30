"""Shared fixtures for the Siren model and codec tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from siren import (
    Action,
    EmbeddedLink,
    EmbeddedRepresentation,
    Field,
    FieldType,
    Link,
    Method,
    Root,
)

RESOURCES = Path(__file__).parent / "resources"


@pytest.fixture
def load_resource() -> Callable[[str], str]:
    def _load(name: str) -> str:
        return (RESOURCES / name).read_text(encoding="utf-8")

    return _load


@pytest.fixture
def add_item_action() -> Action:
    return (
        Action.new_builder("add-item", "http://api.x.io/orders/42/items")
        .title("Add Item")
        .method(Method.POST)
        .type("application/x-www-form-urlencoded")
        .fields(
            Field.new_builder("orderNumber").type(FieldType.HIDDEN).value("42").build(),
            Field.new_builder("productCode").type(FieldType.TEXT).build(),
            Field.new_builder("quantity").type(FieldType.NUMBER).build(),
        )
        .build()
    )


@pytest.fixture
def official_example(add_item_action: Action) -> Root:
    """The order document from the Siren README, built by hand."""
    return (
        Root.new_builder()
        .class_("order")
        .properties({"orderNumber": 42, "itemCount": 3, "status": "pending"})
        .entities(
            EmbeddedLink.new_builder("http://x.io/rels/order-items", "http://api.x.io/orders/42/items")
            .class_("items", "collection")
            .build(),
            EmbeddedRepresentation.new_builder("http://x.io/rels/customer")
            .class_("info", "customer")
            .properties({"customerId": "pj123", "name": "Peter Joseph"})
            .links(Link.new_builder("self", "http://api.x.io/customers/pj123").build())
            .build(),
        )
        .actions(add_item_action)
        .links(
            Link.new_builder("self", "http://api.x.io/orders/42").build(),
            Link.new_builder("previous", "http://api.x.io/orders/41").build(),
            Link.new_builder("next", "http://api.x.io/orders/43").build(),
        )
        .build()
    )


@pytest.fixture
def complete_root(add_item_action: Action) -> Root:
    """A document that sets every attribute at every level."""
    nested = (
        EmbeddedRepresentation.new_builder(["item", "http://x.io/rels/line"])
        .class_("line")
        .title("Line 1")
        .properties({"quantity": 2, "price": 12.5, "gift": False})
        .build()
    )
    return (
        Root.new_builder()
        .class_("order", "summary")
        .title("Order 42")
        .properties({"orderNumber": 42, "status": "pending", "tags": ["a", "b"], "note": None})
        .entities(
            EmbeddedLink.new_builder("http://x.io/rels/order-items", "http://api.x.io/orders/42/items")
            .class_("items", "collection")
            .type("application/vnd.siren+json")
            .title("Items")
            .build(),
            EmbeddedRepresentation.new_builder("http://x.io/rels/customer")
            .class_("info", "customer")
            .title("Customer")
            .properties({"customerId": "pj123"})
            .links(Link.new_builder("self", "http://api.x.io/customers/pj123").title("Peter").build())
            .entities(nested)
            .actions(Action.new_builder("delete", "/customers/pj123").method(Method.DELETE).build())
            .build(),
        )
        .actions(
            add_item_action,
            Action.new_builder("search", "/orders")
            .class_("query")
            .method("GET")
            .fields(
                Field.new_builder("q")
                .class_("free-text")
                .type(FieldType.SEARCH)
                .title("Query")
                .value("shoes")
                .build()
            )
            .build(),
        )
        .links(
            Link.new_builder("self", "http://api.x.io/orders/42")
            .class_("order")
            .title("This order")
            .type("application/vnd.siren+json")
            .build(),
        )
        .build()
    )
