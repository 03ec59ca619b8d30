from __future__ import annotations

from typing import Any, Optional, Tuple, Union

from pydantic import Field as ModelField

from siren.models import constants as siren
from siren.models.base import ModelBuilder, SirenModel, raw_list, varargs
from siren.models.constants import Method
from siren.models.field import Field
from siren.utils.raw import (
    as_mapping,
    optional_list,
    optional_str,
    optional_string_list,
    require,
    require_str,
    skip_nulls,
)
from siren.utils.uri import parse_href


# -----------------------------------------------------------------------------
# Model
# -----------------------------------------------------------------------------
class Action(SirenModel):
    """A behaviour an entity exposes, with the fields needed to submit it."""
    name: str = ModelField(
        ...,
        description="Identifies the action; unique within the entity's actions"
    )
    title: Optional[str] = ModelField(
        None,
        description="Descriptive text about the action"
    )
    class_: Tuple[str, ...] = ModelField(
        (),
        alias="class",
        description="Describes the nature of the action based on the current representation"
    )
    method: Optional[str] = ModelField(
        None,
        description="HTTP method, conventionally one of Method; free text is kept as is"
    )
    href: str = ModelField(
        ...,
        description="The action's target URI"
    )
    type: Optional[str] = ModelField(
        None,
        description="Encoding type for the request, e.g. application/x-www-form-urlencoded"
    )
    fields: Tuple[Field, ...] = ModelField(
        (),
        description="Fields expressing the controls of the action"
    )

    @classmethod
    def new_builder(cls, name: str, href: str) -> ActionBuilder:
        return ActionBuilder(name, href)

    def to_builder(self) -> ActionBuilder:
        return ActionBuilder(self.name, self.href)._seed(
            self._explicit("class_", "method", "title", "type", "fields")
        )

    def to_raw(self) -> dict[str, Any]:
        return skip_nulls({
            siren.NAME: self.name,
            siren.TITLE: self._emitted("title"),
            siren.CLASS: raw_list(self._emitted("class_")),
            siren.METHOD: self._emitted("method"),
            siren.HREF: self.href,
            siren.TYPE: self._emitted("type"),
            siren.FIELDS: raw_list(self._emitted("fields"), Field.to_raw),
        })

    @classmethod
    def from_raw(cls, value: Any) -> Action:
        raw = as_mapping(value, owner="Action")
        fields = optional_list(raw, siren.FIELDS, "Action")
        return (
            ActionBuilder(require_str(raw, siren.NAME, "Action"), require(raw, siren.HREF, "Action"))
            .class_(optional_string_list(raw, siren.CLASS, "Action"))
            .method(optional_str(raw, siren.METHOD, "Action"))
            .title(optional_str(raw, siren.TITLE, "Action"))
            .type(optional_str(raw, siren.TYPE, "Action"))
            .fields(None if fields is None else [Field.from_raw(item) for item in fields])
            .build()
        )


# -----------------------------------------------------------------------------
# Builder
# -----------------------------------------------------------------------------
class ActionBuilder(ModelBuilder):

    def __init__(self, name: str, href: str) -> None:
        super().__init__()
        self._name = name
        self._href = parse_href(href, "Action")

    def name(self, name: str) -> ActionBuilder:
        self._name = name
        return self

    def href(self, href: str) -> ActionBuilder:
        self._href = parse_href(href, "Action")
        return self

    def method(self, method: Union[None, str, Method]) -> ActionBuilder:
        if isinstance(method, Method):
            method = method.value
        return self._set("method", method)

    def type(self, type: Optional[str]) -> ActionBuilder:
        return self._set("type", type)

    def fields(self, *fields: Any) -> ActionBuilder:
        return self._set("fields", varargs(fields))

    def build(self) -> Action:
        return Action(name=self._name, href=self._href, **self._values)
