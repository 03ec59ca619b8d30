from __future__ import annotations

from typing import Any, Optional, Tuple, Union

from pydantic import Field as ModelField
from pydantic import field_validator

from siren.models import constants as siren
from siren.models.base import ModelBuilder, SirenModel, freeze, raw_list, thaw
from siren.models.constants import FieldType
from siren.utils.raw import (
    as_mapping,
    optional_str,
    optional_string_list,
    require_str,
    skip_nulls,
)


# -----------------------------------------------------------------------------
# Model
# -----------------------------------------------------------------------------
class Field(SirenModel):
    """
    A control inside an Action. Field names should be unique within the
    Action's set of fields; that is left to the caller.

    A list or mapping ``value`` is stored read-only, as tuples and
    ``MappingProxyType``.
    """
    name: str = ModelField(
        ...,
        description="Name describing the control"
    )
    class_: Tuple[str, ...] = ModelField(
        (),
        alias="class",
        description="Describes aspects of the field based on the current representation"
    )
    type: Optional[str] = ModelField(
        None,
        description="Input type of the field, see FieldType for the HTML5 input types"
    )
    title: Optional[str] = ModelField(
        None,
        description="Textual annotation of a field"
    )
    value: Any = ModelField(
        None,
        description="Value assigned to the field"
    )

    @field_validator("value")
    @classmethod
    def freeze_value(cls, v: Any) -> Any:
        return freeze(v)

    @classmethod
    def new_builder(cls, name: str) -> FieldBuilder:
        return FieldBuilder(name)

    def to_builder(self) -> FieldBuilder:
        return FieldBuilder(self.name)._seed(self._explicit("class_", "type", "title", "value"))

    def to_raw(self) -> dict[str, Any]:
        return skip_nulls({
            siren.NAME: self.name,
            siren.CLASS: raw_list(self._emitted("class_")),
            siren.TYPE: self._emitted("type"),
            siren.TITLE: self._emitted("title"),
            siren.VALUE: thaw(self._emitted("value")),
        })

    @classmethod
    def from_raw(cls, value: Any) -> Field:
        raw = as_mapping(value, owner="Field")
        return (
            FieldBuilder(require_str(raw, siren.NAME, "Field"))
            .class_(optional_string_list(raw, siren.CLASS, "Field"))
            .type(optional_str(raw, siren.TYPE, "Field"))
            .title(optional_str(raw, siren.TITLE, "Field"))
            .value(raw.get(siren.VALUE))
            .build()
        )


# -----------------------------------------------------------------------------
# Builder
# -----------------------------------------------------------------------------
class FieldBuilder(ModelBuilder):

    def __init__(self, name: str) -> None:
        super().__init__()
        self._name = name

    def type(self, type: Union[None, str, FieldType]) -> FieldBuilder:
        if isinstance(type, FieldType):
            type = type.value
        return self._set("type", type)

    def value(self, value: Any) -> FieldBuilder:
        return self._set("value", value)

    def build(self) -> Field:
        return Field(name=self._name, **self._values)
