from __future__ import annotations

import logging
from typing import Any, ClassVar, List, Mapping, Optional, Tuple, Union

from pydantic import Field as ModelField
from pydantic import field_validator

from siren.models import constants as siren
from siren.models import embedded
from siren.models.action import Action
from siren.models.base import ModelBuilder, SirenModel, empty_mapping, freeze, raw_list, thaw, varargs
from siren.models.embedded import Embedded, EmbeddedLink, EmbeddedRepresentation
from siren.models.link import Link
from siren.services.json_codec import parse_text, write_text
from siren.utils.raw import (
    as_mapping,
    optional_list,
    optional_mapping,
    optional_str,
    optional_string_list,
    skip_nulls,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Model
# -----------------------------------------------------------------------------
class Root(SirenModel):
    """
    The top-level Siren entity: a URI-addressable resource with properties,
    actions, sub-entities and navigational links.

    Every attribute is optional. Empty lists and maps are left out of
    ``to_raw``/``to_json`` exactly like missing ones, so whether a list was
    given as empty or not given at all is not preserved.

    ``properties`` is a read-only mapping whose nested lists are tuples;
    ``to_raw`` hands out a fresh dict and list tree.
    """
    OMIT_EMPTY: ClassVar[bool] = True

    class_: Tuple[str, ...] = ModelField(
        (),
        alias="class",
        description="Describes the nature of the entity's content based on the current representation"
    )
    title: Optional[str] = ModelField(
        None,
        description="Descriptive text about the entity"
    )
    properties: Mapping[str, Any] = ModelField(
        default_factory=empty_mapping,
        description="Key-value pairs describing the state of the entity"
    )
    entities: Tuple[Embedded, ...] = ModelField(
        (),
        description="Related sub-entities"
    )
    actions: Tuple[Action, ...] = ModelField(
        (),
        description="Behaviours the entity exposes"
    )
    links: Tuple[Link, ...] = ModelField(
        (),
        description="Navigational links; should include a link with rel 'self'"
    )

    @field_validator("properties")
    @classmethod
    def freeze_properties(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        return freeze(v)

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------
    @property
    def first_class(self) -> Optional[str]:
        return self.class_[0] if self.class_ else None

    @property
    def embedded_links(self) -> List[EmbeddedLink]:
        return [entity for entity in self.entities if isinstance(entity, EmbeddedLink)]

    @property
    def embedded_representations(self) -> List[EmbeddedRepresentation]:
        return [entity for entity in self.entities if isinstance(entity, EmbeddedRepresentation)]

    # -------------------------------------------------------------------------
    # Copying
    # -------------------------------------------------------------------------
    @classmethod
    def new_builder(cls) -> RootBuilder:
        return RootBuilder()

    def to_builder(self) -> RootBuilder:
        return (
            RootBuilder()
            .class_(self.class_)
            .title(self.title)
            .properties(self.properties)
            .links(self.links)
            .entities(self.entities)
            .actions(self.actions)
        )

    def replace(self, **overrides: Any) -> Root:
        """Copy with some attributes replaced, e.g. ``root.replace(title="Other")``."""
        values = {name: getattr(self, name) for name in type(self).model_fields}
        values.update(overrides)
        return type(self).model_validate(values)

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------
    def to_raw(self) -> dict[str, Any]:
        return skip_nulls({
            siren.CLASS: raw_list(self._emitted("class_")),
            siren.TITLE: self._emitted("title"),
            siren.PROPERTIES: thaw(self._emitted("properties")),
            siren.ENTITIES: raw_list(self._emitted("entities"), lambda entity: entity.to_raw()),
            siren.ACTIONS: raw_list(self._emitted("actions"), Action.to_raw),
            siren.LINKS: raw_list(self._emitted("links"), Link.to_raw),
        })

    def to_json(self, *, indent: Optional[int] = None) -> str:
        """Single-line JSON text unless an indent is given or configured."""
        return write_text(self.to_raw(), indent=indent)

    @classmethod
    def from_raw(cls, value: Mapping[str, Any]) -> Root:
        """
        Inverse of ``to_raw``. Attributes outside the Siren format are dropped.
        Prefer the builder when producing documents.
        """
        raw = as_mapping(value, owner="Root")
        links = optional_list(raw, siren.LINKS, "Root")
        entities = optional_list(raw, siren.ENTITIES, "Root")
        actions = optional_list(raw, siren.ACTIONS, "Root")
        return (
            RootBuilder()
            .class_(optional_string_list(raw, siren.CLASS, "Root"))
            .title(optional_str(raw, siren.TITLE, "Root"))
            .properties(optional_mapping(raw, siren.PROPERTIES, "Root"))
            .links(None if links is None else [Link.from_raw(item) for item in links])
            .entities(None if entities is None else [embedded.from_raw(item) for item in entities])
            .actions(None if actions is None else [Action.from_raw(item) for item in actions])
            .build()
        )

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> Root:
        root = cls.from_raw(as_mapping(parse_text(text), owner="Root"))
        logger.debug("Parsed Root with %d entities", len(root.entities))
        return root


# -----------------------------------------------------------------------------
# Builder
# -----------------------------------------------------------------------------
class RootBuilder(ModelBuilder):
    """No attribute is required; ``None`` resets an attribute to empty."""

    def properties(self, properties: Optional[Mapping[str, Any]]) -> RootBuilder:
        return self._set("properties", None if properties is None else dict(properties))

    def links(self, *links: Any) -> RootBuilder:
        return self._set("links", varargs(links))

    def entities(self, *entities: Any) -> RootBuilder:
        return self._set("entities", varargs(entities))

    def actions(self, *actions: Any) -> RootBuilder:
        return self._set("actions", varargs(actions))

    def build(self) -> Root:
        return Root(**self._values)
