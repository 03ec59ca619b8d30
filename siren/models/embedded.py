"""
Sub-entities. An entry in ``entities`` is either an embedded link (a
reference carrying ``href``) or an embedded representation (an inline
entity). ``Embedded`` is the tagged union of the two and ``from_raw`` is the
only place that decides which one a raw mapping becomes.
"""
from __future__ import annotations

import logging
from typing import Annotated, Any, List, Literal, Mapping, Optional, Sequence, Tuple, Union

from pydantic import Field as ModelField
from pydantic import field_validator

from siren.models import constants as siren
from siren.models.action import Action
from siren.models.base import (
    ModelBuilder,
    SirenModel,
    empty_mapping,
    freeze,
    raw_list,
    rel_tuple,
    thaw,
    varargs,
)
from siren.models.link import Link, RelationAccessors
from siren.utils.raw import (
    as_mapping,
    as_string_list,
    optional_list,
    optional_mapping,
    optional_str,
    optional_string_list,
    require,
    skip_nulls,
)
from siren.utils.uri import parse_href

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Embedded link
# -----------------------------------------------------------------------------
class EmbeddedLink(RelationAccessors, SirenModel):
    kind: Literal["link"] = ModelField("link", exclude=True, repr=False)

    class_: Tuple[str, ...] = ModelField(
        (),
        alias="class",
        description="Describes the nature of the entity's content"
    )
    rel: Tuple[str, ...] = ModelField(
        ...,
        min_length=1,
        description="Relationship of the sub-entity to its parent, per Web Linking (RFC 8288)"
    )
    href: str = ModelField(
        ...,
        description="The URI of the linked sub-entity"
    )
    type: Optional[str] = ModelField(
        None,
        description="Media type of the linked sub-entity"
    )
    title: Optional[str] = ModelField(
        None,
        description="Descriptive text about the entity"
    )

    @classmethod
    def new_builder(cls, rel: Union[str, Sequence[str]], href: str) -> EmbeddedLinkBuilder:
        return EmbeddedLinkBuilder(rel, href)

    def to_builder(self) -> EmbeddedLinkBuilder:
        return EmbeddedLinkBuilder(self.rel, self.href)._seed(self._explicit("class_", "type", "title"))

    def to_raw(self) -> dict[str, Any]:
        return skip_nulls({
            siren.CLASS: raw_list(self._emitted("class_")),
            siren.REL: list(self.rel),
            siren.HREF: self.href,
            siren.TYPE: self._emitted("type"),
            siren.TITLE: self._emitted("title"),
        })


class EmbeddedLinkBuilder(ModelBuilder):

    def __init__(self, rel: Union[str, Sequence[str]], href: str) -> None:
        super().__init__()
        self._rel = rel_tuple(rel, "EmbeddedLink")
        self._href = parse_href(href, "EmbeddedLink")

    def type(self, type: Optional[str]) -> EmbeddedLinkBuilder:
        return self._set("type", type)

    def build(self) -> EmbeddedLink:
        return EmbeddedLink(rel=self._rel, href=self._href, **self._values)


# -----------------------------------------------------------------------------
# Embedded representation
# -----------------------------------------------------------------------------
class EmbeddedRepresentation(RelationAccessors, SirenModel):
    kind: Literal["representation"] = ModelField("representation", exclude=True, repr=False)

    class_: Tuple[str, ...] = ModelField(
        (),
        alias="class",
        description="Describes the nature of the entity's content"
    )
    rel: Tuple[str, ...] = ModelField(
        ...,
        min_length=1,
        description="Relationship of the sub-entity to its parent, per Web Linking (RFC 8288)"
    )
    properties: Mapping[str, Any] = ModelField(
        default_factory=empty_mapping,
        description="Key-value pairs describing the state of the entity"
    )
    links: Tuple[Link, ...] = ModelField(
        (),
        description="Navigational links"
    )
    entities: Tuple[Embedded, ...] = ModelField(
        (),
        description="Nested sub-entities"
    )
    actions: Tuple[Action, ...] = ModelField(
        (),
        description="Behaviours the entity exposes"
    )
    title: Optional[str] = ModelField(
        None,
        description="Descriptive text about the entity"
    )

    @field_validator("properties")
    @classmethod
    def freeze_properties(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        return freeze(v)

    @property
    def embedded_links(self) -> List[EmbeddedLink]:
        return [entity for entity in self.entities if isinstance(entity, EmbeddedLink)]

    @property
    def embedded_representations(self) -> List[EmbeddedRepresentation]:
        return [entity for entity in self.entities if isinstance(entity, EmbeddedRepresentation)]

    @classmethod
    def new_builder(cls, rel: Union[str, Sequence[str]]) -> EmbeddedRepresentationBuilder:
        return EmbeddedRepresentationBuilder(rel)

    def to_builder(self) -> EmbeddedRepresentationBuilder:
        return EmbeddedRepresentationBuilder(self.rel)._seed(
            self._explicit("class_", "title", "properties", "links", "entities", "actions")
        )

    def to_raw(self) -> dict[str, Any]:
        return skip_nulls({
            siren.CLASS: raw_list(self._emitted("class_")),
            siren.REL: list(self.rel),
            siren.PROPERTIES: thaw(self._emitted("properties")),
            siren.LINKS: raw_list(self._emitted("links"), Link.to_raw),
            siren.ENTITIES: raw_list(self._emitted("entities"), _entity_to_raw),
            siren.ACTIONS: raw_list(self._emitted("actions"), Action.to_raw),
            siren.TITLE: self._emitted("title"),
        })


class EmbeddedRepresentationBuilder(ModelBuilder):

    def __init__(self, rel: Union[str, Sequence[str]]) -> None:
        super().__init__()
        self._rel = rel_tuple(rel, "EmbeddedRepresentation")

    def rel(self, *rel: str) -> EmbeddedRepresentationBuilder:
        self._rel = rel_tuple(varargs(rel), "EmbeddedRepresentation")
        return self

    def properties(self, properties: Optional[Mapping[str, Any]]) -> EmbeddedRepresentationBuilder:
        return self._set("properties", None if properties is None else dict(properties))

    def links(self, *links: Any) -> EmbeddedRepresentationBuilder:
        return self._set("links", varargs(links))

    def entities(self, *entities: Any) -> EmbeddedRepresentationBuilder:
        return self._set("entities", varargs(entities))

    def actions(self, *actions: Any) -> EmbeddedRepresentationBuilder:
        return self._set("actions", varargs(actions))

    def build(self) -> EmbeddedRepresentation:
        return EmbeddedRepresentation(rel=self._rel, **self._values)


# -----------------------------------------------------------------------------
# Union and dispatch
# -----------------------------------------------------------------------------
Embedded = Annotated[Union[EmbeddedLink, EmbeddedRepresentation], ModelField(discriminator="kind")]

EmbeddedRepresentation.model_rebuild()


def is_embedded(value: Any) -> bool:
    return isinstance(value, (EmbeddedLink, EmbeddedRepresentation))


def _entity_to_raw(entity: Union[EmbeddedLink, EmbeddedRepresentation]) -> dict[str, Any]:
    return entity.to_raw()


def from_raw(value: Any) -> Union[EmbeddedLink, EmbeddedRepresentation]:
    """
    Parse one entry of an ``entities`` list.

    ``rel`` is required (MissingRequiredKeyError). A non-null ``href`` makes the
    entry an EmbeddedLink, otherwise it is an EmbeddedRepresentation whose
    nested entities are parsed recursively.
    """
    raw = as_mapping(value, owner="Embedded")
    rel = as_string_list(require(raw, siren.REL, "Embedded"), owner="Embedded", attribute=siren.REL)
    class_ = optional_string_list(raw, siren.CLASS, "Embedded")

    if raw.get(siren.HREF) is not None:
        logger.debug("Embedded entity %s is a link", rel)
        return (
            EmbeddedLinkBuilder(rel, parse_href(raw[siren.HREF], "Embedded"))
            .class_(class_)
            .type(optional_str(raw, siren.TYPE, "Embedded"))
            .title(optional_str(raw, siren.TITLE, "Embedded"))
            .build()
        )

    logger.debug("Embedded entity %s is a representation", rel)
    links = optional_list(raw, siren.LINKS, "Embedded")
    entities = optional_list(raw, siren.ENTITIES, "Embedded")
    actions = optional_list(raw, siren.ACTIONS, "Embedded")
    return (
        EmbeddedRepresentationBuilder(rel)
        .class_(class_)
        .title(optional_str(raw, siren.TITLE, "Embedded"))
        .properties(optional_mapping(raw, siren.PROPERTIES, "Embedded"))
        .links(None if links is None else [Link.from_raw(item) for item in links])
        .entities(None if entities is None else [from_raw(item) for item in entities])
        .actions(None if actions is None else [Action.from_raw(item) for item in actions])
        .build()
    )
