from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple, Union

from pydantic import Field as ModelField

from siren.models import constants as siren
from siren.models.base import ModelBuilder, SirenModel, raw_list, rel_tuple
from siren.utils.raw import (
    as_mapping,
    as_string_list,
    optional_str,
    optional_string_list,
    require,
    skip_nulls,
)
from siren.utils.uri import parse_href


# -----------------------------------------------------------------------------
# Shared accessors
# -----------------------------------------------------------------------------
class RelationAccessors:
    """``first_rel`` / ``first_class`` for anything carrying ``rel`` and ``class_``."""

    @property
    def first_rel(self) -> str:
        # rel is never empty on a built instance
        return self.rel[0]

    @property
    def first_class(self) -> Optional[str]:
        return self.class_[0] if self.class_ else None


# -----------------------------------------------------------------------------
# Model
# -----------------------------------------------------------------------------
class Link(RelationAccessors, SirenModel):
    """A navigational link, distinct from an entity relationship."""
    class_: Tuple[str, ...] = ModelField(
        (),
        alias="class",
        description="Describes aspects of the link based on the current representation"
    )
    title: Optional[str] = ModelField(
        None,
        description="Text describing the nature of the link"
    )
    rel: Tuple[str, ...] = ModelField(
        ...,
        min_length=1,
        description="Relationship of the link to its entity, per Web Linking (RFC 8288)"
    )
    href: str = ModelField(
        ...,
        description="The URI of the linked resource"
    )
    type: Optional[str] = ModelField(
        None,
        description="Media type of the linked resource"
    )

    @classmethod
    def new_builder(cls, rel: Union[str, Sequence[str]], href: str) -> LinkBuilder:
        return LinkBuilder(rel, href)

    def to_builder(self) -> LinkBuilder:
        return LinkBuilder(self.rel, self.href)._seed(self._explicit("class_", "title", "type"))

    def to_raw(self) -> dict[str, Any]:
        return skip_nulls({
            siren.CLASS: raw_list(self._emitted("class_")),
            siren.TITLE: self._emitted("title"),
            siren.REL: list(self.rel),
            siren.HREF: self.href,
            siren.TYPE: self._emitted("type"),
        })

    @classmethod
    def from_raw(cls, value: Any) -> Link:
        raw = as_mapping(value, owner="Link")
        rel = as_string_list(require(raw, siren.REL, "Link"), owner="Link", attribute=siren.REL)
        return (
            LinkBuilder(rel, require(raw, siren.HREF, "Link"))
            .title(optional_str(raw, siren.TITLE, "Link"))
            .class_(optional_string_list(raw, siren.CLASS, "Link"))
            .type(optional_str(raw, siren.TYPE, "Link"))
            .build()
        )


# -----------------------------------------------------------------------------
# Builder
# -----------------------------------------------------------------------------
class LinkBuilder(ModelBuilder):

    def __init__(self, rel: Union[str, Sequence[str]], href: str) -> None:
        super().__init__()
        self._rel = rel_tuple(rel, "Link")
        self._href = parse_href(href, "Link")

    def type(self, type: Optional[str]) -> LinkBuilder:
        return self._set("type", type)

    def build(self) -> Link:
        return Link(rel=self._rel, href=self._href, **self._values)
