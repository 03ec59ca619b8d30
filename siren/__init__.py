"""Build and parse Siren hypermedia documents (application/vnd.siren+json)."""

from siren.errors import (
    InvalidAttributeError,
    InvalidUriError,
    JsonSyntaxError,
    MissingRequiredKeyError,
    SirenError,
    TypeMismatchError,
)
from siren.models.action import Action, ActionBuilder
from siren.models.constants import APPLICATION_SIREN_JSON, FieldType, Method
from siren.models.embedded import (
    Embedded,
    EmbeddedLink,
    EmbeddedLinkBuilder,
    EmbeddedRepresentation,
    EmbeddedRepresentationBuilder,
    is_embedded,
)
from siren.models.field import Field, FieldBuilder
from siren.models.link import Link, LinkBuilder
from siren.models.root import Root, RootBuilder

__version__ = "0.1.0"

__all__ = [
    "APPLICATION_SIREN_JSON",
    "Action",
    "ActionBuilder",
    "Embedded",
    "EmbeddedLink",
    "EmbeddedLinkBuilder",
    "EmbeddedRepresentation",
    "EmbeddedRepresentationBuilder",
    "Field",
    "FieldBuilder",
    "FieldType",
    "InvalidAttributeError",
    "InvalidUriError",
    "JsonSyntaxError",
    "Link",
    "LinkBuilder",
    "Method",
    "MissingRequiredKeyError",
    "Root",
    "RootBuilder",
    "SirenError",
    "TypeMismatchError",
    "is_embedded",
]
