from __future__ import annotations

from typing import Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------
class SirenError(Exception):
    """Base class for every error raised while building or parsing Siren documents."""


# -----------------------------------------------------------------------------
# Parsing errors
# -----------------------------------------------------------------------------
class TypeMismatchError(SirenError, TypeError):
    """A raw value is not the mapping, list or string list it was expected to be."""


class MissingRequiredKeyError(SirenError, KeyError):
    """A required attribute is absent from a raw mapping."""

    def __init__(self, key: str, owner: Optional[str] = None) -> None:
        self.key = key
        self.owner = owner
        super().__init__(f"Key {key} is missing in the map.")

    def __str__(self) -> str:
        # KeyError quotes its argument
        return self.args[0]


class JsonSyntaxError(SirenError, ValueError):
    """JSON text could not be decoded."""


# -----------------------------------------------------------------------------
# Attribute errors
# -----------------------------------------------------------------------------
class InvalidAttributeError(SirenError, ValueError):
    def __init__(self, message: str, *, attribute: str, owner: str) -> None:
        self.attribute = attribute
        self.owner = owner
        super().__init__(message)


class InvalidUriError(InvalidAttributeError):
    """An href is not a syntactically valid URI reference."""

    def __init__(self, value: str, reason: str, *, owner: str, attribute: str = "href") -> None:
        self.value = value
        self.reason = reason
        super().__init__(
            f"Invalid {attribute} in {owner}: {value!r} ({reason})",
            attribute=attribute,
            owner=owner,
        )
