from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, ClassVar, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict

from siren.errors import InvalidAttributeError


# -----------------------------------------------------------------------------
# Base model
# -----------------------------------------------------------------------------
class SirenModel(BaseModel):
    """
    Immutable Siren value type.

    ``OMIT_EMPTY`` selects how ``to_raw`` decides that an attribute is absent:

    - ``False``: absent means "never set to a non-null value". Nested types
      (Field, Action, Link, embedded entities) work this way, so an explicitly
      empty ``class`` list is still written as ``[]``.
    - ``True``: absent means null or empty. Root works this way.

    Getters never return ``None`` for list or map attributes in either case.
    """
    OMIT_EMPTY: ClassVar[bool] = False

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
    )

    def _emitted(self, name: str) -> Any:
        value = getattr(self, name)
        if value is None:
            return None
        if self.OMIT_EMPTY:
            if isinstance(value, (tuple, list, Mapping)) and not value:
                return None
            return value
        return value if name in self.model_fields_set else None

    def _explicit(self, *names: str) -> dict[str, Any]:
        """Attributes set when this instance was built, for seeding a builder."""
        return {name: getattr(self, name) for name in names if name in self.model_fields_set}

    def __hash__(self) -> int:
        return hash((type(self), tuple(_hashable(getattr(self, name)) for name in type(self).model_fields)))


# -----------------------------------------------------------------------------
# Read-only values
# -----------------------------------------------------------------------------
def freeze(value: Any) -> Any:
    """
    Read-only deep copy of a JSON-like value: mappings become
    ``MappingProxyType`` and lists become tuples. Other values are kept.
    """
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def empty_mapping() -> Mapping[str, Any]:
    return MappingProxyType({})


def thaw(value: Any) -> Any:
    """Inverse of ``freeze``: a fresh tree of dicts and lists the caller may modify."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw(item) for item in value]
    return value


def _hashable(value: Any) -> Any:
    # equal mappings hash equal regardless of key order
    if isinstance(value, Mapping):
        return frozenset((key, _hashable(item)) for key, item in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(_hashable(item) for item in value)
    return value


# -----------------------------------------------------------------------------
# Builder helpers
# -----------------------------------------------------------------------------
def string_tuple(values: Union[None, str, Sequence[str]]) -> Optional[Tuple[str, ...]]:
    """Normalise the ``*args`` / list / None forms accepted by builder setters."""
    if values is None:
        return None
    if isinstance(values, str):
        return (values,)
    return tuple(values)


def varargs(args: tuple) -> Any:
    """``setter(a, b)`` and ``setter([a, b])`` both mean the list ``[a, b]``; ``setter(None)`` clears."""
    if len(args) == 1 and (args[0] is None or isinstance(args[0], (list, tuple))):
        return None if args[0] is None else tuple(args[0])
    return tuple(args)


def rel_tuple(rel: Union[str, Sequence[str]], owner: str) -> Tuple[str, ...]:
    values = string_tuple(rel)
    if not values:
        raise InvalidAttributeError(
            f"{owner}.rel must contain at least one relation type",
            attribute="rel",
            owner=owner,
        )
    return values


def raw_list(values: Optional[Sequence[Any]], convert: Optional[Callable[[Any], Any]] = None) -> Optional[list]:
    if values is None:
        return None
    if convert is None:
        return list(values)
    return [convert(item) for item in values]


# -----------------------------------------------------------------------------
# Builder base
# -----------------------------------------------------------------------------
class ModelBuilder:
    """
    Mutable staging area for one model. Only attributes given a non-null
    value are passed on to the model, so unset attributes stay absent.
    Not safe to share between threads.
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def _seed(self, values: dict[str, Any]):
        self._values.update(values)
        return self

    def _set(self, key: str, value: Any):
        if value is None:
            self._values.pop(key, None)
        else:
            self._values[key] = value
        return self

    def class_(self, *names: Any):
        return self._set("class_", varargs(names))

    def title(self, title: Optional[str]):
        return self._set("title", title)
