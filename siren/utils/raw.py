"""Checked views over generic JSON values (dict / list / scalar trees)."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from siren.errors import MissingRequiredKeyError, TypeMismatchError


def _where(owner: Optional[str], attribute: Optional[str]) -> str:
    if owner and attribute:
        return f"{owner}.{attribute}: "
    if owner or attribute:
        return f"{owner or attribute}: "
    return ""


def _type_name(value: Any) -> str:
    return "null" if value is None else type(value).__name__


def as_mapping(
    value: Any,
    *,
    owner: Optional[str] = None,
    attribute: Optional[str] = None,
) -> dict[str, Any]:
    if not isinstance(value, Mapping):
        raise TypeMismatchError(
            f"{_where(owner, attribute)}expected mapping, found {_type_name(value)}"
        )
    return dict(value)


def as_list(
    value: Any,
    *,
    owner: Optional[str] = None,
    attribute: Optional[str] = None,
) -> list[Any]:
    if not isinstance(value, (list, tuple)):
        raise TypeMismatchError(
            f"{_where(owner, attribute)}expected list, found {_type_name(value)}"
        )
    return list(value)


def as_string_list(
    value: Any,
    *,
    owner: Optional[str] = None,
    attribute: Optional[str] = None,
) -> list[str]:
    items = as_list(value, owner=owner, attribute=attribute)
    for item in items:
        if not isinstance(item, str):
            raise TypeMismatchError(
                f"{_where(owner, attribute)}expected list of strings, "
                f"found {_type_name(item)} item"
            )
    return items


def skip_nulls(mapping: Mapping[str, Any]) -> dict[str, Any]:
    """Copy of ``mapping`` without the keys whose value is ``None``."""
    return {key: value for key, value in mapping.items() if value is not None}


def require(mapping: Mapping[str, Any], key: str, owner: Optional[str] = None) -> Any:
    value = mapping.get(key)
    if value is None:
        raise MissingRequiredKeyError(key, owner)
    return value


def optional_str(mapping: Mapping[str, Any], key: str, owner: Optional[str] = None) -> Optional[str]:
    value = mapping.get(key)
    if value is not None and not isinstance(value, str):
        raise TypeMismatchError(
            f"{_where(owner, key)}expected string, found {_type_name(value)}"
        )
    return value


def require_str(mapping: Mapping[str, Any], key: str, owner: Optional[str] = None) -> str:
    value = require(mapping, key, owner)
    if not isinstance(value, str):
        raise TypeMismatchError(
            f"{_where(owner, key)}expected string, found {_type_name(value)}"
        )
    return value


def optional_string_list(mapping: Mapping[str, Any], key: str, owner: Optional[str] = None) -> Optional[list[str]]:
    value = mapping.get(key)
    return None if value is None else as_string_list(value, owner=owner, attribute=key)


def optional_list(mapping: Mapping[str, Any], key: str, owner: Optional[str] = None) -> Optional[list[Any]]:
    value = mapping.get(key)
    return None if value is None else as_list(value, owner=owner, attribute=key)


def optional_mapping(mapping: Mapping[str, Any], key: str, owner: Optional[str] = None) -> Optional[dict[str, Any]]:
    value = mapping.get(key)
    return None if value is None else as_mapping(value, owner=owner, attribute=key)
