from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel
from pydantic_core import from_json, to_json

from siren.config.settings import settings
from siren.errors import JsonSyntaxError
from siren.utils.dates import format_instant

logger = logging.getLogger(__name__)

JsonValue = Union[None, bool, int, float, str, list["JsonValue"], dict[str, "JsonValue"]]


# -----------------------------------------------------------------------------
# Value coercion
# -----------------------------------------------------------------------------
def coerce_json_value(value: Any) -> Any:
    """
    Convert runtime values into JSON primitives.

    Datetimes are written in canonical UTC form, enums as their value and
    pydantic models through ``model_dump``. Mapping key order is kept.
    """
    if value is None or isinstance(value, (str, int, float, bool)):
        if isinstance(value, Enum):
            return value.value
        return value
    if isinstance(value, datetime):
        return format_instant(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Enum):
        return coerce_json_value(value.value)
    if isinstance(value, (list, tuple)):
        return [coerce_json_value(item) for item in value]
    if isinstance(value, Mapping):
        return {str(key): coerce_json_value(item) for key, item in value.items()}
    if isinstance(value, BaseModel):
        return coerce_json_value(value.model_dump())
    return str(value)


# -----------------------------------------------------------------------------
# Text codec
# -----------------------------------------------------------------------------
def parse_text(text: Union[str, bytes]) -> JsonValue:
    """
    Decode JSON text into dicts, lists and scalars. Ints stay ints and
    floats stay floats, but the number text itself is not kept: ``3.7E-5``
    is read as the float and later written back as ``0.000037``.
    """
    try:
        value = from_json(text)
    except ValueError as e:
        raise JsonSyntaxError(f"Invalid JSON: {e}") from e

    logger.debug("Parsed JSON document of %d characters", len(text))
    return value


def write_text(value: Any, *, indent: Optional[int] = None) -> str:
    """
    Encode a generic value tree. Nulls are written explicitly.

    Floats use the shortest text that reads back as the same float, so the
    output is stable across round trips even where it differs from the
    text that was parsed.
    """
    if indent is None:
        indent = settings.JSON_INDENT
    return to_json(coerce_json_value(value), indent=indent).decode("utf-8")
