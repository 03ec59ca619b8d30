from __future__ import annotations

from enum import Enum

# -----------------------------------------------------------------------------
# Attribute names
# -----------------------------------------------------------------------------
ACTIONS = "actions"
CLASS = "class"
ENTITIES = "entities"
FIELDS = "fields"
HREF = "href"
LINKS = "links"
METHOD = "method"
NAME = "name"
PROPERTIES = "properties"
REL = "rel"
TITLE = "title"
TYPE = "type"
VALUE = "value"

SELF = "self"
APPLICATION_SIREN_JSON = "application/vnd.siren+json"


# -----------------------------------------------------------------------------
# Enums
# -----------------------------------------------------------------------------
class Method(str, Enum):
    """HTTP methods an Action may declare"""
    HEAD = "HEAD"
    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    OPTIONS = "OPTIONS"
    DELETE = "DELETE"


class FieldType(str, Enum):
    """Well-known HTML5 input types for Action fields"""
    HIDDEN = "hidden"
    TEXT = "text"
    SEARCH = "search"
    TEL = "tel"
    URL = "url"
    EMAIL = "email"
    PASSWORD = "password"
    DATETIME = "datetime"
    DATE = "date"
    MONTH = "month"
    WEEK = "week"
    TIME = "time"
    DATETIME_LOCAL = "datetime-local"
    NUMBER = "number"
    RANGE = "range"
    COLOR = "color"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    FILE = "file"
