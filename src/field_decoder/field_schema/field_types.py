"""Recognized field kinds and their zero values."""

from __future__ import annotations

import copy
from enum import Enum
from typing import Any


class FieldType(str, Enum):
    """Closed set of field kinds a schema entry may declare."""

    BOOL = "bool"
    INT = "int"
    MAP = "map"
    DURATION_SECOND = "duration-second"
    STRING = "string"
    NAME_STRING = "name-string"
    SLICE = "slice"
    STRING_SLICE = "string-slice"
    COMMA_STRING_SLICE = "comma-string-slice"


RECOGNIZED_TYPE_NAMES: tuple[str, ...] = tuple(field_type.value for field_type in FieldType)

_ZERO_VALUES: dict[FieldType, Any] = {
    FieldType.BOOL: False,
    FieldType.INT: 0,
    FieldType.MAP: {},
    FieldType.DURATION_SECOND: 0,
    FieldType.STRING: "",
    FieldType.NAME_STRING: "",
    FieldType.SLICE: [],
    FieldType.STRING_SLICE: [],
    FieldType.COMMA_STRING_SLICE: [],
}


def resolve_field_type(declared: object) -> FieldType | None:
    """Return the matching FieldType, or None when the declared kind is not recognized."""
    if isinstance(declared, FieldType):
        return declared
    if isinstance(declared, str):
        try:
            return FieldType(declared)
        except ValueError:
            return None
    return None


def zero_value(field_type: FieldType) -> Any:
    """Return the zero value for a kind; collections are fresh instances."""
    return copy.copy(_ZERO_VALUES[field_type])
