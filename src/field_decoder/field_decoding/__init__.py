"""Field decoding exports."""

from .decode_errors import (
    CoercionError,
    FieldDataDefect,
    FieldDataError,
    SchemaError,
    UnknownTypeError,
)
from .field_coercion import coerce_present_value
from .field_data import FieldData

__all__ = [
    "CoercionError",
    "FieldDataDefect",
    "FieldDataError",
    "SchemaError",
    "UnknownTypeError",
    "coerce_present_value",
    "FieldData",
]
