"""Field schema exports."""

from .field_types import RECOGNIZED_TYPE_NAMES, FieldType, resolve_field_type, zero_value
from .schema_loading import SchemaDocumentError, load_schema_map, parse_schema_map
from .schema_models import FieldSchema, SchemaMap
from .schema_scaffold_builder import (
    DEFAULT_SCHEMA_FILENAME,
    build_placeholder_schema,
    write_placeholder_schema,
)

__all__ = [
    "RECOGNIZED_TYPE_NAMES",
    "FieldType",
    "resolve_field_type",
    "zero_value",
    "FieldSchema",
    "SchemaMap",
    "SchemaDocumentError",
    "load_schema_map",
    "parse_schema_map",
    "DEFAULT_SCHEMA_FILENAME",
    "build_placeholder_schema",
    "write_placeholder_schema",
]
