"""Schema document loading service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .field_types import RECOGNIZED_TYPE_NAMES, resolve_field_type
from .schema_models import FieldSchema, SchemaMap

_DEFINITION_KEYS = frozenset({"type", "default", "description"})


class SchemaDocumentError(Exception):
    """Raised when a schema document is missing or invalid."""


def load_schema_map(schema_path: Path | str) -> SchemaMap:
    """Load and validate a YAML/JSON schema document from disk."""
    path = Path(schema_path)
    if not path.exists():
        raise SchemaDocumentError(f"Schema file not found: {path}")
    return parse_schema_map(path.read_text(encoding="utf-8"))


def parse_schema_map(text: str) -> SchemaMap:
    """Parse schema document text into a mapping of field name to FieldSchema."""
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SchemaDocumentError(f"Failed to parse schema document: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise SchemaDocumentError("Schema document root must be a mapping.")

    fields = parsed.get("fields")
    if not isinstance(fields, Mapping):
        raise SchemaDocumentError("Schema document section 'fields' is required.")

    schema: dict[str, FieldSchema] = {}
    for name, definition in fields.items():
        if not isinstance(name, str) or not name.strip():
            raise SchemaDocumentError(f"Field names must be non-empty strings, got {name!r}.")
        schema[name] = _parse_field_definition(name, definition)
    return schema


def _parse_field_definition(name: str, definition: Any) -> FieldSchema:
    if not isinstance(definition, Mapping):
        raise SchemaDocumentError(f"Field '{name}' definition must be a mapping.")

    unexpected = sorted(str(key) for key in definition if key not in _DEFINITION_KEYS)
    if unexpected:
        raise SchemaDocumentError(
            f"Field '{name}' has unsupported keys: {', '.join(unexpected)}."
        )

    declared_type = definition.get("type")
    if not isinstance(declared_type, str) or not declared_type.strip():
        raise SchemaDocumentError(f"fields.{name}.type must be a non-empty string.")
    field_type = resolve_field_type(declared_type.strip())
    if field_type is None:
        raise SchemaDocumentError(
            f"fields.{name}.type '{declared_type}' is not one of: "
            f"{', '.join(RECOGNIZED_TYPE_NAMES)}."
        )

    description = definition.get("description", "")
    if description is None:
        description = ""
    if not isinstance(description, str):
        raise SchemaDocumentError(f"fields.{name}.description must be a string.")

    return FieldSchema(
        type=field_type,
        default=definition.get("default"),
        description=description.strip(),
    )
