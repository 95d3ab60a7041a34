"""Schema-directed access to a weakly-typed input record."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from field_decoder.field_schema.schema_models import FieldSchema, SchemaMap

from .decode_errors import (
    CoercionError,
    FieldDataDefect,
    FieldDataError,
    SchemaError,
    UnknownTypeError,
)
from .field_coercion import coerce_present_value

_DECODER_LOGGER = logging.getLogger("field_decoder.decoding")
_DECODER_LOGGER.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class FieldData:
    """A raw input record paired with the schema describing its fields.

    Use ``validate`` once on untrusted input, then read values with ``get``
    or ``get_ok``. ``get_ok_err`` is the accessor for input that has not
    been validated; it raises FieldDataError subclasses instead of defects.
    """

    raw: Mapping[str, Any]
    schema: SchemaMap

    def validate(self) -> None:
        """Check that every schema-known field present in the record coerces.

        Record fields without a schema entry are ignored; schema fields missing
        from the record are not visited.

        Raises:
          UnknownTypeError: If a present field declares an unrecognized kind.
          CoercionError: If a present field cannot be converted.
        """
        for field, value in self.raw.items():
            field_schema = self.schema.get(field)
            if field_schema is None:
                _DECODER_LOGGER.debug("Ignoring field %s: not in the schema", field)
                continue

            field_type = field_schema.field_type
            if field_type is None:
                raise UnknownTypeError(
                    f"unknown field type {field_schema.type} for field {field}",
                    field=field,
                    declared_type=field_schema.type,
                )
            try:
                coerce_present_value(field, value, field_type)
            except CoercionError as exc:
                raise CoercionError(
                    f"Error converting input {value!r} for field {field}: {exc}",
                    field=field,
                ) from exc

    def get(self, key: str) -> Any:
        """Return the decoded value, or the default/zero value when the field is not set.

        Raises:
          FieldDataDefect: If the key is not in the schema or the input was not valid.
        """
        self._require_schema(key)
        value, _ = self.get_ok(key)
        return value

    def get_default_or_zero(self, key: str) -> Any:
        """Return the schema default for the key, or its kind's zero value."""
        return self._default_or_zero(key, self._require_schema(key))

    def get_ok(self, key: str) -> tuple[Any, bool]:
        """Return the decoded value and whether the field was set in the record.

        Unknown keys yield ``(None, False)``. Absent fields, and present fields
        that decode to nothing, yield the default/zero value; the flag follows
        the record, not the decoded result.

        Raises:
          FieldDataDefect: If the field cannot be decoded.
        """
        field_schema = self.schema.get(key)
        if field_schema is None:
            return None, False

        try:
            result, present = self.get_ok_err(key)
        except FieldDataError as exc:
            raise FieldDataDefect(f"error reading {key}: {exc}") from exc

        if result is None:
            _DECODER_LOGGER.debug("Using default for field %s", key)
            result = self._default_or_zero(key, field_schema)
        return result, present

    def get_ok_err(self, key: str) -> tuple[Any, bool]:
        """Return the decoded value and presence flag, raising on bad input.

        Returns ``(None, False)`` when the key is absent from the record.

        Raises:
          SchemaError: If the key is not in the schema.
          UnknownTypeError: If the field declares an unrecognized kind.
          CoercionError: If the raw value cannot be converted.
        """
        field_schema = self.schema.get(key)
        if field_schema is None:
            raise SchemaError(f"unknown field: {key}", field=key)

        field_type = field_schema.field_type
        if field_type is None:
            raise UnknownTypeError(
                f"unknown field type {field_schema.type} for field {key}",
                field=key,
                declared_type=field_schema.type,
            )

        if key not in self.raw:
            return None, False
        return coerce_present_value(key, self.raw[key], field_type)

    def _require_schema(self, key: str) -> FieldSchema:
        field_schema = self.schema.get(key)
        if field_schema is None:
            raise FieldDataDefect(f"field {key} not in the schema")
        return field_schema

    @staticmethod
    def _default_or_zero(key: str, field_schema: FieldSchema) -> Any:
        try:
            return field_schema.default_or_zero()
        except ValueError as exc:
            raise FieldDataDefect(f"error reading {key}: {exc}") from exc
