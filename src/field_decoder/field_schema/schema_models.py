"""Field schema entities."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from field_decoder.weak_decoding.duration_parsing import DurationParseError, parse_duration_second

from .field_types import FieldType, resolve_field_type, zero_value

_SCHEMA_LOGGER = logging.getLogger("field_decoder.schema")
_SCHEMA_LOGGER.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class FieldSchema:
    """Declared kind, optional default and display text for one field.

    ``type`` stays a plain string when the schema author wrote one; it is
    resolved against :class:`FieldType` when the field is read.
    """

    type: FieldType | str
    default: Any = None
    description: str = ""

    @property
    def field_type(self) -> FieldType | None:
        """Recognized kind, or None for an unrecognized declaration."""
        return resolve_field_type(self.type)

    def default_or_zero(self) -> Any:
        """Return the configured default, or the kind's zero value when none is set.

        Raises:
          ValueError: If the declared kind is not recognized.
        """
        field_type = self.field_type
        if field_type is None:
            raise ValueError(f"unknown type: {self.type}")
        if self.default is None:
            return zero_value(field_type)
        if field_type is FieldType.DURATION_SECOND:
            try:
                return int(parse_duration_second(self.default).total_seconds())
            except DurationParseError:
                _SCHEMA_LOGGER.debug(
                    "Ignoring unparseable duration default %r", self.default
                )
                return zero_value(field_type)
        return copy.deepcopy(self.default)


SchemaMap = Mapping[str, FieldSchema]
