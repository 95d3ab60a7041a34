"""Per-kind coercion of raw values into typed field values."""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Mapping
from decimal import Decimal
from typing import Any

from field_decoder.field_schema.field_types import FieldType
from field_decoder.weak_decoding import (
    DurationParseError,
    WeakDecodeError,
    check_int64,
    decimal_to_int,
    decode_bool,
    decode_comma_string_slice,
    decode_int,
    decode_map,
    decode_slice,
    decode_string,
    decode_string_slice,
    parse_duration_second,
    trim_strings,
)

from .decode_errors import CoercionError, FieldDataDefect

_NAME_PATTERN = re.compile(r"\w(([\w.-]+)?\w)?", re.ASCII)
_NAME_MISMATCH_MESSAGE = "field does not match the formatting rules"

# A null raw value for these kinds means "not provided".
_NULL_MEANS_ABSENT = frozenset({FieldType.DURATION_SECOND})


class _NameMismatchError(ValueError):
    pass


class _DurationInputError(ValueError):
    pass


def _coerce_name_string(raw: object) -> str:
    result = decode_string(raw)
    if not _NAME_PATTERN.fullmatch(result):
        raise _NameMismatchError(_NAME_MISMATCH_MESSAGE)
    return result


def _coerce_duration_second(raw: object) -> int:
    if isinstance(raw, bool):
        raise _DurationInputError(f"invalid input '{raw}'")
    if isinstance(raw, int):
        return check_int64(raw, raw)
    if isinstance(raw, float):
        if not math.isfinite(raw):
            raise _DurationInputError(f"invalid input '{raw}'")
        return check_int64(int(raw), raw)
    if isinstance(raw, str):
        return check_int64(int(parse_duration_second(raw).total_seconds()), raw)
    if isinstance(raw, Decimal):
        return check_int64(decimal_to_int(raw), raw)
    raise _DurationInputError(f"invalid input '{raw}'")


def _coerce_string_slice(raw: object) -> list[str] | None:
    result = decode_string_slice(raw)
    return None if result is None else trim_strings(result)


def _coerce_comma_string_slice(raw: object) -> list[str] | None:
    result = decode_comma_string_slice(raw)
    return None if result is None else trim_strings(result)


_COERCERS: Mapping[FieldType, Callable[[object], Any]] = {
    FieldType.BOOL: decode_bool,
    FieldType.INT: decode_int,
    FieldType.STRING: decode_string,
    FieldType.NAME_STRING: _coerce_name_string,
    FieldType.MAP: decode_map,
    FieldType.DURATION_SECOND: _coerce_duration_second,
    FieldType.SLICE: decode_slice,
    FieldType.STRING_SLICE: _coerce_string_slice,
    FieldType.COMMA_STRING_SLICE: _coerce_comma_string_slice,
}

_COERCION_FAILURES = (
    WeakDecodeError,
    DurationParseError,
    _NameMismatchError,
    _DurationInputError,
)


def coerce_present_value(field: str, raw: object, field_type: FieldType) -> tuple[Any, bool]:
    """Coerce one raw value into its declared kind.

    Returns:
      The typed value and whether the field counts as present. A decoded
      value of None means the field was present but decoded to nothing.

    Raises:
      CoercionError: If the raw representation is not compatible with the kind.
      FieldDataDefect: If the kind has no coercion rule.
    """
    coercer = _COERCERS.get(field_type)
    if coercer is None:
        raise FieldDataDefect(f"Unknown type: {field_type}")
    if raw is None and field_type in _NULL_MEANS_ABSENT:
        return None, False
    try:
        return coercer(raw), True
    except _COERCION_FAILURES as exc:
        raise CoercionError(str(exc), field=field) from exc
