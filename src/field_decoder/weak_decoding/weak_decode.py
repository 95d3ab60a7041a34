"""Weakly-typed decoding of dynamic values into target shapes.

Each ``decode_*`` helper accepts the target shape unchanged and converts
compatible representations (numeric strings to integers, numbers to strings,
...). Incompatible shapes raise :class:`WeakDecodeError`.

``None`` decodes to the zero value of scalar shapes and to ``None`` for
collection shapes, so callers can tell a decoded-empty collection apart.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_TRUE_TOKENS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_TOKENS = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_INT_TEXT_PATTERN = re.compile(r"[+-]?[0-9A-Za-z_]+", re.ASCII)


class WeakDecodeError(ValueError):
    """Raised when a value cannot be weakly decoded into the requested shape."""


def _type_name(value: object) -> str:
    return type(value).__name__


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def decode_bool(value: object) -> bool:
    """Decode into a bool."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, Decimal):
        return not value.is_zero()
    if isinstance(value, str):
        if value in _TRUE_TOKENS:
            return True
        if value in _FALSE_TOKENS or value == "":
            return False
        raise WeakDecodeError(f"cannot parse {value!r} as bool")
    raise WeakDecodeError(f"expected type 'bool', got unconvertible type '{_type_name(value)}'")


def decode_int(value: object) -> int:
    """Decode into a signed 64-bit integer."""
    if value is None:
        return 0
    if isinstance(value, bool):
        return 1 if value else 0
    if isinstance(value, int):
        return check_int64(value, value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise WeakDecodeError(f"cannot convert {value!r} to int")
        return check_int64(int(value), value)
    if isinstance(value, Decimal):
        return check_int64(decimal_to_int(value), value)
    if isinstance(value, str):
        return check_int64(_parse_int_text(value), value)
    raise WeakDecodeError(f"expected type 'int', got unconvertible type '{_type_name(value)}'")


def decimal_to_int(value: Decimal) -> int:
    """Convert a numeric wire value written as an integer literal ("12", not "12.0")."""
    if value.as_tuple().exponent != 0:
        raise WeakDecodeError(f"cannot convert number {value} to int")
    return int(value)


def _parse_int_text(text: str) -> int:
    if text == "":
        return 0
    if not _INT_TEXT_PATTERN.fullmatch(text):
        raise WeakDecodeError(f"cannot parse {text!r} as int")
    sign = ""
    digits = text
    if digits[0] in "+-":
        sign, digits = digits[0], digits[1:]
    # a leading zero followed by digits is octal ("010" is 8)
    if len(digits) > 1 and digits[0] == "0" and (digits[1].isdigit() or digits[1] == "_"):
        digits = "0o" + digits[1:]
    try:
        return int(sign + digits, 0)
    except ValueError as exc:
        raise WeakDecodeError(f"cannot parse {text!r} as int") from exc


def check_int64(result: int, original: object) -> int:
    """Return the result unchanged when it fits a signed 64-bit integer."""
    if result < _INT64_MIN or result > _INT64_MAX:
        raise WeakDecodeError(f"value {original!r} is out of range for int")
    return result


def decode_string(value: object) -> str:
    """Decode into a str."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise WeakDecodeError(f"cannot decode bytes {value!r} as UTF-8 text") from exc
    raise WeakDecodeError(f"expected type 'string', got unconvertible type '{_type_name(value)}'")


def _format_float(value: float) -> str:
    if not math.isfinite(value):
        if math.isnan(value):
            return "NaN"
        return "+Inf" if value > 0 else "-Inf"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def decode_map(value: object) -> dict[str, Any] | None:
    """Decode into a dict keyed by strings; a sequence of mappings is merged in order."""
    if value is None:
        return None
    if isinstance(value, Mapping):
        return _decode_mapping(value)
    if _is_sequence(value):
        merged: dict[str, Any] = {}
        for index, item in enumerate(value):  # type: ignore[arg-type]
            if not isinstance(item, Mapping):
                raise WeakDecodeError(
                    f"[{index}]: expected a map, got '{_type_name(item)}'"
                )
            merged.update(_decode_mapping(item))
        return merged
    raise WeakDecodeError(f"expected a map, got '{_type_name(value)}'")


def _decode_mapping(value: Mapping[Any, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, item in value.items():
        try:
            decoded_key = decode_string(key)
        except WeakDecodeError as exc:
            raise WeakDecodeError(f"map key {key!r}: {exc}") from exc
        result[decoded_key] = item
    return result


def decode_slice(value: object) -> list[Any] | None:
    """Decode into a list; single non-sequence values are lifted into one-element lists."""
    if value is None:
        return None
    if _is_sequence(value):
        return list(value)  # type: ignore[call-overload]
    if isinstance(value, Mapping) and not value:
        return []
    return [value]


def decode_string_slice(value: object) -> list[str] | None:
    """Decode into a list of strings, weakly decoding every element."""
    items = decode_slice(value)
    if items is None:
        return None
    result: list[str] = []
    failures: list[str] = []
    for index, item in enumerate(items):
        try:
            result.append(decode_string(item))
        except WeakDecodeError as exc:
            failures.append(f"[{index}]: {exc}")
    if failures:
        raise WeakDecodeError(
            f"{len(failures)} error(s) decoding: " + "; ".join(failures)
        )
    return result


def split_on_comma(value: object) -> object:
    """Split a single string on commas before slice decoding; other values pass through."""
    if isinstance(value, str):
        if value == "":
            return []
        return value.split(",")
    return value


def decode_comma_string_slice(value: object) -> list[str] | None:
    """Decode into a list of strings, splitting a single string on commas first."""
    return decode_string_slice(split_on_comma(value))
