"""Weak decoding collaborators: value coercion, durations, string trimming."""

from .duration_parsing import DurationParseError, parse_duration_second
from .string_normalizing import trim_strings
from .weak_decode import (
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
    split_on_comma,
)

__all__ = [
    "DurationParseError",
    "parse_duration_second",
    "trim_strings",
    "WeakDecodeError",
    "check_int64",
    "decimal_to_int",
    "decode_bool",
    "decode_comma_string_slice",
    "decode_int",
    "decode_map",
    "decode_slice",
    "decode_string",
    "decode_string_slice",
    "split_on_comma",
]
