"""Per-kind coercion dispatch tests."""

from __future__ import annotations

from decimal import Decimal

import pytest
from field_decoder.field_decoding.decode_errors import CoercionError, FieldDataDefect
from field_decoder.field_decoding.field_coercion import coerce_present_value
from field_decoder.field_schema.field_types import FieldType


@pytest.mark.parametrize(
    ("field_type", "raw", "expected"),
    [
        (FieldType.BOOL, "true", True),
        (FieldType.INT, "42", 42),
        (FieldType.STRING, 7, "7"),
        (FieldType.NAME_STRING, "my-secret.v1", "my-secret.v1"),
        (FieldType.NAME_STRING, "a", "a"),
        (FieldType.MAP, {"k": "v"}, {"k": "v"}),
        (FieldType.DURATION_SECOND, "2m", 120),
        (FieldType.DURATION_SECOND, 90, 90),
        (FieldType.DURATION_SECOND, 90.9, 90),
        (FieldType.DURATION_SECOND, Decimal("30"), 30),
        (FieldType.SLICE, [1, "a"], [1, "a"]),
        (FieldType.STRING_SLICE, [" a ", 2], ["a", "2"]),
        (FieldType.COMMA_STRING_SLICE, "a, b ,c", ["a", "b", "c"]),
        (FieldType.COMMA_STRING_SLICE, [" x ", "y"], ["x", "y"]),
    ],
)
def test_compatible_values_coerce(field_type: FieldType, raw: object, expected: object) -> None:
    assert coerce_present_value("field", raw, field_type) == (expected, True)


@pytest.mark.parametrize(
    ("field_type", "raw"),
    [
        (FieldType.BOOL, "maybe"),
        (FieldType.INT, "ten"),
        (FieldType.STRING, {"a": 1}),
        (FieldType.NAME_STRING, "-bad"),
        (FieldType.NAME_STRING, "bad!"),
        (FieldType.NAME_STRING, ""),
        (FieldType.NAME_STRING, "bad-"),
        (FieldType.MAP, "not a map"),
        (FieldType.DURATION_SECOND, "nonsense"),
        (FieldType.DURATION_SECOND, True),
        (FieldType.DURATION_SECOND, [30]),
        (FieldType.DURATION_SECOND, Decimal("1.5")),
        (FieldType.DURATION_SECOND, Decimal("1.0")),
        (FieldType.DURATION_SECOND, 2**63),
        (FieldType.DURATION_SECOND, "٣٠s"),
        (FieldType.INT, "08"),
        (FieldType.INT, "٣"),
        (FieldType.STRING_SLICE, [["nested"]]),
        (FieldType.COMMA_STRING_SLICE, {"a": 1}),
    ],
)
def test_incompatible_values_raise_coercion_error(field_type: FieldType, raw: object) -> None:
    with pytest.raises(CoercionError) as exc_info:
        coerce_present_value("field", raw, field_type)

    assert exc_info.value.field == "field"
    assert exc_info.value.__cause__ is not None


def test_name_string_mismatch_uses_formatting_message() -> None:
    with pytest.raises(CoercionError, match="does not match the formatting rules"):
        coerce_present_value("name", "bad!", FieldType.NAME_STRING)


def test_null_duration_is_not_present() -> None:
    assert coerce_present_value("ttl", None, FieldType.DURATION_SECOND) == (None, False)


def test_null_collections_decode_to_none_but_stay_present() -> None:
    assert coerce_present_value("m", None, FieldType.MAP) == (None, True)
    assert coerce_present_value("s", None, FieldType.STRING_SLICE) == (None, True)


def test_unknown_kind_reaching_dispatcher_is_a_defect() -> None:
    with pytest.raises(FieldDataDefect, match="Unknown type"):
        coerce_present_value("field", "x", "float")  # type: ignore[arg-type]
