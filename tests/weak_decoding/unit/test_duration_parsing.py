"""Duration parsing tests."""

from __future__ import annotations

from datetime import timedelta

import pytest
from field_decoder.weak_decoding.duration_parsing import DurationParseError, parse_duration_second


@pytest.mark.parametrize(
    ("text", "expected_seconds"),
    [
        ("30s", 30),
        ("5m", 300),
        ("2m", 120),
        ("1h30m", 5400),
        ("1.5h", 5400),
        ("-1.5h", -5400),
        ("300ms", 0.3),
        ("90", 90),
        ("2d", 172800),
        (" 10s ", 10),
        ("", 0),
        ("0", 0),
    ],
)
def test_parse_duration_second_accepts_duration_text(text: str, expected_seconds: float) -> None:
    assert parse_duration_second(text).total_seconds() == pytest.approx(expected_seconds)


def test_parse_duration_second_treats_numbers_as_seconds() -> None:
    assert parse_duration_second(45) == timedelta(seconds=45)
    assert parse_duration_second(2.5) == timedelta(seconds=2.5)
    assert parse_duration_second(timedelta(minutes=1)) == timedelta(minutes=1)


@pytest.mark.parametrize(
    "value", ["nonsense", "1.5", "5x", "h", "1d2h", "٣٠s", "٣٠", "٢d", True, [30]]
)
def test_parse_duration_second_rejects_invalid_input(value: object) -> None:
    with pytest.raises(DurationParseError):
        parse_duration_second(value)
