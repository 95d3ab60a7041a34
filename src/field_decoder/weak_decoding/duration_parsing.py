"""Human-readable duration parsing."""

from __future__ import annotations

import re
from datetime import timedelta
from decimal import Decimal, InvalidOperation

_UNIT_SECONDS: dict[str, Decimal] = {
    "ns": Decimal("0.000000001"),
    "us": Decimal("0.000001"),
    "µs": Decimal("0.000001"),
    "μs": Decimal("0.000001"),
    "ms": Decimal("0.001"),
    "s": Decimal(1),
    "m": Decimal(60),
    "h": Decimal(3600),
}
_COMPONENT_PATTERN = re.compile(r"(\d*(?:\.\d*)?)(ns|us|µs|μs|ms|s|m|h)", re.ASCII)
_PLAIN_SECONDS_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
_SECONDS_PER_DAY = 86400


class DurationParseError(ValueError):
    """Raised when a value cannot be interpreted as a duration."""


def parse_duration_second(value: object) -> timedelta:
    """Parse a duration where bare numbers are seconds.

    Accepted inputs:
    - timedelta instances (returned unchanged)
    - int/float second counts
    - strings: "" (zero), "90" (seconds), "2d" (days) or unit syntax such as
      "300ms", "1h30m", "-1.5h"
    """
    if isinstance(value, timedelta):
        return value
    if isinstance(value, bool):
        raise DurationParseError(f"could not parse duration from input {value!r}")
    if isinstance(value, (int, float, Decimal)):
        try:
            return timedelta(seconds=float(value))
        except (OverflowError, ValueError) as exc:
            raise DurationParseError(f"duration out of range: {value!r}") from exc
    if not isinstance(value, str):
        raise DurationParseError(f"could not parse duration from input {value!r}")

    text = value.strip()
    if not text:
        return timedelta(0)
    if text.endswith("d"):
        days = text[:-1]
        if not _PLAIN_SECONDS_PATTERN.fullmatch(days):
            raise DurationParseError(f"invalid duration {value!r}")
        return _to_timedelta(Decimal(int(days) * _SECONDS_PER_DAY), value)
    if _PLAIN_SECONDS_PATTERN.fullmatch(text):
        return _to_timedelta(Decimal(int(text)), value)
    return _to_timedelta(_parse_unit_duration(text, original=value), value)


def _parse_unit_duration(text: str, *, original: str) -> Decimal:
    sign = Decimal(1)
    if text[0] in "+-":
        if text[0] == "-":
            sign = Decimal(-1)
        text = text[1:]
    if text == "0":
        return Decimal(0)
    if not text:
        raise DurationParseError(f"invalid duration {original!r}")

    total = Decimal(0)
    position = 0
    while position < len(text):
        match = _COMPONENT_PATTERN.match(text, position)
        if match is None:
            raise DurationParseError(f"invalid duration {original!r}")
        number, unit = match.groups()
        if not any(char.isdigit() for char in number):
            raise DurationParseError(f"invalid duration {original!r}")
        try:
            total += Decimal(number) * _UNIT_SECONDS[unit]
        except InvalidOperation as exc:
            raise DurationParseError(f"invalid duration {original!r}") from exc
        position = match.end()
    return sign * total


def _to_timedelta(seconds: Decimal, original: object) -> timedelta:
    try:
        return timedelta(seconds=float(seconds))
    except (OverflowError, ValueError) as exc:
        raise DurationParseError(f"duration out of range: {original!r}") from exc
