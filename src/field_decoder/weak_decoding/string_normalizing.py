"""String collection normalization helpers."""

from __future__ import annotations

from collections.abc import Iterable


def trim_strings(values: Iterable[str]) -> list[str]:
    """Strip surrounding whitespace from each element, keeping order and count."""
    return [value.strip() for value in values]
