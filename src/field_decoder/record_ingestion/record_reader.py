"""Raw input record reading."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


class RecordReadError(Exception):
    """Raised when an input record file cannot be read as a mapping."""


def load_raw_record(record_path: Path | str) -> Mapping[str, Any]:
    """Read a JSON (or YAML, by suffix) document whose root is a mapping."""
    path = Path(record_path)
    if not path.exists():
        raise RecordReadError(f"Input record file not found: {path}")

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in _YAML_SUFFIXES:
        try:
            parsed = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise RecordReadError(f"Failed to parse input record: {exc}") from exc
    else:
        try:
            parsed = json.loads(text)
        except json.JSONDecodeError as exc:
            raise RecordReadError(f"Failed to parse input record: {exc}") from exc

    if not isinstance(parsed, Mapping):
        raise RecordReadError("Input record root must be a mapping.")
    return parsed
