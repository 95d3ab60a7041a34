"""Schema scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

from .field_types import RECOGNIZED_TYPE_NAMES

DEFAULT_SCHEMA_FILENAME = "schema.yaml"

_SCHEMA_SCAFFOLD_TEMPLATE = """# Field schema template for field-decoder.
# Replace every <REQUIRED> placeholder before running validate or decode.
# Replace <OPTIONAL> placeholders only when the field needs them.
#
# Recognized field types: {type_names}

fields:
  # One entry per accepted input field; extra input fields are ignored.
  name:
    type: "name-string"
    description: "<OPTIONAL>"
  enabled:
    type: "bool"
    default: false
  ttl:
    # duration-second accepts seconds (90) or duration text ("2m", "1h30m", "7d").
    type: "duration-second"
    default: "<OPTIONAL>"
  allowed_hosts:
    # comma-string-slice accepts a list or a single "a, b, c" string.
    type: "comma-string-slice"
  metadata:
    type: "map"
  <REQUIRED>:
    type: "<REQUIRED>"
"""


def build_placeholder_schema() -> str:
    """Build a YAML schema template with placeholders and inline guidance."""
    return _SCHEMA_SCAFFOLD_TEMPLATE.format(type_names=", ".join(RECOGNIZED_TYPE_NAMES))


def write_placeholder_schema(output_path: Path | str) -> Path:
    """Write the placeholder schema template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Schema file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_schema(), encoding="utf-8")
    return destination.resolve()
