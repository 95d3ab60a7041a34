"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from field_decoder.field_decoding import FieldData, FieldDataError
from field_decoder.field_schema import (
    DEFAULT_SCHEMA_FILENAME,
    SchemaDocumentError,
    load_schema_map,
    write_placeholder_schema,
)
from field_decoder.record_ingestion import RecordReadError, load_raw_record


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="field-decoder")
@click.option("--verbose", is_flag=True, default=False, help="Log decoding details to stderr.")
def cli(verbose: bool) -> None:
    """Schema-directed decoding and validation of loosely-typed input records."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)


@cli.command(name="generate-schema")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_SCHEMA_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML field schema template to write",
)
def generate_schema(output_path: str) -> None:
    """Generate a placeholder YAML field schema with guidance comments."""
    try:
        resolved_output = write_placeholder_schema(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="validate")
@click.option(
    "--schema",
    "schema_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON field schema file",
)
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the JSON input record",
)
def validate(schema_path: str, input_path: str) -> None:
    """Check that every schema field present in the input record can be decoded."""
    _load_validated_field_data(schema_path, input_path)
    click.echo("valid")


@cli.command(name="decode")
@click.option(
    "--schema",
    "schema_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON field schema file",
)
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the JSON input record",
)
@click.option(
    "--field",
    "field_names",
    multiple=True,
    help="Field to print; repeat for several. Defaults to every schema field.",
)
def decode(schema_path: str, input_path: str, field_names: tuple[str, ...]) -> None:
    """Validate the input record and print decoded field values as JSON."""
    field_data = _load_validated_field_data(schema_path, input_path)
    selected = field_names or tuple(sorted(field_data.schema))
    unknown = [name for name in selected if name not in field_data.schema]
    if unknown:
        raise CliError(f"Unknown field(s): {', '.join(unknown)}")
    decoded = {name: field_data.get(name) for name in selected}
    click.echo(json.dumps(decoded, indent=2, sort_keys=True, default=str))


def _load_validated_field_data(schema_path: str, input_path: str) -> FieldData:
    try:
        field_data = FieldData(raw=load_raw_record(input_path), schema=load_schema_map(schema_path))
        field_data.validate()
    except (SchemaDocumentError, RecordReadError, OSError) as exc:
        raise CliError(str(exc)) from exc
    except FieldDataError as exc:
        raise CliError(f"Rejected input field '{exc.field}': {exc}") from exc
    return field_data


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
