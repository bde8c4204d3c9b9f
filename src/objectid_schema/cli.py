"""Command line interface entry point."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import click
from bson import ObjectId, json_util

from objectid_schema.configuration import ConfigurationError, load_schema
from objectid_schema.identifiers import IdentifierConversionError
from objectid_schema.schema import Schema
from objectid_schema.schema_model import format_location
from objectid_schema.traversal import walk_document
from objectid_schema.validation import ValidationError

_SCHEMA_OPTION = click.option(
    "--schema",
    "schema_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON schema definition file",
)
_INPUT_OPTION = click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the JSON document (MongoDB extended JSON is accepted)",
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="objectid-schema")
def cli() -> None:
    """Schema-driven ObjectId validation and conversion utility."""


@cli.command(name="paths")
@_SCHEMA_OPTION
def show_paths(schema_path: str) -> None:
    """Print every identifier path declared by the schema, one per line."""
    schema = _load_schema(schema_path)
    for path in schema.get_object_id_paths():
        click.echo(format_location(path))


@cli.command(name="json-schema")
@_SCHEMA_OPTION
def show_json_schema(schema_path: str) -> None:
    """Print the schema with identifiers rewritten to pattern-constrained strings."""
    schema = _load_schema(schema_path)
    click.echo(json.dumps(schema.get_json_schema(), indent=2))


@cli.command(name="validate")
@_SCHEMA_OPTION
@_INPUT_OPTION
@click.option(
    "--partial",
    is_flag=True,
    default=False,
    help="Ignore required properties and only check the fields that are present.",
)
def validate(schema_path: str, input_path: str, partial: bool) -> None:
    """Validate a JSON document against the schema."""
    schema = _load_schema(schema_path)
    document = _identifiers_as_strings(schema, _load_document(input_path))
    try:
        if partial:
            schema.partial_validate(document)
        else:
            schema.validate(document)
    except ValidationError as exc:
        lines = [f"{violation.location}: {violation.message}" for violation in exc.errors]
        raise CliError("Document is invalid:\n" + "\n".join(lines)) from exc
    click.echo("valid")


@cli.command(name="convert")
@_SCHEMA_OPTION
@_INPUT_OPTION
@click.option(
    "--to",
    "target",
    required=True,
    type=click.Choice(["strings", "ids"]),
    help="Convert identifiers to hexadecimal strings or to ObjectIds",
)
def convert(schema_path: str, input_path: str, target: str) -> None:
    """Convert identifiers of a JSON document and print the result as extended JSON."""
    schema = _load_schema(schema_path)
    document = _load_document(input_path)
    try:
        if target == "strings":
            converted = schema.ids_to_strings(document)
        else:
            converted = schema.strings_to_ids(document)
    except IdentifierConversionError as exc:
        raise CliError(str(exc)) from exc
    click.echo(json_util.dumps(converted, indent=2))


def _load_schema(schema_path: str) -> Schema:
    try:
        return load_schema(schema_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc


def _identifiers_as_strings(schema: Schema, document: Any) -> Any:
    # Extended JSON decodes {"$oid": ...} to ObjectId; the derived schema expects strings.
    return walk_document(
        schema.root,
        document,
        lambda value, _path: str(value) if isinstance(value, ObjectId) else value,
    )


def _load_document(input_path: str) -> Any:
    try:
        return json_util.loads(Path(input_path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise CliError(f"Failed to read document {input_path}: {exc}") from exc


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
