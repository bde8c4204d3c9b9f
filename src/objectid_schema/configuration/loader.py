"""Schema definition file loader."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from objectid_schema.schema import Schema
from objectid_schema.schema_model import SchemaDefinitionError


class ConfigurationError(Exception):
    """Raised when a schema definition file is invalid."""


def load_schema_definition(definition_path: Path | str) -> dict[str, Any]:
    """Read a YAML or JSON schema definition file.

    A root mapping whose only key is ``schema`` is unwrapped, so a definition may be embedded in
    a larger configuration file.

    Raises:
      ConfigurationError: If the file is missing, unparsable, or not a mapping.
    """
    path = Path(definition_path)
    if not path.exists():
        raise ConfigurationError(f"Schema definition file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse schema definition file: {exc}") from exc

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Schema definition root must be a mapping.")
    if set(parsed) == {"schema"}:
        parsed = parsed["schema"]
        if not isinstance(parsed, Mapping):
            raise ConfigurationError("Configuration section 'schema' must be a mapping.")
    return dict(parsed)


def load_schema(definition_path: Path | str) -> Schema:
    """Load a schema definition file and build a ``Schema`` from it."""
    definition = load_schema_definition(definition_path)
    try:
        return Schema(definition)
    except SchemaDefinitionError as exc:
        raise ConfigurationError(f"Invalid schema definition: {exc}") from exc
