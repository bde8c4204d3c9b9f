"""Schema definition loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from objectid_schema.configuration import ConfigurationError, load_schema, load_schema_definition


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_definition(tmp_path: Path) -> None:
    path = _write_file(
        tmp_path / "schema.yaml",
        """
type: object
properties:
  _id:
    type: objectid
    required: true
  tags:
    type: array
    items:
      type: string
""",
    )

    schema = load_schema(path)

    assert schema.get_object_id_paths() == [("_id",)]
    assert schema.definition()["properties"]["_id"] == {"type": "objectid", "required": True}


def test_loads_json_definition(tmp_path: Path) -> None:
    path = _write_file(
        tmp_path / "schema.json",
        json.dumps({"type": "array", "items": {"type": "objectid"}}),
    )

    assert load_schema_definition(path) == {"type": "array", "items": {"type": "objectid"}}


def test_unwraps_schema_section(tmp_path: Path) -> None:
    path = _write_file(tmp_path / "config.yaml", "schema:\n  type: objectid\n")

    assert load_schema_definition(path) == {"type": "objectid"}


def test_errors_when_file_is_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_schema_definition(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    "contents",
    ["", "- type: objectid\n", "schema: objectid\n", "type: [unterminated\n"],
)
def test_errors_when_file_is_not_a_mapping(tmp_path: Path, contents: str) -> None:
    path = _write_file(tmp_path / "schema.yaml", contents)

    with pytest.raises(ConfigurationError):
        load_schema_definition(path)


def test_wraps_invalid_definitions(tmp_path: Path) -> None:
    path = _write_file(tmp_path / "schema.yaml", "type: object\n")

    with pytest.raises(ConfigurationError, match="Invalid schema definition"):
        load_schema(path)
