"""Derivation of plain JSON schemas from identifier-aware schemas."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from objectid_schema.schema_model.definition_parser import render_node_shell
from objectid_schema.schema_model.schema_nodes import (
    ArrayNode,
    IdentifierNode,
    ObjectNode,
    SchemaNode,
)

from .schema_fold import fold_schema

OBJECT_ID_PATTERN = "^[a-fA-F0-9]{24}$"


def rewrite_identifiers(root: SchemaNode) -> dict[str, Any]:
    """Return a JSON schema where identifier nodes become pattern-constrained strings.

    ``required`` is carried over from every source node exactly as declared; all other nodes
    render unchanged.
    """

    def on_object(node: ObjectNode, properties: Mapping[str, dict[str, Any]]) -> dict[str, Any]:
        rendered = render_node_shell(node)
        rendered["properties"] = dict(properties)
        return rendered

    def on_array(node: ArrayNode, items: dict[str, Any]) -> dict[str, Any]:
        rendered = render_node_shell(node)
        rendered["items"] = items
        return rendered

    def on_identifier(node: IdentifierNode) -> dict[str, Any]:
        rendered: dict[str, Any] = {"type": "string", "pattern": OBJECT_ID_PATTERN}
        if node.required is not None:
            rendered["required"] = node.required
        return rendered

    return fold_schema(
        root,
        on_object=on_object,
        on_array=on_array,
        on_identifier=on_identifier,
        on_primitive=render_node_shell,
    )


def strip_required(definition: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of a rendered schema with every ``required`` flag removed."""
    stripped: dict[str, Any] = {}
    for key, value in definition.items():
        if key == "required":
            continue
        if key == "properties" and isinstance(value, Mapping):
            stripped[key] = {name: strip_required(child) for name, child in value.items()}
        elif key == "items" and isinstance(value, Mapping):
            stripped[key] = strip_required(value)
        else:
            stripped[key] = value
    return stripped
