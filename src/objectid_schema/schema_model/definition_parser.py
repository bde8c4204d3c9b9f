"""Schema definition parsing and rendering."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from .schema_nodes import (
    IDENTIFIER_TYPE,
    WILDCARD,
    ArrayNode,
    IdentifierNode,
    ObjectNode,
    PrimitiveNode,
    SchemaNode,
)

_STRUCTURAL_KEYS = frozenset({"type", "required", "properties", "items"})
_COMPOSITION_KEYS = ("allOf", "anyOf", "oneOf", "not")
_PRIMITIVE_TYPES = frozenset(
    {"string", "number", "integer", "boolean", "object", "array", "null", "any"}
)


class SchemaDefinitionError(Exception):
    """Raised when a schema definition cannot be turned into a schema tree."""

    def __init__(self, message: str, path: tuple[str, ...] = ()) -> None:
        super().__init__(f"{format_location(path)}: {message}")
        self.path = path


def format_location(path: tuple[str, ...]) -> str:
    """Render a schema location as a dotted string."""
    return ".".join(path) if path else "<root>"


def parse_schema_definition(definition: Any) -> SchemaNode:
    """Parse a mapping-shaped schema definition into an immutable node tree."""
    return _parse_node(definition, path=())


def _parse_node(definition: Any, *, path: tuple[str, ...]) -> SchemaNode:
    if not isinstance(definition, Mapping):
        raise SchemaDefinitionError("Schema nodes must be mappings.", path)
    for key in _COMPOSITION_KEYS:
        if key in definition:
            raise SchemaDefinitionError(f"Composition keyword '{key}' is not supported.", path)

    required = _parse_required(definition.get("required"), path)
    keywords = {
        key: copy.deepcopy(value)
        for key, value in definition.items()
        if key not in _STRUCTURAL_KEYS
    }
    node_type = _parse_type(definition.get("type"), path)

    if node_type == "object":
        properties = definition.get("properties")
        if not isinstance(properties, Mapping):
            raise SchemaDefinitionError("Object nodes require a 'properties' mapping.", path)
        children: dict[str, SchemaNode] = {}
        for name, child in properties.items():
            if not isinstance(name, str):
                raise SchemaDefinitionError("Property names must be strings.", path)
            children[name] = _parse_node(child, path=(*path, name))
        return ObjectNode(properties=children, required=required, keywords=keywords)

    if node_type == "array":
        items = definition.get("items")
        if not isinstance(items, Mapping):
            raise SchemaDefinitionError("Array nodes require an 'items' mapping.", path)
        return ArrayNode(
            items=_parse_node(items, path=(*path, WILDCARD)),
            required=required,
            keywords=keywords,
        )

    if node_type == IDENTIFIER_TYPE:
        return IdentifierNode(required=required, keywords=keywords)

    return PrimitiveNode(kind=node_type, required=required, keywords=keywords)


def _parse_type(value: Any, path: tuple[str, ...]) -> str | tuple[str, ...]:
    if isinstance(value, str) and value:
        if value != IDENTIFIER_TYPE and value not in _PRIMITIVE_TYPES:
            raise SchemaDefinitionError(f"Unknown type '{value}'.", path)
        return value
    if isinstance(value, list) and value and all(isinstance(item, str) for item in value):
        if IDENTIFIER_TYPE in value:
            raise SchemaDefinitionError(
                f"'{IDENTIFIER_TYPE}' cannot be combined with other types.", path
            )
        for item in value:
            if item not in _PRIMITIVE_TYPES:
                raise SchemaDefinitionError(f"Unknown type '{item}'.", path)
        return tuple(value)
    raise SchemaDefinitionError("'type' must be a string or a list of strings.", path)


def _parse_required(value: Any, path: tuple[str, ...]) -> bool | None:
    if value is None or isinstance(value, bool):
        return value
    raise SchemaDefinitionError("'required' must be a boolean.", path)


def render_node_shell(node: SchemaNode) -> dict[str, Any]:
    """Render a node's own keywords without its children."""
    if isinstance(node, ObjectNode):
        node_type: Any = "object"
    elif isinstance(node, ArrayNode):
        node_type = "array"
    elif isinstance(node, IdentifierNode):
        node_type = IDENTIFIER_TYPE
    else:
        node_type = node.kind if isinstance(node.kind, str) else list(node.kind)
    rendered: dict[str, Any] = {"type": node_type}
    rendered.update(copy.deepcopy(dict(node.keywords)))
    if node.required is not None:
        rendered["required"] = node.required
    return rendered


def node_to_definition(node: SchemaNode) -> dict[str, Any]:
    """Render a node tree back to its mapping form."""
    rendered = render_node_shell(node)
    if isinstance(node, ObjectNode):
        rendered["properties"] = {
            name: node_to_definition(child) for name, child in node.properties.items()
        }
    elif isinstance(node, ArrayNode):
        rendered["items"] = node_to_definition(node.items)
    return rendered
