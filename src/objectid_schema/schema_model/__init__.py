"""Schema model exports."""

from .definition_parser import (
    SchemaDefinitionError,
    format_location,
    node_to_definition,
    parse_schema_definition,
    render_node_shell,
)
from .schema_nodes import (
    IDENTIFIER_TYPE,
    WILDCARD,
    ArrayNode,
    IdentifierNode,
    ObjectNode,
    PrimitiveNode,
    SchemaNode,
    SchemaPath,
)

__all__ = [
    "IDENTIFIER_TYPE",
    "WILDCARD",
    "ArrayNode",
    "IdentifierNode",
    "ObjectNode",
    "PrimitiveNode",
    "SchemaNode",
    "SchemaPath",
    "SchemaDefinitionError",
    "format_location",
    "render_node_shell",
    "node_to_definition",
    "parse_schema_definition",
]
