"""Single recursive traversal shared by every schema operation."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TypeVar

from objectid_schema.schema_model.schema_nodes import (
    ArrayNode,
    IdentifierNode,
    ObjectNode,
    PrimitiveNode,
    SchemaNode,
)

R = TypeVar("R")


def fold_schema(
    node: SchemaNode,
    *,
    on_object: Callable[[ObjectNode, Mapping[str, R]], R],
    on_array: Callable[[ArrayNode, R], R],
    on_identifier: Callable[[IdentifierNode], R],
    on_primitive: Callable[[PrimitiveNode], R],
) -> R:
    """Fold a schema tree bottom-up.

    Children are folded before their parent: object properties in declaration order, and the
    items node of an array exactly once. Each callback receives the node together with the
    already-folded results of its children.

    Args:
      node: Root of the tree to fold.
      on_object: Combines an object node with its folded properties.
      on_array: Combines an array node with its folded items node.
      on_identifier: Result for an identifier leaf.
      on_primitive: Result for any other leaf.

    Returns:
      The folded result for ``node``.
    """

    def visit(current: SchemaNode) -> R:
        if isinstance(current, ObjectNode):
            folded = {name: visit(child) for name, child in current.properties.items()}
            return on_object(current, folded)
        if isinstance(current, ArrayNode):
            return on_array(current, visit(current.items))
        if isinstance(current, IdentifierNode):
            return on_identifier(current)
        return on_primitive(current)

    return visit(node)
