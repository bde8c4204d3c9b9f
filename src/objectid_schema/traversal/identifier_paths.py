"""Identifier path enumeration."""

from __future__ import annotations

from objectid_schema.schema_model.schema_nodes import WILDCARD, SchemaNode, SchemaPath

from .schema_fold import fold_schema


def find_identifier_paths(root: SchemaNode) -> list[SchemaPath]:
    """Return every path at which the schema declares an identifier, in traversal order.

    Array levels contribute one ``"*"`` segment each; an identifier root yields the empty path.
    """
    return fold_schema(
        root,
        on_object=lambda _node, children: [
            (name, *path) for name, child_paths in children.items() for path in child_paths
        ],
        on_array=lambda _node, item_paths: [(WILDCARD, *path) for path in item_paths],
        on_identifier=lambda _node: [()],
        on_primitive=lambda _node: [],
    )
