"""Lockstep walk of a schema tree and a data document."""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping
from typing import Any

from objectid_schema.schema_model.schema_nodes import ArrayNode, ObjectNode, SchemaNode

from .schema_fold import fold_schema

DocumentPath = tuple[str | int, ...]
IdentifierTransform = Callable[[Any, DocumentPath], Any]
_Walker = Callable[[Any, DocumentPath], Any]


def build_document_walker(root: SchemaNode, transform: IdentifierTransform) -> _Walker:
    """Fold the schema into a function that rewrites identifier values of a document.

    The returned function takes a document and its location (``()`` for the root) and returns a
    new document. ``transform`` is applied to every value found at an identifier position and
    receives the concrete location, array indices included. Declared properties missing from the
    data are skipped, undeclared keys and values whose shape does not match the schema are
    deep-copied through.
    """

    def on_object(_node: ObjectNode, properties: Mapping[str, _Walker]) -> _Walker:
        def walk(value: Any, path: DocumentPath) -> Any:
            if not isinstance(value, Mapping):
                return copy.deepcopy(value)
            result = {}
            for key, item in value.items():
                child = properties.get(key)
                result[key] = child(item, (*path, key)) if child else copy.deepcopy(item)
            return result

        return walk

    def on_array(_node: ArrayNode, items: _Walker) -> _Walker:
        def walk(value: Any, path: DocumentPath) -> Any:
            if not isinstance(value, list | tuple):
                return copy.deepcopy(value)
            return [items(element, (*path, index)) for index, element in enumerate(value)]

        return walk

    return fold_schema(
        root,
        on_object=on_object,
        on_array=on_array,
        on_identifier=lambda _node: transform,
        on_primitive=lambda _node: _copy_value,
    )


def walk_document(root: SchemaNode, document: Any, transform: IdentifierTransform) -> Any:
    """Return a copy of ``document`` with ``transform`` applied at every identifier position."""
    return build_document_walker(root, transform)(document, ())


def _copy_value(value: Any, _path: DocumentPath) -> Any:
    return copy.deepcopy(value)
