"""Identifier-aware schema facade."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from objectid_schema.identifiers import identifier_to_string, string_to_identifier
from objectid_schema.schema_model import (
    SchemaNode,
    SchemaPath,
    node_to_definition,
    parse_schema_definition,
)
from objectid_schema.traversal import find_identifier_paths, rewrite_identifiers, walk_document
from objectid_schema.validation import validate_document

_LOGGER = logging.getLogger(__name__)


class Schema:
    """A parsed schema definition with ``objectid`` support.

    Instances are immutable; every call derives its own artifacts from the parsed tree, so one
    instance may be shared freely.

    Example:
      >>> schema = Schema({"type": "array", "items": {"type": "objectid"}})
      >>> schema.get_object_id_paths()
      [('*',)]
    """

    __slots__ = ("_root",)

    def __init__(self, definition: Mapping[str, Any]) -> None:
        self._root = parse_schema_definition(definition)
        _LOGGER.debug("Parsed schema with root type %s", type(self._root).__name__)

    @property
    def root(self) -> SchemaNode:
        """Return the parsed schema tree."""
        return self._root

    def definition(self) -> dict[str, Any]:
        """Return the schema definition rendered from the parsed tree."""
        return node_to_definition(self._root)

    def get_object_id_paths(self) -> list[SchemaPath]:
        """Return the paths of all identifier nodes; ``"*"`` stands for every array element."""
        paths = find_identifier_paths(self._root)
        _LOGGER.debug("Found %d identifier path(s)", len(paths))
        return paths

    def ids_to_strings(self, document: Any) -> Any:
        """Return a copy of ``document`` with identifiers in hexadecimal string form.

        Raises:
          IdentifierConversionError: If an identifier position holds neither an ObjectId nor a
            valid identifier string.
        """
        return walk_document(self._root, document, identifier_to_string)

    def strings_to_ids(self, document: Any) -> Any:
        """Return a copy of ``document`` with identifiers as ``ObjectId`` values.

        Raises:
          IdentifierConversionError: If an identifier position holds neither an ObjectId nor a
            valid identifier string.
        """
        return walk_document(self._root, document, string_to_identifier)

    def get_json_schema(self) -> dict[str, Any]:
        """Return a plain JSON schema with identifiers as pattern-constrained strings."""
        return rewrite_identifiers(self._root)

    def validate(self, document: Any) -> Any:
        """Validate ``document``, enforcing required properties."""
        return validate_document(self._root, document)

    def partial_validate(self, document: Any) -> Any:
        """Validate ``document`` while ignoring every required flag."""
        return validate_document(self._root, document, partial=True)

    def __repr__(self) -> str:
        return f"Schema({self.definition()!r})"

