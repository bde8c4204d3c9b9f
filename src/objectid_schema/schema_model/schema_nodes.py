"""Schema tree entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

IDENTIFIER_TYPE = "objectid"
WILDCARD = "*"

SchemaPath = tuple[str, ...]


@dataclass(frozen=True)
class ObjectNode:
    """Object schema node with named child nodes in declaration order."""

    properties: Mapping[str, SchemaNode]
    required: bool | None = None
    keywords: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ArrayNode:
    """Array schema node; one items node describes every element."""

    items: SchemaNode
    required: bool | None = None
    keywords: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class IdentifierNode:
    """Leaf holding a 24-hex-character object identifier."""

    required: bool | None = None
    keywords: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class PrimitiveNode:
    """Opaque leaf of any other type, such as ``string`` or ``["number", "null"]``."""

    kind: str | tuple[str, ...]
    required: bool | None = None
    keywords: Mapping[str, Any] = field(default_factory=dict)


SchemaNode = ObjectNode | ArrayNode | IdentifierNode | PrimitiveNode
