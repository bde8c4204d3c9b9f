"""ObjectId-aware schema validation and conversion."""

import logging

from .identifiers import IdentifierConversionError
from .schema import Schema
from .schema_model import WILDCARD, SchemaDefinitionError, SchemaPath
from .traversal import OBJECT_ID_PATTERN
from .validation import ValidationError, Violation

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "OBJECT_ID_PATTERN",
    "WILDCARD",
    "IdentifierConversionError",
    "Schema",
    "SchemaDefinitionError",
    "SchemaPath",
    "ValidationError",
    "Violation",
]
