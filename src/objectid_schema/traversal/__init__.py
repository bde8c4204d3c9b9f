"""Schema traversal exports."""

from .document_walker import DocumentPath, IdentifierTransform, walk_document
from .identifier_paths import find_identifier_paths
from .json_schema_rewriter import OBJECT_ID_PATTERN, rewrite_identifiers, strip_required
from .schema_fold import fold_schema

__all__ = [
    "DocumentPath",
    "IdentifierTransform",
    "OBJECT_ID_PATTERN",
    "find_identifier_paths",
    "fold_schema",
    "rewrite_identifiers",
    "strip_required",
    "walk_document",
]
