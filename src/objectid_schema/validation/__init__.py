"""Validation exports."""

from .document_validator import collect_violations, validate_document
from .violations import ValidationError, Violation

__all__ = [
    "ValidationError",
    "Violation",
    "collect_violations",
    "validate_document",
]
