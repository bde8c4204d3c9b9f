"""Identifier conversion exports."""

from .identifier_codec import (
    IdentifierConversionError,
    identifier_to_string,
    is_identifier_string,
    string_to_identifier,
)

__all__ = [
    "IdentifierConversionError",
    "identifier_to_string",
    "is_identifier_string",
    "string_to_identifier",
]
