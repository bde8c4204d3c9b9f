"""Conversions between ObjectId values and their hexadecimal string form."""

from __future__ import annotations

from typing import Any

from bson import ObjectId
from bson.errors import InvalidId


class IdentifierConversionError(ValueError):
    """Raised when a value at an identifier position cannot be converted."""

    def __init__(self, path: tuple[str | int, ...], value: Any, target: str) -> None:
        location = ".".join(str(segment) for segment in path) if path else "<root>"
        super().__init__(f"Value at {location} cannot be converted to {target}: {value!r}")
        self.path = path
        self.value = value


def is_identifier_string(value: Any) -> bool:
    """Return True for a 24-character hexadecimal string."""
    return isinstance(value, str) and ObjectId.is_valid(value)


def identifier_to_string(value: Any, path: tuple[str | int, ...] = ()) -> str:
    """Return the hexadecimal form of an ObjectId; valid identifier strings pass through."""
    if isinstance(value, ObjectId):
        return str(value)
    if is_identifier_string(value):
        return value
    raise IdentifierConversionError(path, value, "an identifier string")


def string_to_identifier(value: Any, path: tuple[str | int, ...] = ()) -> ObjectId:
    """Return an ObjectId for a 24-character hexadecimal string; ObjectIds pass through."""
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str):
        try:
            return ObjectId(value)
        except InvalidId as exc:
            raise IdentifierConversionError(path, value, "an ObjectId") from exc
    raise IdentifierConversionError(path, value, "an ObjectId")
