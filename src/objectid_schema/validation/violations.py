"""Validation failure entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Violation:
    """One constraint a document failed to satisfy."""

    message: str
    path: tuple[str | int, ...]
    keyword: str
    detail: str

    @property
    def location(self) -> str:
        """Return the dotted document location, ``<root>`` for the document itself."""
        return ".".join(str(segment) for segment in self.path) if self.path else "<root>"


class ValidationError(Exception):
    """Raised when a document violates its schema; ``errors`` keeps the validator's order."""

    def __init__(self, errors: tuple[Violation, ...]) -> None:
        first = errors[0]
        suffix = f" (+{len(errors) - 1} more)" if len(errors) > 1 else ""
        super().__init__(f"{first.location}: {first.message}{suffix}")
        self.errors = errors
