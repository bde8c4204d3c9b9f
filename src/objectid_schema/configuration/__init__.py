"""Configuration domain exports."""

from .loader import ConfigurationError, load_schema, load_schema_definition

__all__ = [
    "ConfigurationError",
    "load_schema",
    "load_schema_definition",
]
