"""Document validation against derived JSON schemas."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Mapping
from typing import Any

import jsonschema
from jsonschema import Draft3Validator, validators

from objectid_schema.schema_model.schema_nodes import SchemaNode
from objectid_schema.traversal.json_schema_rewriter import (
    OBJECT_ID_PATTERN,
    rewrite_identifiers,
    strip_required,
)

from .violations import ValidationError, Violation

_LOGGER = logging.getLogger(__name__)

_IDENTIFIER_RE = re.compile(r"[a-fA-F0-9]{24}")

_KEYWORD_MESSAGES = {
    "type": "Instance is not a required type",
    "disallow": "Instance is a disallowed type",
    "pattern": "String does not match pattern",
    "required": "Property is required",
    "enum": "Instance is not one of the possible values",
    "minimum": "Number is less than the required minimum value",
    "maximum": "Number is greater than the required maximum value",
    "divisibleBy": "Number is not divisible by the divisor",
    "minLength": "String is less than the required minimum length",
    "maxLength": "String is greater than the required maximum length",
    "minItems": "The number of items is less than the required minimum",
    "maxItems": "The number of items is greater than the required maximum",
    "uniqueItems": "Array can only contain unique items",
    "additionalProperties": "Additional properties are not allowed",
}


def _pattern(
    validator: Any, pattern: str, instance: Any, _schema: Any
) -> Iterator[jsonschema.ValidationError]:
    # Python's "$" also matches before a trailing newline; identifiers must match in full.
    if not validator.is_type(instance, "string"):
        return
    if pattern == OBJECT_ID_PATTERN:
        matched = _IDENTIFIER_RE.fullmatch(instance)
    else:
        matched = re.search(pattern, instance)
    if not matched:
        yield jsonschema.ValidationError(f"{instance!r} does not match {pattern!r}")


_DocumentValidator = validators.extend(Draft3Validator, {"pattern": _pattern})


def validate_document(root: SchemaNode, document: Any, *, partial: bool = False) -> Any:
    """Validate a document against the identifier-rewritten form of a schema.

    Args:
      root: Schema tree to validate against.
      document: Candidate document with identifiers in string form.
      partial: Ignore every ``required`` flag when True.

    Returns:
      The document, unchanged.

    Raises:
      ValidationError: If the validator reports any violation.
    """
    derived = rewrite_identifiers(root)
    if partial:
        derived = strip_required(derived)
    violations = collect_violations(derived, document)
    _LOGGER.debug("Validated document (partial=%s): %d violation(s)", partial, len(violations))
    if violations:
        raise ValidationError(violations)
    return document


def collect_violations(derived_schema: Mapping[str, Any], document: Any) -> tuple[Violation, ...]:
    """Return violations in the order the structural validator reports them."""
    validator = _DocumentValidator(derived_schema)
    return tuple(_to_violation(error) for error in validator.iter_errors(document))


def _to_violation(error: jsonschema.ValidationError) -> Violation:
    keyword = str(error.validator)
    return Violation(
        message=_KEYWORD_MESSAGES.get(keyword, error.message),
        path=_violation_path(error),
        keyword=keyword,
        detail=error.message,
    )


def _violation_path(error: jsonschema.ValidationError) -> tuple[str | int, ...]:
    path = tuple(error.absolute_path)
    if error.validator != "required":
        return path
    # Draft 3 reports a missing property on its parent, with a trailing "required" segment.
    schema_path = tuple(error.absolute_schema_path)
    if len(schema_path) < 2 or schema_path[-1] != "required":
        return path
    missing_property = schema_path[-2]
    if path and path[-1] == "required":
        path = path[:-1]
    if path and path[-1] == missing_property:
        return path
    return (*path, missing_property)
