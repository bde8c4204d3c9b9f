"""Identifier codec tests."""

from __future__ import annotations

import pytest
from bson import ObjectId
from objectid_schema.identifiers import (
    IdentifierConversionError,
    identifier_to_string,
    is_identifier_string,
    string_to_identifier,
)

_HEX = "52f044dee2896a8264d7ec2f"


def test_object_id_converts_to_lowercase_hex() -> None:
    assert identifier_to_string(ObjectId(_HEX.upper())) == _HEX


def test_valid_strings_pass_through_to_string() -> None:
    assert identifier_to_string(_HEX) == _HEX


def test_string_converts_to_object_id() -> None:
    assert string_to_identifier(_HEX) == ObjectId(_HEX)


def test_object_id_passes_through_unchanged() -> None:
    oid = ObjectId(_HEX)

    assert string_to_identifier(oid) is oid


@pytest.mark.parametrize("value", [_HEX[:-1], "z" * 24, None, 42, b"123456789012"])
def test_rejects_values_that_are_not_identifiers(value: object) -> None:
    with pytest.raises(IdentifierConversionError) as to_id:
        string_to_identifier(value, ("participants", 1))
    with pytest.raises(IdentifierConversionError):
        identifier_to_string(value)

    assert to_id.value.path == ("participants", 1)
    assert to_id.value.value == value
    assert "participants.1" in str(to_id.value)


def test_conversion_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        string_to_identifier("nope")


def test_is_identifier_string() -> None:
    assert is_identifier_string(_HEX)
    assert is_identifier_string(_HEX.upper())
    assert not is_identifier_string(_HEX + "0")
    assert not is_identifier_string(ObjectId(_HEX))
