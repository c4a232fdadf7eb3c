"""Validation helpers — phone shape, cédula shape, digit normalization.

Invariants:
    - Empty phone/cédula are valid here; required-ness is decided by the service
    - Cédula is 1-8 ASCII digits, nothing else
    - normalize_digits is idempotent
"""

import pytest

from rsvp.utils.validation import ValidationHelpers


@pytest.mark.parametrize(
    "phone",
    ["+598 99 999 999", "099123456", "+1-800-555-0199", "2.345.6789", "+59899999999"],
)
def test_valid_phone_shapes(phone):
    assert ValidationHelpers.validate_phone(phone)


@pytest.mark.parametrize(
    "phone",
    ["abc", "+", "099 abc 123", "++598 99 999 999", "099  123", "(099) 123 456"],
)
def test_invalid_phone_shapes(phone):
    assert not ValidationHelpers.validate_phone(phone)


def test_phone_rejects_non_ascii_digits():
    """Arabic-Indic digits match \\d in Python but not in the form's pattern."""
    assert not ValidationHelpers.validate_phone("٠٩٩١٢٣٤٥٦")


def test_phone_rejects_trailing_newline():
    assert not ValidationHelpers.validate_phone("099123456\n")


def test_empty_phone_is_not_a_format_error():
    assert ValidationHelpers.validate_phone("")


@pytest.mark.parametrize("identity", ["12345678", "1", "0001234"])
def test_valid_identity_numbers(identity):
    assert ValidationHelpers.validate_identity_number(identity)


@pytest.mark.parametrize(
    "identity", ["123456789", "12a45678", "1.234.567", "1234-567", " 1234567"]
)
def test_invalid_identity_numbers(identity):
    assert not ValidationHelpers.validate_identity_number(identity)


def test_normalize_strips_everything_but_digits():
    assert ValidationHelpers.normalize_digits("+598 99-999 999") == "59899999999"


def test_normalize_is_idempotent():
    once = ValidationHelpers.normalize_digits("+598 99-999 999")
    assert ValidationHelpers.normalize_digits(once) == once


def test_normalize_empty_and_none():
    assert ValidationHelpers.normalize_digits("") == ""
    assert ValidationHelpers.normalize_digits(None) == ""


@pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
def test_is_blank(value):
    assert ValidationHelpers.is_blank(value)


def test_is_blank_false_for_text():
    assert not ValidationHelpers.is_blank(" Ana ")
