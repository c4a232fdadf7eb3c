import re
from typing import Optional

from .constants import AppConstants

# ASCII only, \d and \s would otherwise accept other Unicode digits and spaces
_PHONE_RE = re.compile(AppConstants.PHONE_PATTERN, re.ASCII)
_IDENTITY_RE = re.compile(AppConstants.IDENTITY_PATTERN)
_NON_DIGITS_RE = re.compile(r"[^0-9]")


class ValidationHelpers:
    @staticmethod
    def is_blank(value: Optional[str]) -> bool:
        """True for None, empty, or whitespace-only text"""
        return value is None or not value.strip()

    @staticmethod
    def validate_phone(phone: str) -> bool:
        """Validate phone number shape (optional '+', up to four digit groups)"""
        if not phone:
            return True  # Optional field

        return _PHONE_RE.fullmatch(phone) is not None

    @staticmethod
    def validate_identity_number(identity_number: str) -> bool:
        """Validate national ID (cédula): 1 to 8 ASCII digits"""
        if not identity_number:
            return True  # Optional field

        return _IDENTITY_RE.fullmatch(identity_number) is not None

    @staticmethod
    def normalize_digits(value: Optional[str]) -> str:
        """Strip every non-digit character"""
        if not value:
            return ""

        return _NON_DIGITS_RE.sub("", value)

