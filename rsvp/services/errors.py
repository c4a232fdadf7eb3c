from ..schemas.enums import RSVPErrorKind
from ..utils.constants import ResponseMessages


class RSVPServiceError(Exception):
    """Base exception for RSVP service errors"""

    kind: RSVPErrorKind = RSVPErrorKind.WRITE_ERROR
    default_message: str = ResponseMessages.WRITE_ERROR

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class StoreUnavailableError(RSVPServiceError):
    """Record store is not configured or not reachable"""

    kind = RSVPErrorKind.STORE_UNAVAILABLE
    default_message = ResponseMessages.STORE_UNAVAILABLE


class RSVPValidationError(RSVPServiceError):
    """User-correctable submission problem; nothing was written"""

    pass


class MissingRequiredFieldError(RSVPValidationError):
    kind = RSVPErrorKind.MISSING_REQUIRED_FIELD
    default_message = ResponseMessages.MISSING_REQUIRED_FIELD

    def __init__(self, field: str = None, message: str = None):
        self.field = field
        super().__init__(message)


class MissingContactInfoError(RSVPValidationError):
    kind = RSVPErrorKind.MISSING_CONTACT_INFO
    default_message = ResponseMessages.MISSING_CONTACT_INFO


class InvalidPhoneFormatError(RSVPValidationError):
    kind = RSVPErrorKind.INVALID_PHONE_FORMAT
    default_message = ResponseMessages.INVALID_PHONE_FORMAT


class InvalidIdentityFormatError(RSVPValidationError):
    kind = RSVPErrorKind.INVALID_IDENTITY_FORMAT
    default_message = ResponseMessages.INVALID_IDENTITY_FORMAT


class DuplicateIdentityError(RSVPServiceError):
    """A confirmation with this cédula already exists"""

    kind = RSVPErrorKind.DUPLICATE_IDENTITY
    default_message = ResponseMessages.DUPLICATE_IDENTITY


class FetchError(RSVPServiceError):
    """Store failed while reading"""

    kind = RSVPErrorKind.FETCH_ERROR
    default_message = ResponseMessages.FETCH_ERROR


class WriteError(RSVPServiceError):
    """Store failed while inserting"""

    kind = RSVPErrorKind.WRITE_ERROR
    default_message = ResponseMessages.WRITE_ERROR
