from enum import Enum


class Attendance(str, Enum):
    YES = "yes"
    NO = "no"


class RSVPErrorKind(str, Enum):
    STORE_UNAVAILABLE = "store_unavailable"
    MISSING_REQUIRED_FIELD = "missing_required_field"
    MISSING_CONTACT_INFO = "missing_contact_info"
    INVALID_PHONE_FORMAT = "invalid_phone_format"
    INVALID_IDENTITY_FORMAT = "invalid_identity_format"
    DUPLICATE_IDENTITY = "duplicate_identity"
    FETCH_ERROR = "fetch_error"
    WRITE_ERROR = "write_error"
