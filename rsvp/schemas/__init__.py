from .enums import Attendance, RSVPErrorKind
from .rsvp import (
    RSVPSubmission,
    RSVPRecordCreate,
    RSVPRecord,
    RSVPTally,
    RSVPListing,
)
from .common import (
    SuccessResponse,
    ErrorResponse,
    ResponseFactory,
    ConfigOption,
    ConfigResponse,
)

__all__ = [
    "Attendance",
    "RSVPErrorKind",
    "RSVPSubmission",
    "RSVPRecordCreate",
    "RSVPRecord",
    "RSVPTally",
    "RSVPListing",
    "SuccessResponse",
    "ErrorResponse",
    "ResponseFactory",
    "ConfigOption",
    "ConfigResponse",
]
