from .submission_service import RSVPSubmissionService
from .listing_service import RSVPListingService

__all__ = [
    "RSVPSubmissionService",
    "RSVPListingService",
]
