from fastapi import Depends, Request

from ..services import RSVPListingService, RSVPSubmissionService
from ..stores import RecordStore


def get_record_store(request: Request) -> RecordStore:
    """Store built at startup and attached to the app"""
    return request.app.state.record_store


def get_submission_service(
    store: RecordStore = Depends(get_record_store),
) -> RSVPSubmissionService:
    return RSVPSubmissionService(store)


def get_listing_service(
    store: RecordStore = Depends(get_record_store),
) -> RSVPListingService:
    return RSVPListingService(store)
