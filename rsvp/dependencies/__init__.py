# rsvp/dependencies/__init__.py

from .store import (
    get_record_store,
    get_submission_service,
    get_listing_service,
)

__all__ = [
    "get_record_store",
    "get_submission_service",
    "get_listing_service",
]
