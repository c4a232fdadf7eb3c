import logging
from typing import List

from ..schemas.rsvp import RSVPListing, RSVPRecord, RSVPTally
from ..stores.base import RecordStore, RecordStoreError
from .errors import FetchError, StoreUnavailableError

logger = logging.getLogger(__name__)


class RSVPListingService:
    def __init__(self, store: RecordStore):
        self.store = store

    def list_records(self) -> List[RSVPRecord]:
        """All RSVPs, most recent first. Fails whole, never partially."""
        if not self.store.configured():
            raise StoreUnavailableError()

        try:
            records = self.store.list_all()
        except RecordStoreError as e:
            logger.error(f"RSVP listing failed: {e}")
            raise FetchError() from e

        return list(records or [])

    @staticmethod
    def tally(records: List[RSVPRecord]) -> RSVPTally:
        return RSVPTally.from_records(records)

    def get_listing(self) -> RSVPListing:
        records = self.list_records()
        return RSVPListing(records=records, tally=self.tally(records))
