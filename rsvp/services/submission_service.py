import logging

from ..schemas.enums import Attendance
from ..schemas.rsvp import RSVPRecord, RSVPRecordCreate, RSVPSubmission
from ..stores.base import IdentityConflictError, RecordStore, RecordStoreError
from ..utils.validation import ValidationHelpers
from .errors import (
    DuplicateIdentityError,
    FetchError,
    InvalidIdentityFormatError,
    InvalidPhoneFormatError,
    MissingContactInfoError,
    MissingRequiredFieldError,
    StoreUnavailableError,
    WriteError,
)

logger = logging.getLogger(__name__)


class RSVPSubmissionService:
    def __init__(self, store: RecordStore):
        self.store = store

    def submit(self, submission: RSVPSubmission) -> RSVPRecord:
        """
        Validate, deduplicate and persist one RSVP.

        Checks run in a fixed order and the first failure aborts: store
        availability, required fields, contact info for attendees, phone
        shape, cédula shape, existing cédula. At most one read and one
        write reach the store, read first.
        """
        if not self.store.configured():
            raise StoreUnavailableError()

        record = self.validate(submission)

        if record.identity_number:
            self._ensure_identity_is_new(record.identity_number)

        try:
            created = self.store.create(record)
        except IdentityConflictError as e:
            # Lost the race against a concurrent submission
            logger.warning(f"Store rejected duplicate identity: {e}")
            raise DuplicateIdentityError() from e
        except RecordStoreError as e:
            logger.error(f"RSVP insert failed: {e}")
            raise WriteError() from e

        logger.info(
            f"RSVP {created.id} stored (attending={created.attending.value})"
        )
        return created

    def validate(self, submission: RSVPSubmission) -> RSVPRecordCreate:
        """Run the field checks and return the normalized record"""
        first_name = (submission.first_name or "").strip()
        last_name = (submission.last_name or "").strip()
        attending = self._parse_attendance(submission.attending)
        phone = (submission.phone or "").strip()
        identity_number = (submission.identity_number or "").strip()

        if not first_name:
            raise MissingRequiredFieldError("first_name")
        if not last_name:
            raise MissingRequiredFieldError("last_name")
        if attending is None:
            raise MissingRequiredFieldError("attending")

        if attending == Attendance.YES and not (phone and identity_number):
            raise MissingContactInfoError()

        if not ValidationHelpers.validate_phone(phone):
            raise InvalidPhoneFormatError()

        if not ValidationHelpers.validate_identity_number(identity_number):
            raise InvalidIdentityFormatError()

        # Contact details are only kept for attendees
        if attending == Attendance.NO:
            phone = identity_number = ""

        return RSVPRecordCreate(
            first_name=first_name,
            last_name=last_name,
            attending=attending,
            phone=ValidationHelpers.normalize_digits(phone) or None,
            identity_number=ValidationHelpers.normalize_digits(identity_number)
            or None,
        )

    def _ensure_identity_is_new(self, identity_number: str):
        try:
            existing = self.store.find_by_identity(identity_number)
        except RecordStoreError as e:
            logger.error(f"Identity lookup failed: {e}")
            raise FetchError() from e

        if existing is not None:
            raise DuplicateIdentityError()

    @staticmethod
    def _parse_attendance(value):
        if ValidationHelpers.is_blank(value):
            return None
        try:
            return Attendance(value.strip().lower())
        except ValueError:
            return None
