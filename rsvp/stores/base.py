from abc import ABC, abstractmethod
from typing import List, Optional

from ..schemas.enums import Attendance
from ..schemas.rsvp import RSVPRecord, RSVPRecordCreate

# The confirmaciones table stores attendance in Spanish
_STORED_ATTENDANCE = {Attendance.YES: "si", Attendance.NO: "no"}
_ATTENDANCE_FROM_STORED = {v: k for k, v in _STORED_ATTENDANCE.items()}


class RecordStoreError(Exception):
    """Store-reported failure (connectivity, rejected query, ...)"""

    pass


class IdentityConflictError(RecordStoreError):
    """Insert rejected because the cédula is already stored"""

    pass


def to_stored_attendance(attending: Attendance) -> str:
    return _STORED_ATTENDANCE[Attendance(attending)]


def from_stored_attendance(value: str) -> Attendance:
    key = (value or "").strip().lower()
    if key in _ATTENDANCE_FROM_STORED:
        return _ATTENDANCE_FROM_STORED[key]
    try:
        return Attendance(key)
    except ValueError:
        raise RecordStoreError(f"Unknown stored attendance value: {value!r}")


class RecordStore(ABC):
    """Create/read access to the single RSVP table"""

    @abstractmethod
    def configured(self) -> bool:
        """Whether credentials/endpoint are present"""

    @abstractmethod
    def find_by_identity(self, identity_number: str) -> Optional[RSVPRecord]:
        """Point lookup by cédula; None when no record matches"""

    @abstractmethod
    def create(self, record: RSVPRecordCreate) -> RSVPRecord:
        """Persist a record; the store assigns id and created_at"""

    @abstractmethod
    def list_all(self) -> List[RSVPRecord]:
        """All records, newest first"""
