from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from ..database import session_scope
from ..models.rsvp import RSVP
from ..schemas.rsvp import RSVPRecord, RSVPRecordCreate
from .base import (
    IdentityConflictError,
    RecordStore,
    RecordStoreError,
    from_stored_attendance,
    to_stored_attendance,
)


class SQLAlchemyRecordStore(RecordStore):
    def __init__(self, session_factory: Optional[sessionmaker]):
        self.session_factory = session_factory

    def configured(self) -> bool:
        return self.session_factory is not None

    def find_by_identity(self, identity_number: str) -> Optional[RSVPRecord]:
        try:
            with session_scope(self.session_factory) as db:
                row = (
                    db.query(RSVP)
                    .filter(RSVP.identity_number == identity_number)
                    .first()
                )
                return self._to_record(row) if row else None
        except SQLAlchemyError as e:
            raise RecordStoreError(f"Lookup failed: {e}") from e

    def create(self, record: RSVPRecordCreate) -> RSVPRecord:
        try:
            with session_scope(self.session_factory) as db:
                row = RSVP(
                    first_name=record.first_name,
                    last_name=record.last_name,
                    phone=record.phone,
                    identity_number=record.identity_number,
                    attending=to_stored_attendance(record.attending),
                )
                db.add(row)
                db.flush()
                db.refresh(row)
                return self._to_record(row)
        except IntegrityError as e:
            # Only the cédula column carries a unique constraint
            raise IdentityConflictError(
                f"Identity number {record.identity_number} already stored"
            ) from e
        except SQLAlchemyError as e:
            raise RecordStoreError(f"Insert failed: {e}") from e

    def list_all(self) -> List[RSVPRecord]:
        try:
            with session_scope(self.session_factory) as db:
                rows = (
                    db.query(RSVP)
                    .order_by(RSVP.created_at.desc())
                    .all()
                )
                return [self._to_record(row) for row in rows]
        except SQLAlchemyError as e:
            raise RecordStoreError(f"Listing failed: {e}") from e

    @staticmethod
    def _to_record(row: RSVP) -> RSVPRecord:
        try:
            return RSVPRecord(
                id=str(row.id),
                first_name=row.first_name,
                last_name=row.last_name,
                phone=row.phone,
                identity_number=row.identity_number,
                attending=from_stored_attendance(row.attending),
                created_at=row.created_at,
            )
        except ValueError as e:
            raise RecordStoreError(f"Unreadable row {row.id}: {e}") from e
