from typing import Any, Dict, List, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from ..schemas.rsvp import RSVPRecord, RSVPRecordCreate
from ..utils.constants import AppConstants
from .base import (
    IdentityConflictError,
    RecordStore,
    RecordStoreError,
    from_stored_attendance,
    to_stored_attendance,
)

# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


class SupabaseRecordStore(RecordStore):
    """RSVP table hosted on Supabase, reached through the PostgREST client"""

    def __init__(
        self,
        client: Optional[Client],
        table_name: str = AppConstants.DEFAULT_RSVP_TABLE,
    ):
        self.client = client
        self.table_name = table_name

    def configured(self) -> bool:
        return self.client is not None

    def _table(self):
        return self.client.table(self.table_name)

    def find_by_identity(self, identity_number: str) -> Optional[RSVPRecord]:
        try:
            response = (
                self._table()
                .select("*")
                .eq("cedula", identity_number)
                .limit(1)
                .execute()
            )
        except (APIError, httpx.HTTPError) as e:
            raise RecordStoreError(f"Lookup failed: {e}") from e

        if not response.data:
            return None
        return self._to_record(response.data[0])

    def create(self, record: RSVPRecordCreate) -> RSVPRecord:
        try:
            response = self._table().insert(self._to_row(record)).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise IdentityConflictError(
                    f"Identity number {record.identity_number} already stored"
                ) from e
            raise RecordStoreError(f"Insert failed: {e}") from e
        except httpx.HTTPError as e:
            raise RecordStoreError(f"Insert failed: {e}") from e

        if not response.data:
            raise RecordStoreError("Insert returned no row")
        return self._to_record(response.data[0])

    def list_all(self) -> List[RSVPRecord]:
        try:
            response = (
                self._table().select("*").order("created_at", desc=True).execute()
            )
        except (APIError, httpx.HTTPError) as e:
            raise RecordStoreError(f"Listing failed: {e}") from e

        return [self._to_record(row) for row in response.data or []]

    @staticmethod
    def _to_row(record: RSVPRecordCreate) -> Dict[str, Any]:
        row = {
            "nombre": record.first_name,
            "apellido": record.last_name,
            "asistencia": to_stored_attendance(record.attending),
        }
        if record.phone:
            row["telefono"] = record.phone
        if record.identity_number:
            row["cedula"] = record.identity_number
        return row

    @staticmethod
    def _to_record(row: Dict[str, Any]) -> RSVPRecord:
        try:
            return RSVPRecord(
                id=str(row["id"]),
                first_name=row["nombre"],
                last_name=row["apellido"],
                phone=row.get("telefono") or None,
                identity_number=row.get("cedula") or None,
                attending=from_stored_attendance(row["asistencia"]),
                created_at=row["created_at"],
            )
        except (KeyError, ValueError) as e:
            raise RecordStoreError(f"Unreadable row {row.get('id')}: {e}") from e
