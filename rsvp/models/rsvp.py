import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, Uuid
from sqlalchemy.sql import func
from ..database import Base
from ..utils.constants import AppConstants


def _utcnow():
    return datetime.now(timezone.utc)


class RSVP(Base):
    __tablename__ = AppConstants.DEFAULT_RSVP_TABLE

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    first_name = Column("nombre", String, nullable=False)
    last_name = Column("apellido", String, nullable=False)
    phone = Column("telefono", String, nullable=True)
    # Unique: the database is the final word on duplicate cédulas
    identity_number = Column("cedula", String, nullable=True, unique=True, index=True)
    attending = Column("asistencia", String, nullable=False)  # si, no

    # Timestamps
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
        index=True,
    )

    def __repr__(self):
        return f"<RSVP {self.first_name} {self.last_name} ({self.attending})>"
