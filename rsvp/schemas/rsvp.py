from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime
from .enums import Attendance


class RSVPSubmission(BaseModel):
    """
    Raw form input. Every field is plain text so the submission service,
    not the request parser, decides which rule a bad value breaks.
    """

    first_name: Optional[str] = Field("", description="Attendee first name")
    last_name: Optional[str] = Field("", description="Attendee last name")
    attending: Optional[str] = Field("", description="'yes' or 'no'")
    phone: Optional[str] = Field("", description="Contact phone, required when attending")
    identity_number: Optional[str] = Field(
        "", description="National ID (cédula), required when attending"
    )

    @field_validator(
        "first_name", "last_name", "attending", "phone", "identity_number", mode="before"
    )
    @classmethod
    def coerce_to_text(cls, v):
        # Forms may post numbers (e.g. a cédula) unquoted
        if v is None or isinstance(v, str):
            return v
        return str(v)


class RSVPRecordCreate(BaseModel):
    """Normalized record handed to the store; id and created_at are store-assigned"""

    first_name: str
    last_name: str
    attending: Attendance
    phone: Optional[str] = None
    identity_number: Optional[str] = None


class RSVPRecord(RSVPRecordCreate):
    id: str
    created_at: datetime

    class Config:
        from_attributes = True


class RSVPTally(BaseModel):
    total: int = 0
    attending_count: int = 0
    not_attending_count: int = 0

    @classmethod
    def from_records(cls, records: List[RSVPRecord]) -> "RSVPTally":
        attending = sum(1 for r in records if r.attending == Attendance.YES)
        not_attending = sum(1 for r in records if r.attending == Attendance.NO)
        return cls(
            total=len(records),
            attending_count=attending,
            not_attending_count=not_attending,
        )


class RSVPListing(BaseModel):
    records: List[RSVPRecord] = Field(default_factory=list)
    tally: RSVPTally = Field(default_factory=RSVPTally)
