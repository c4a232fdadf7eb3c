"""SQLAlchemy store — column mapping and the cédula unique constraint."""

import pytest

from rsvp.models.rsvp import RSVP
from rsvp.schemas.enums import Attendance
from rsvp.schemas.rsvp import RSVPRecordCreate
from rsvp.stores import IdentityConflictError, RecordStoreError, SQLAlchemyRecordStore


def attendee_record(identity_number="12345678"):
    return RSVPRecordCreate(
        first_name="Ana",
        last_name="Pérez",
        attending=Attendance.YES,
        phone="59899999999",
        identity_number=identity_number,
    )


def test_configured_only_with_session_factory(sql_store):
    assert sql_store.configured()
    assert not SQLAlchemyRecordStore(None).configured()


def test_create_assigns_id_and_timestamp(sql_store):
    created = sql_store.create(attendee_record())

    assert created.id
    assert created.created_at is not None
    assert created.first_name == "Ana"
    assert created.attending == Attendance.YES


def test_attendance_stored_in_spanish(sql_store, session_factory):
    sql_store.create(attendee_record())

    db = session_factory()
    try:
        assert db.query(RSVP).one().attending == "si"
    finally:
        db.close()


def test_find_by_identity(sql_store):
    created = sql_store.create(attendee_record())

    found = sql_store.find_by_identity("12345678")

    assert found is not None
    assert found.id == created.id


def test_find_by_identity_missing_returns_none(sql_store):
    assert sql_store.find_by_identity("11111111") is None


def test_unique_constraint_raises_identity_conflict(sql_store):
    sql_store.create(attendee_record())

    with pytest.raises(IdentityConflictError):
        sql_store.create(attendee_record())

    assert len(sql_store.list_all()) == 1


def test_identity_conflict_is_a_store_error():
    assert issubclass(IdentityConflictError, RecordStoreError)


def test_null_identities_do_not_conflict(sql_store):
    for name in ("Luis", "Marta"):
        sql_store.create(
            RSVPRecordCreate(first_name=name, last_name="G", attending=Attendance.NO)
        )

    assert len(sql_store.list_all()) == 2


def test_database_errors_are_wrapped(engine, sql_store):
    RSVP.__table__.drop(engine)

    with pytest.raises(RecordStoreError):
        sql_store.list_all()
