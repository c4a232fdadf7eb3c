"""Root conftest — shared stores and API client for the RSVP tests."""

import pytest
from fastapi.testclient import TestClient

from rsvp.config import Settings
from rsvp.database import create_db_engine, create_session_factory, init_db
from rsvp.main import create_app
from rsvp.stores import RecordStore, RecordStoreError, SQLAlchemyRecordStore


class RecordingStore(RecordStore):
    """Passes calls through to a real store and remembers their order."""

    def __init__(self, inner: RecordStore):
        self.inner = inner
        self.calls = []

    def configured(self):
        return self.inner.configured()

    def find_by_identity(self, identity_number):
        self.calls.append(("find_by_identity", identity_number))
        return self.inner.find_by_identity(identity_number)

    def create(self, record):
        self.calls.append(("create", record))
        return self.inner.create(record)

    def list_all(self):
        self.calls.append(("list_all", None))
        return self.inner.list_all()

    def call_names(self):
        return [name for name, _ in self.calls]


class UnconfiguredStore(RecordStore):
    """No credentials: any data call is a bug in the caller."""

    def __init__(self):
        self.calls = []

    def configured(self):
        return False

    def find_by_identity(self, identity_number):
        self.calls.append("find_by_identity")
        raise AssertionError("unconfigured store must not be queried")

    def create(self, record):
        self.calls.append("create")
        raise AssertionError("unconfigured store must not be written")

    def list_all(self):
        self.calls.append("list_all")
        raise AssertionError("unconfigured store must not be listed")


class FailingStore(RecordStore):
    """Configured, but every operation fails as a dropped connection would."""

    def __init__(self, fail_on=("find_by_identity", "create", "list_all")):
        self.fail_on = set(fail_on)
        self.calls = []

    def configured(self):
        return True

    def _maybe_fail(self, name):
        self.calls.append(name)
        if name in self.fail_on:
            raise RecordStoreError(f"{name}: connection reset")

    def find_by_identity(self, identity_number):
        self._maybe_fail("find_by_identity")
        return None

    def create(self, record):
        self._maybe_fail("create")
        raise AssertionError("create should have failed")

    def list_all(self):
        self._maybe_fail("list_all")
        return []


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def sql_store(session_factory):
    return SQLAlchemyRecordStore(session_factory)


@pytest.fixture
def store(sql_store):
    return RecordingStore(sql_store)


@pytest.fixture
def unconfigured_store():
    return UnconfiguredStore()


@pytest.fixture
def failing_store():
    return FailingStore()


@pytest.fixture
def make_client():
    def _make(record_store):
        app = create_app(settings=Settings(), store=record_store)
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client, store):
    return make_client(store)


@pytest.fixture
def make_failing_store():
    return FailingStore
