from ..config import StoreSettings
from ..database import (
    create_db_engine,
    create_session_factory,
    create_supabase_client,
    init_db,
)
from ..utils.constants import AppConstants
from .base import (
    RecordStore,
    RecordStoreError,
    IdentityConflictError,
)
from .sqlalchemy_store import SQLAlchemyRecordStore
from .supabase_store import SupabaseRecordStore


def build_record_store(settings: StoreSettings) -> RecordStore:
    """Construct the configured store; an unconfigured store is still returned"""
    if settings.backend == AppConstants.BACKEND_SQL:
        if not settings.database_url:
            return SQLAlchemyRecordStore(None)
        engine = create_db_engine(settings.database_url)
        init_db(engine)
        return SQLAlchemyRecordStore(create_session_factory(engine))

    if settings.backend == AppConstants.BACKEND_SUPABASE:
        return SupabaseRecordStore(
            create_supabase_client(settings), table_name=settings.table_name
        )

    raise ValueError(f"Unknown record store backend: {settings.backend}")


__all__ = [
    "RecordStore",
    "RecordStoreError",
    "IdentityConflictError",
    "SQLAlchemyRecordStore",
    "SupabaseRecordStore",
    "build_record_store",
]
