from contextlib import contextmanager
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from supabase import create_client, Client

from .config import StoreSettings

Base = declarative_base()


def create_db_engine(database_url: str) -> Engine:
    """SQLAlchemy engine for the SQL record store"""
    connect_args = {}
    engine_kwargs = {}

    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite:///"):
            # one shared connection, otherwise every session gets its own empty db
            engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs["pool_pre_ping"] = True  # Good for PostgreSQL connections
        engine_kwargs["pool_recycle"] = 300  # Recycle connections every 5 minutes

    return create_engine(database_url, connect_args=connect_args, **engine_kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def create_supabase_client(settings: StoreSettings) -> Optional[Client]:
    """Supabase client, or None when credentials are missing"""
    if not (settings.supabase_url and settings.supabase_anon_key):
        return None

    return create_client(settings.supabase_url, settings.supabase_anon_key)


@contextmanager
def session_scope(session_factory: sessionmaker):
    db = session_factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def init_db(engine: Engine):
    """Initialize database tables"""
    # Register models with the metadata
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
