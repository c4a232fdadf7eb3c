import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

from .utils.constants import AppConstants


@dataclass(frozen=True)
class StoreSettings:
    """Connection settings for the RSVP record store"""

    backend: str = AppConstants.BACKEND_SUPABASE
    supabase_url: Optional[str] = None
    supabase_anon_key: Optional[str] = None
    database_url: Optional[str] = None
    table_name: str = AppConstants.DEFAULT_RSVP_TABLE


@dataclass(frozen=True)
class Settings:
    store: StoreSettings = field(default_factory=StoreSettings)
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Build settings from the environment (and .env, when present)"""
    load_dotenv()

    store = StoreSettings(
        backend=os.getenv("RSVP_STORE_BACKEND", AppConstants.BACKEND_SUPABASE).lower(),
        supabase_url=os.getenv("SUPABASE_URL") or None,
        supabase_anon_key=os.getenv("SUPABASE_ANON_KEY") or None,
        database_url=os.getenv("DATABASE_URL") or None,
        table_name=os.getenv("RSVP_TABLE", AppConstants.DEFAULT_RSVP_TABLE),
    )

    origins = os.getenv("CORS_ORIGINS", "*")
    return Settings(
        store=store,
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
