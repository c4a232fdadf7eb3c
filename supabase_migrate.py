"""
Database Migration Script for Supabase
Creates the confirmaciones table and the unique index on cedula.
Run once against the Supabase Postgres instance (DATABASE_URL) before
accepting RSVPs, so duplicate cédulas are rejected by the database itself.
"""

import logging
import sys

from sqlalchemy import text
from sqlalchemy.engine import Engine

from rsvp.config import load_settings
from rsvp.database import create_db_engine

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

TABLE = "confirmaciones"
REQUIRED_COLUMNS = ["id", "nombre", "apellido", "telefono", "asistencia", "cedula", "created_at"]


def migrate_rsvp_table(engine: Engine):
    """Create the RSVP table and its uniqueness guarantee"""

    with engine.connect() as conn:
        # Start transaction
        trans = conn.begin()

        try:
            logger.info(f"Ensuring {TABLE} table exists...")
            conn.execute(
                text(
                    f"""
                CREATE TABLE IF NOT EXISTS {TABLE} (
                    id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
                    nombre TEXT NOT NULL,
                    apellido TEXT NOT NULL,
                    telefono TEXT,
                    asistencia TEXT NOT NULL CHECK (asistencia IN ('si', 'no')),
                    cedula TEXT,
                    created_at TIMESTAMPTZ NOT NULL DEFAULT now()
                )
            """
                )
            )

            # Older tables stored '' for non-attendees; NULLs don't collide
            conn.execute(text(f"UPDATE {TABLE} SET cedula = NULL WHERE cedula = ''"))
            conn.execute(
                text(f"UPDATE {TABLE} SET telefono = NULL WHERE telefono = ''")
            )

            duplicates = conn.execute(
                text(
                    f"""
                SELECT cedula, COUNT(*) FROM {TABLE}
                WHERE cedula IS NOT NULL
                GROUP BY cedula HAVING COUNT(*) > 1
            """
                )
            ).fetchall()

            if duplicates:
                for cedula, count in duplicates:
                    logger.error(f"❌ cedula {cedula} appears {count} times")
                raise RuntimeError(
                    "Resolve duplicate cédulas before adding the unique index"
                )

            logger.info("Adding unique index on cedula...")
            conn.execute(
                text(
                    f"""
                CREATE UNIQUE INDEX IF NOT EXISTS ux_{TABLE}_cedula
                ON {TABLE} (cedula)
            """
                )
            )
            conn.execute(
                text(
                    f"""
                CREATE INDEX IF NOT EXISTS ix_{TABLE}_created_at
                ON {TABLE} (created_at DESC)
            """
                )
            )

            # Commit transaction
            trans.commit()
            logger.info("✅ All migrations completed successfully")

        except Exception as e:
            trans.rollback()
            logger.error(f"❌ Migration failed: {e}")
            raise


def verify_migration(engine: Engine) -> bool:
    """Verify that migration was successful"""

    try:
        with engine.connect() as conn:
            result = conn.execute(
                text(
                    """
                SELECT column_name, data_type, is_nullable
                FROM information_schema.columns
                WHERE table_name = :table
                ORDER BY ordinal_position
            """
                ),
                {"table": TABLE},
            )

            columns = result.fetchall()
            logger.info(f"Current {TABLE} table structure:")
            for col in columns:
                logger.info(f"  - {col[0]}: {col[1]} (nullable: {col[2]})")

            column_names = [col[0] for col in columns]
            missing_columns = [
                col for col in REQUIRED_COLUMNS if col not in column_names
            ]
            if missing_columns:
                logger.error(f"❌ Missing required columns: {missing_columns}")
                return False

            result = conn.execute(
                text(
                    """
                SELECT indexname FROM pg_indexes
                WHERE tablename = :table AND indexdef ILIKE '%UNIQUE%(cedula)%'
            """
                ),
                {"table": TABLE},
            )
            if result.fetchone() is None:
                logger.error("❌ No unique index on cedula")
                return False

            logger.info("✅ Migration verification completed")
            return True

    except Exception as e:
        logger.error(f"❌ Verification failed: {e}")
        return False


def main():
    """Run the complete migration process"""
    settings = load_settings()
    if not settings.store.database_url:
        logger.error("❌ DATABASE_URL is not set")
        sys.exit(1)

    engine = create_db_engine(settings.store.database_url)
    logger.info("🚀 Starting Supabase migration...")
    migrate_rsvp_table(engine)

    if not verify_migration(engine):
        sys.exit(1)


if __name__ == "__main__":
    main()
