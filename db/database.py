# db/database.py
import logging
from contextlib import contextmanager

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.orm import sessionmaker, scoped_session
from config.config import Config

logger = logging.getLogger(__name__)

# Create engine
engine_args = {}
if Config.DATABASE_URL.startswith("sqlite"):
    engine_args["connect_args"] = {"check_same_thread": False}
else:
    engine_args["pool_pre_ping"] = True

engine = create_engine(Config.DATABASE_URL, echo=False, **engine_args)

# Session
SessionLocal = scoped_session(
    sessionmaker(autocommit=False, autoflush=False, bind=engine)
)


@contextmanager
def session_scope():
    """
    Transactional scope around a series of operations.
    Commits on success, rolls back and re-raises on any error.
    """
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db():
    """Create all tables if not exist (basic version)."""
    from models import Base
    Base.metadata.create_all(bind=engine)


# -------------------------------------------------------------
#           SAFE AUTO-MIGRATION (CREATE / PATCH)
# -------------------------------------------------------------
def auto_migrate():
    """
    Auto-creates missing tables AND auto-adds missing columns on every
    mapped table. Does NOT delete data or alter existing columns.
    """
    from models import Base

    # 1) Ensure tables exist
    Base.metadata.create_all(bind=engine)

    inspector = inspect(engine)
    added = 0

    # 2) Add missing columns inside a transaction (engine.begin ensures commit)
    with engine.begin() as conn:
        for table in Base.metadata.sorted_tables:
            existing_cols = {col["name"] for col in inspector.get_columns(table.name)}
            for column in table.columns:
                if column.name in existing_cols:
                    continue
                col_type = column.type.compile(dialect=engine.dialect)
                logger.info("[AUTO-MIGRATE] Adding missing column %s.%s (%s)", table.name, column.name, col_type)
                conn.execute(text(f"ALTER TABLE {table.name} ADD COLUMN {column.name} {col_type}"))
                added += 1

    logger.info("[AUTO-MIGRATE] Schema verified/updated (%d column(s) added).", added)
