import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from salon.core import config

logger = logging.getLogger(__name__)

# Create Base class for models
Base = declarative_base()

# Internal lazy globals for the process-default engine
_engine: Optional[Engine] = None
_database_url: Optional[str] = None


def create_engine_for_url(database_url: str) -> Engine:
    """Build an engine for the given URL.

    In-memory SQLite uses a single shared connection so the schema survives
    across sessions (important for tests that open several sessions).
    """
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        return create_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(database_url, echo=False)


def get_engine() -> Engine:
    """Return a cached engine, creating it from DATABASE_URL on first call.
    Tests can set DATABASE_URL before the engine is constructed."""
    global _engine
    global _database_url
    database_url = config.get_database_url()
    if _engine is None or _database_url != database_url:
        if _engine is not None:
            _engine.dispose()
        _engine = create_engine_for_url(database_url)
        _database_url = database_url
        logger.debug(
            "SQLAlchemy engine created",
            extra={"context": {"dialect": _engine.dialect.name}},
        )
    return _engine


def get_sessionmaker(engine: Optional[Engine] = None) -> sessionmaker:
    """Return a sessionmaker bound to the given engine (default: lazy engine)."""
    return sessionmaker(
        autocommit=False, autoflush=False, bind=engine or get_engine()
    )


def create_tables(engine: Optional[Engine] = None) -> None:
    """Create all tables in database. Idempotent."""
    # Ensure models are imported so Base.metadata is populated
    from salon.db import base  # noqa: F401

    Base.metadata.create_all(bind=engine or get_engine())
