"""
Central pytest configuration for the salon backend tests.

This file provides common fixtures, test markers, and environment setup
for both unit and integration tests.
"""

import logging
import os
import sys
from pathlib import Path

import pytest

# Add backend directory to sys.path for imports to work
backend_root = Path(__file__).parent.parent  # backend/
sys.path.insert(0, str(backend_root))

# Test environment (set early so import-time configuration uses it)
TEST_DATABASE_URL = "sqlite:///:memory:"  # In-memory SQLite for fast tests
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ["TESTING"] = "true"
os.environ.setdefault("TZ", "UTC")

from tests.config.fixtures import FrozenClock  # noqa: E402
from tests.config.markers import (  # noqa: E402,F401
    pytest_collection_modifyitems,
    pytest_configure,
    response_helper,
)

from salon.db.record_store import InMemoryRecordStore, SqlRecordStore  # noqa: E402
from salon.db.session import create_engine_for_url  # noqa: E402
from salon.services.data_store import DataStore  # noqa: E402


@pytest.fixture
def clean_logging():
    """Restore root logging handlers replaced by setup_logging."""
    root_logger = logging.getLogger()
    original_handlers = root_logger.handlers[:]
    original_level = root_logger.level

    yield

    for handler in root_logger.handlers[:]:
        if handler not in original_handlers:
            handler.close()
        root_logger.removeHandler(handler)

    for handler in original_handlers:
        root_logger.addHandler(handler)

    root_logger.setLevel(original_level)


@pytest.fixture
def clock():
    return FrozenClock()


@pytest.fixture
def record_store():
    """Empty in-memory record store."""
    return InMemoryRecordStore()


@pytest.fixture
def store(record_store, clock):
    """Data store opened over an empty record store (all collections seeded)."""
    return DataStore.open(record_store, clock=clock)


@pytest.fixture
def sql_engine():
    """Fresh in-memory SQLite engine per test."""
    engine = create_engine_for_url(TEST_DATABASE_URL)
    yield engine
    engine.dispose()


@pytest.fixture
def sql_record_store(sql_engine):
    return SqlRecordStore(sql_engine)


@pytest.fixture
def app(store, clean_logging):
    """Flask application wired to the seeded in-memory store."""
    from salon.main import create_app

    flask_app = create_app(store=store, config_overrides={"TESTING": True})
    yield flask_app


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()
