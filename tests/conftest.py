"""Shared fixtures for the flightbook test suite."""

import pytest

from flightbook.database.config import DatabaseConfig
from flightbook.services import upsert_flight


@pytest.fixture
def db_config():
    """Create an in-memory store with both tables."""
    config = DatabaseConfig(database_url="sqlite:///:memory:")
    config.create_tables()
    yield config
    config.close()


@pytest.fixture
def session(db_config):
    """Create a database session for testing."""
    with db_config.get_session_context() as session:
        yield session


@pytest.fixture
def flight(session):
    """The demo flight, stored with id 1."""
    return upsert_flight(session, "ABC123", "New York", "Los Angeles")
