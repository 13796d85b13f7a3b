"""
Shared fixtures for integration tests.

All integration tests run against the PostgreSQL database configured in
Settings.database_url and are skipped when it is unreachable.
"""

from collections.abc import Generator

import pytest
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import PostgresVoterRepository


@pytest.fixture
def repository(pool: ConnectionPool) -> PostgresVoterRepository:
    """Create repository instance for each test."""
    return PostgresVoterRepository(pool)


@pytest.fixture(autouse=True)
def clean_database(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    """Truncate the voters table before each database-backed test."""
    if "pool" in request.fixturenames:
        PostgresVoterRepository(request.getfixturevalue("pool")).delete_all()
    yield
