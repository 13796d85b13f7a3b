"""
Shared fixtures for adversarial tests.

Provides common test infrastructure for race condition tests.
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
def clean_database(pool: ConnectionPool) -> Generator[None, None, None]:
    """Clean voters table before each test."""
    PostgresVoterRepository(pool).delete_all()
    yield
