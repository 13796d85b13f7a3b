"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- An in-memory voter repository for database-free domain tests
- A PostgreSQL connection pool (skips the test when the database is unreachable)
"""

from collections.abc import Generator

import pytest
from psycopg_pool import ConnectionPool, PoolTimeout

from src.adapters.repository.postgres import PostgresVoterRepository
from src.config.settings import get_settings
from src.domain.models import Gender, StoredVoter


class InMemoryVoterRepository:
    """Dict-backed VoterRepository with the same contract as the Postgres adapter."""

    def __init__(self) -> None:
        self.voters: dict[int, StoredVoter] = {}

    def init_schema(self) -> None:
        pass

    def exists_by_id(self, voter_id: int) -> bool:
        return voter_id in self.voters

    def save(
        self,
        voter_id: int,
        name: str,
        age: int,
        alive: bool,
        gender: Gender | None = None,
    ) -> None:
        if voter_id in self.voters:
            raise KeyError(f"duplicate key value violates unique constraint: id={voter_id}")
        self.voters[voter_id] = StoredVoter(
            id=voter_id, name=name, age=age, alive=alive, gender=gender
        )

    def find_by_id(self, voter_id: int) -> StoredVoter | None:
        return self.voters.get(voter_id)

    def delete_all(self) -> None:
        self.voters.clear()


@pytest.fixture
def memory_repository() -> InMemoryVoterRepository:
    """Fresh, empty in-memory repository."""
    repo = InMemoryVoterRepository()
    repo.init_schema()
    repo.delete_all()
    return repo


@pytest.fixture(scope="session")
def pool() -> Generator[ConnectionPool, None, None]:
    """
    Create connection pool for database-backed tests.

    Uses Settings.database_url. Skips dependent tests if PostgreSQL does not
    accept a connection within a few seconds.
    """
    settings = get_settings()
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=10,
        open=False,
    )
    try:
        pool.open(wait=True, timeout=5.0)
    except PoolTimeout:
        pool.close()
        pytest.skip(f"PostgreSQL not reachable at {settings.database_url}")

    PostgresVoterRepository(pool).init_schema()
    yield pool
    pool.close()
