"""
PostgreSQL repository adapter - Implements VoterRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Uniqueness Design:
------------------
The voters table uses the voter id as PRIMARY KEY. The domain checks
exists_by_id() before save(), but two concurrent registrations for the same
new id can both pass that check. The primary key serializes them: the
second INSERT fails with a UniqueViolation, which the domain surfaces as
StorageUnavailable. No application-level lock is taken.

Every operation borrows a connection from the pool for its own duration only;
the pool context manager returns it on success and on failure.
"""

import logging

from psycopg_pool import ConnectionPool

from src.domain.models import Gender, StoredVoter

logger = logging.getLogger(__name__)

_SCHEMA_SQL = """
    CREATE TABLE IF NOT EXISTS voters (
        id BIGINT PRIMARY KEY CHECK (id > 0),
        name TEXT NOT NULL,
        age INTEGER NOT NULL CHECK (age >= 0),
        alive BOOLEAN NOT NULL,
        gender TEXT CHECK (gender IN ('FEMALE', 'MALE', 'OTHER')),
        registered_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    )
"""


class PostgresVoterRepository:
    """
    Implements VoterRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool built from the configured database URL
        """
        self._pool = pool

    def init_schema(self) -> None:
        """
        Create the voters table if it does not exist.

        Idempotent; safe to call on every startup.

        Raises:
            RuntimeError: If the schema cannot be created
        """
        logger.info("Ensuring voters schema exists")
        try:
            with self._pool.connection() as conn:
                conn.execute(_SCHEMA_SQL)
                conn.commit()
        except Exception as e:
            logger.error(f"Schema initialization failed - {e}")
            raise RuntimeError("Database schema initialization failed") from e

    def exists_by_id(self, voter_id: int) -> bool:
        """
        Check whether a voter with this id is persisted.

        Args:
            voter_id: Voter identifier

        Returns:
            True if a row exists for the id
        """
        sql = "SELECT 1 FROM voters WHERE id = %s"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (voter_id,))
            return cursor.fetchone() is not None

    def save(
        self,
        voter_id: int,
        name: str,
        age: int,
        alive: bool,
        gender: Gender | None = None,
    ) -> None:
        """
        Insert a new voter row.

        Plain INSERT with no ON CONFLICT clause: a duplicate id raises
        psycopg.errors.UniqueViolation and nothing is written.

        Args:
            voter_id: Voter identifier (must be > 0, enforced by CHECK)
            name: Voter name, stored verbatim
            age: Age in years
            alive: Liveness flag
            gender: Optional gender
        """
        sql = """
            INSERT INTO voters (id, name, age, alive, gender)
            VALUES (%s, %s, %s, %s, %s)
        """
        gender_value = gender.value if gender is not None else None

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (voter_id, name, age, alive, gender_value))
            conn.commit()

    def find_by_id(self, voter_id: int) -> StoredVoter | None:
        """
        Load a stored voter.

        Args:
            voter_id: Voter identifier

        Returns:
            StoredVoter if found, None otherwise
        """
        sql = "SELECT id, name, age, alive, gender FROM voters WHERE id = %s"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (voter_id,))
            row = cursor.fetchone()

        if row is None:
            return None
        return StoredVoter(
            id=row[0],
            name=row[1],
            age=row[2],
            alive=row[3],
            gender=Gender(row[4]) if row[4] is not None else None,
        )

    def delete_all(self) -> None:
        """Remove every stored voter (test support and administration)."""
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute("DELETE FROM voters")
            deleted = cursor.rowcount
            conn.commit()
        logger.info("Deleted %s voter(s)", deleted)
