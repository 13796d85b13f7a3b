"""Repository adapters - Database implementations."""

from .postgres import PostgresVoterRepository

__all__ = ["PostgresVoterRepository"]
