"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from enum import Enum
from typing import Protocol

from .models import Gender


class RegisterResult(Enum):
    """
    Outcome of a registration attempt.

    Exactly one member is returned per attempt. The value of each member is
    its uppercase name, which is also the wire encoding in HTTP responses.

    Only VALID implies that a record was persisted; every other member is a
    domain rejection that leaves the repository untouched.
    """

    VALID = "VALID"
    DUPLICATED = "DUPLICATED"
    UNDERAGE = "UNDERAGE"
    DEAD = "DEAD"
    INVALID = "INVALID"


class VoterRepository(Protocol):
    """Port interface for voter persistence."""

    def exists_by_id(self, voter_id: int) -> bool:
        """
        Check whether a voter with this identifier is persisted.

        Args:
            voter_id: Voter identifier (primary key)

        Returns:
            True if a stored voter exists for the identifier
        """
        ...

    def save(
        self,
        voter_id: int,
        name: str,
        age: int,
        alive: bool,
        gender: Gender | None = None,
    ) -> None:
        """
        Insert a new stored voter.

        Callers only invoke this after a negative exists_by_id(). Implementations
        may enforce uniqueness with a primary-key constraint, in which case a
        second insert for the same identifier raises.

        Args:
            voter_id: Voter identifier (strictly positive)
            name: Voter name, stored verbatim
            age: Age in years
            alive: Liveness flag
            gender: Optional gender, stored for completeness
        """
        ...
