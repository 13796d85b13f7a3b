"""
Registration domain service - Voter eligibility cascade.

This module contains the core business logic for voter registration.

Eligibility Cascade (first match wins)
======================================

    1. candidate absent            -> INVALID
    2. id <= 0                     -> INVALID
    3. age < 18                    -> UNDERAGE
    4. not alive                   -> DEAD
    5. id already persisted        -> DUPLICATED
    6. otherwise: persist          -> VALID

Steps 1-4 are pure checks on the candidate and never consult the repository.
The existence check runs only once they all pass, and save() is called
exactly once, only on the VALID path.

Any failure raised by the repository is wrapped as StorageUnavailable.
Storage failures are never reported as a RegisterResult.
"""

import logging
from dataclasses import dataclass

from .exceptions import StorageUnavailable
from .models import Person
from .ports import RegisterResult, VoterRepository

logger = logging.getLogger(__name__)

MINIMUM_VOTING_AGE = 18


@dataclass(frozen=True)
class RegistrationService:
    """
    Domain service for voter registration.

    Stateless: holds only the repository reference, so a single instance
    can be shared across concurrent requests.
    """

    repository: VoterRepository

    def register_voter(self, candidate: Person | None) -> RegisterResult:
        """
        Classify a candidate and persist it if eligible.

        Args:
            candidate: Candidate record, or None when nothing usable was submitted

        Returns:
            RegisterResult for the first matching rule of the cascade

        Raises:
            StorageUnavailable: If the repository fails during the existence
                check or the insert
        """
        rejection = self._check_eligibility(candidate)
        if rejection is not None:
            logger.info(
                "Registration rejected: %s (id=%s)",
                rejection.value,
                getattr(candidate, "id", None),
            )
            return rejection

        if self._exists(candidate.id):
            logger.info("Registration rejected: DUPLICATED (id=%s)", candidate.id)
            return RegisterResult.DUPLICATED

        self._save(candidate)
        logger.info("Voter registered (id=%s)", candidate.id)
        return RegisterResult.VALID

    def _check_eligibility(self, candidate: Person | None) -> RegisterResult | None:
        """Apply the candidate-only rules (steps 1-4). Returns None if all pass."""
        if candidate is None:
            return RegisterResult.INVALID
        if candidate.id <= 0:
            return RegisterResult.INVALID
        if candidate.age < MINIMUM_VOTING_AGE:
            return RegisterResult.UNDERAGE
        if not candidate.alive:
            return RegisterResult.DEAD
        return None

    def _exists(self, voter_id: int) -> bool:
        try:
            return self.repository.exists_by_id(voter_id)
        except Exception as e:
            logger.error("Existence check failed for id=%s: %s", voter_id, e)
            raise StorageUnavailable(f"Could not check voter {voter_id}") from e

    def _save(self, candidate: Person) -> None:
        try:
            self.repository.save(
                candidate.id,
                candidate.name,
                candidate.age,
                candidate.alive,
                gender=candidate.gender,
            )
        except Exception as e:
            logger.error("Insert failed for id=%s: %s", candidate.id, e)
            raise StorageUnavailable(f"Could not save voter {candidate.id}") from e
