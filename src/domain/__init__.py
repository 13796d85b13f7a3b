"""
Domain layer - Pure business logic with zero framework imports.

This package contains the voter eligibility rules. It defines its own port
interfaces for infrastructure abstraction, so adapters depend on the domain
and never the other way around.
"""

from .exceptions import RegistrationError, StorageUnavailable
from .models import Gender, Person, StoredVoter
from .ports import RegisterResult, VoterRepository
from .registration import MINIMUM_VOTING_AGE, RegistrationService

__all__ = [
    "MINIMUM_VOTING_AGE",
    "Gender",
    "Person",
    "RegisterResult",
    "RegistrationError",
    "RegistrationService",
    "StorageUnavailable",
    "StoredVoter",
    "VoterRepository",
]
