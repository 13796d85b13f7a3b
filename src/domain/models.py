"""
Domain models - Candidate and stored voter records.

This module defines the value objects that flow between the HTTP adapter,
the registration use case and the repository.
"""

from dataclasses import dataclass
from enum import Enum


class Gender(str, Enum):
    """
    Closed gender enumeration.

    Carried and persisted for completeness; no eligibility rule branches on it.
    """

    FEMALE = "FEMALE"
    MALE = "MALE"
    OTHER = "OTHER"


@dataclass(frozen=True)
class Person:
    """A candidate submitted for registration (not yet persisted)."""

    name: str
    id: int
    age: int
    gender: Gender | None
    alive: bool


@dataclass(frozen=True)
class StoredVoter:
    """An accepted record currently held by the repository."""

    id: int
    name: str
    age: int
    alive: bool
    gender: Gender | None = None
