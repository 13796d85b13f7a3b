"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting the domain service,
its repository adapter and the decoded candidate into routes.
"""

import logging

from fastapi import Request
from psycopg_pool import ConnectionPool
from pydantic import ValidationError

from src.adapters.repository.postgres import PostgresVoterRepository
from src.api.models import RegisterRequest
from src.domain.models import Person
from src.domain.registration import RegistrationService

logger = logging.getLogger(__name__)


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresVoterRepository:
    """Create repository with connection pool from app state."""
    pool = get_pool(request)
    return PostgresVoterRepository(pool)


def get_registration_service(request: Request) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires the Postgres repository into the domain service.
    """
    repository = get_repository(request)
    return RegistrationService(repository=repository)


async def get_candidate(request: Request) -> Person | None:
    """
    Decode the request body into a candidate record.

    Malformed JSON, an empty body, missing required fields and wrong types
    all decode to None, which the domain classifies as INVALID. Decoding
    failures are therefore answered with an outcome label instead of 422.

    Returns:
        Person if the body is a valid submission, None otherwise
    """
    body = await request.body()
    try:
        payload = RegisterRequest.model_validate_json(body)
    except ValidationError as e:
        logger.debug("Undecodable registration body (%s error(s))", e.error_count())
        return None
    return payload.to_person()
