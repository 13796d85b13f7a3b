"""
API routes - Voter registration endpoint.

Defines the single REST endpoint of the registration service:
- POST /register - Classify a candidate, persist it if eligible

The outcome is always carried in the plain-text body; every domain outcome
is answered with 200 OK. 500 is reserved for storage failures.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from src.api.dependencies import get_candidate, get_registration_service
from src.api.models import RegisterRequest
from src.domain.exceptions import StorageUnavailable
from src.domain.models import Person
from src.domain.ports import RegisterResult
from src.domain.registration import RegistrationService

router = APIRouter(tags=["registry"])


@router.post(
    "/register",
    response_class=PlainTextResponse,
    responses={
        200: {
            "content": {
                "text/plain": {
                    "schema": {"type": "string", "enum": [r.value for r in RegisterResult]}
                }
            },
            "description": "Outcome label",
        },
        500: {"description": "Storage unavailable"},
    },
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": RegisterRequest.request_body_schema()}},
        }
    },
    summary="Register a voter",
    description="Submit a candidate record. The response body is the outcome label: "
    "VALID, DUPLICATED, UNDERAGE, DEAD or INVALID.",
)
def register(
    candidate: Person | None = Depends(get_candidate),
    service: RegistrationService = Depends(get_registration_service),
) -> PlainTextResponse:
    """
    Register a voter.

    - **name**: Voter name (non-empty)
    - **id**: Voter identifier (must be positive)
    - **age**: Age in years
    - **gender**: FEMALE, MALE or OTHER (optional)
    - **alive**: Liveness flag

    Declared as a plain function so FastAPI runs the blocking repository
    calls in its threadpool.
    """
    try:
        result = service.register_voter(candidate)
    except StorageUnavailable:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Storage unavailable",
        ) from None
    return PlainTextResponse(result.value)
