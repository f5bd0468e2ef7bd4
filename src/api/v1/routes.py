"""
API v1 routes.

Defines REST endpoints for the registration validation API. Routes only
read Result values produced by the domain; they never feed decisions back
into it.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.api.dependencies import get_error_log, get_registration_service
from src.api.models import (
    ErrorLogEntryResponse,
    ErrorResponse,
    IssueModel,
    IssuesResponse,
    RegisterRequest,
    RegisterResponse,
    ValidateRequest,
    ValidateResponse,
)
from src.domain.accumulate import validate_registration_all
from src.domain.error_log import ErrorLog
from src.domain.errors import ErrorKind
from src.domain.registration import RegistrationService
from src.domain.result import Failure, Success

logger = logging.getLogger(__name__)

router = APIRouter(tags=["v1"])

_STATUS_BY_KIND = {
    ErrorKind.EMAIL: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.PASSWORD: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.AGE: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.DUPLICATE_EMAIL: status.HTTP_409_CONFLICT,
    ErrorKind.DATABASE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _error_response(error: ErrorResponse) -> JSONResponse:
    return JSONResponse(
        status_code=_STATUS_BY_KIND[error.kind],
        content=error.model_dump(mode="json"),
    )


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"model": ErrorResponse, "description": "Email already registered"},
        422: {"model": ErrorResponse, "description": "Invalid email, password or age"},
        503: {"model": ErrorResponse, "description": "Email lookup unavailable"},
    },
    summary="Register a new user",
    description="Validate email, password and age (first failure wins), "
    "then check the email is not already registered.",
)
async def register(
    request_data: RegisterRequest,
    service: RegistrationService = Depends(get_registration_service),
    error_log: ErrorLog = Depends(get_error_log),
) -> RegisterResponse | JSONResponse:
    """
    Register a new user.

    - **email**: Email address (must contain "@" and ".")
    - **password**: 8+ characters with an uppercase letter and a digit
    - **age**: 13 to 120

    Returns the normalized registration on success.
    """
    result = error_log.record(
        await service.register(request_data.email, request_data.password, request_data.age)
    )

    match result.map_error(ErrorResponse.from_error):
        case Success(payload):
            logger.info("[REGISTER] Accepted: %s", payload.email)
            return RegisterResponse(
                message="Registration accepted",
                email=payload.email,
                age=payload.age,
            )
        case Failure(error):
            if error.kind == ErrorKind.DATABASE:
                logger.warning("[REGISTER] Lookup failed: %s", error.detail)
            return _error_response(error)


@router.post(
    "/validate",
    response_model=ValidateResponse,
    responses={
        422: {"model": IssuesResponse, "description": "One or more invalid fields"},
    },
    summary="Validate all fields",
    description="Run every validator and report all invalid fields at once.",
)
async def validate(request_data: ValidateRequest) -> ValidateResponse | JSONResponse:
    """Collect-all validation: every invalid field is reported, in field order."""
    result = validate_registration_all(
        request_data.email, request_data.password, request_data.age
    )
    return result.match(
        lambda values: ValidateResponse(message="All fields valid", email=values["email"]),
        lambda issues: JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=IssuesResponse(
                issues=[IssueModel.from_issue(issue) for issue in issues]
            ).model_dump(mode="json"),
        ),
    )


@router.get(
    "/errors",
    response_model=list[ErrorLogEntryResponse],
    summary="List recorded failures",
    description="Registration failures recorded since startup, oldest first.",
)
async def list_errors(
    error_log: ErrorLog = Depends(get_error_log),
) -> list[ErrorLogEntryResponse]:
    """Return the error log contents."""
    return [
        ErrorLogEntryResponse(
            timestamp=entry.timestamp,
            kind=entry.error.kind,
            detail=entry.error.detail,
        )
        for entry in error_log
    ]
