"""Mapping of domain errors to HTTP responses."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from patient_service.api.middleware import route_template
from patient_service.core.config import settings
from patient_service.core.logging import get_logger
from patient_service.domain.exceptions import (
    AlreadyActiveError,
    AlreadyInactiveError,
    DuplicateEmailError,
    InactivePatientError,
    NotFoundError,
    PatientRegistryError,
    ValidationError,
)

logger = get_logger(__name__)

ERROR_STATUS_CODES: dict[type[PatientRegistryError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateEmailError: status.HTTP_409_CONFLICT,
    InactivePatientError: status.HTTP_409_CONFLICT,
    AlreadyActiveError: status.HTTP_409_CONFLICT,
    AlreadyInactiveError: status.HTTP_409_CONFLICT,
}


def status_code_for(exc: PatientRegistryError) -> int:
    """Resolve the status code for an error, walking its class hierarchy."""
    for cls in type(exc).__mro__:
        if cls in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[cls]
    return status.HTTP_400_BAD_REQUEST


async def patient_registry_error_handler(
    request: Request, exc: PatientRegistryError
) -> JSONResponse:
    """Translate a domain error into a JSON response."""
    status_code = status_code_for(exc)
    logger.info(
        "request_rejected",
        error=type(exc).__name__,
        status_code=status_code,
        path=route_template(request),
        method=request.method,
    )
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "error": type(exc).__name__, **exc.details},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unexpected failure and answer 500 without leaking details outside debug."""
    logger.error(
        "unhandled_exception",
        path=route_template(request),
        method=request.method,
        error=str(exc),
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "Internal server error",
            "message": str(exc) if settings.debug else "An unexpected error occurred",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the domain and fallback error handlers on an application."""
    app.add_exception_handler(PatientRegistryError, patient_registry_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
