"""Exception handlers mapping domain errors to HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from gallery.domain.error import (
    AuthenticationError,
    DomainError,
    DuplicateIdentityError,
    EmailUnverifiedError,
    MissingProfileFieldError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error."""
    if isinstance(error, DuplicateIdentityError):
        return status.HTTP_409_CONFLICT
    if isinstance(error, EmailUnverifiedError):
        return status.HTTP_403_FORBIDDEN
    if isinstance(error, (ValidationError, MissingProfileFieldError)):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(error, AuthenticationError):
        return status.HTTP_401_UNAUTHORIZED
    if isinstance(error, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_400_BAD_REQUEST


async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, DomainError)
    status_code = status_for(exc)
    logger.info(f"{request.method} {request.url.path} -> {status_code}: {exc}")

    content: dict[str, str] = {"detail": str(exc)}
    if isinstance(exc, AuthenticationError):
        content["code"] = exc.code
    return JSONResponse(status_code=status_code, content=content)


async def request_validation_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, RequestValidationError)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request", "errors": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, object]]:
    """Validation errors without the raw input (may contain passwords)."""
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
