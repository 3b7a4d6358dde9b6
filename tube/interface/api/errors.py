"""Exception handlers rendering errors as the response envelope."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from tube.domain.error import (
    ConflictError,
    DomainError,
    MissingActorError,
    NotAuthorizedError,
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
)
from tube.interface.api.envelope import error_response

# Most specific class wins (looked up along the MRO)
ERROR_STATUS: dict[type[DomainError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    MissingActorError: status.HTTP_401_UNAUTHORIZED,
    NotAuthorizedError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    StoreUnavailableError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

GENERIC_ERROR_MESSAGE = "Something went wrong"


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error; unknown errors are server errors."""
    for cls in type(error).__mro__:
        if cls in ERROR_STATUS:
            return ERROR_STATUS[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logfire.error(
            "Request failed",
            path=request.url.path,
            error_type=type(exc).__name__,
            error=str(exc),
        )
    else:
        logfire.warn(
            "Request rejected",
            path=request.url.path,
            error_type=type(exc).__name__,
            status_code=status_code,
            error=str(exc),
        )
    return error_response(status_code, str(exc))


def _describe(errors: list[dict]) -> str:
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logfire.warn("Request validation failed", path=request.url.path)
    errors = list(exc.errors())
    message = _describe(errors) if errors else "Invalid request"
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def handle_model_validation_error(
    request: Request, exc: PydanticValidationError
) -> JSONResponse:
    logfire.warn(
        "Domain model validation failed",
        path=request.url.path,
        error_count=exc.error_count(),
    )
    return error_response(status.HTTP_400_BAD_REQUEST, _describe(exc.errors()))


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
        _exc_info=exc,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    """Attach the envelope-rendering handlers to the app."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(PydanticValidationError, handle_model_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
