"""Response envelope shared by every endpoint.

Successful responses carry ``{statusCode, data, message, success}``; error
responses carry the same keys with ``success`` false and ``data`` null.
"""

from typing import Generic, TypeVar

from fastapi.responses import JSONResponse

from tube.application.usecase.items import ApiModel

T = TypeVar("T")


class ApiResponse(ApiModel, Generic[T]):
    """Success envelope."""

    status_code: int = 200
    data: T | None = None
    message: str = "Success"
    success: bool = True


class ErrorResponse(ApiModel):
    """Error envelope."""

    status_code: int
    message: str
    success: bool = False
    data: None = None


def error_response(status_code: int, message: str) -> JSONResponse:
    """Render the error envelope with a matching HTTP status."""
    body = ErrorResponse(status_code=status_code, message=message)
    return JSONResponse(
        status_code=status_code, content=body.model_dump(mode="json", by_alias=True)
    )
