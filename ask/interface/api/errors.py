"""Mapping of domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ask.domain.error import (
    NotFoundError,
    NotQuestionOwnerError,
    StorageUnavailableError,
    UnauthenticatedError,
)

_STATUS_BY_ERROR: list[tuple[type[Exception], int]] = [
    (UnauthenticatedError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (NotQuestionOwnerError, status.HTTP_403_FORBIDDEN),
    (StorageUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers for domain errors.

    Args:
        app: FastAPI application
    """
    for error_type, status_code in _STATUS_BY_ERROR:
        app.add_exception_handler(error_type, _handler_for(status_code))


def _handler_for(status_code: int):
    async def handle(request: Request, exc: Exception) -> JSONResponse:
        logfire.info(
            "Request failed with domain error",
            path=request.url.path,
            status_code=status_code,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        headers = (
            {"Retry-After": "1"}
            if status_code == status.HTTP_503_SERVICE_UNAVAILABLE
            else None
        )
        return JSONResponse(
            status_code=status_code, content={"detail": str(exc)}, headers=headers
        )

    return handle
