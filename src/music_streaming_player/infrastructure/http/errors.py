"""Translation of domain errors into HTTP responses."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

import pydantic
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from music_streaming_player.domain.shared.exceptions import (
    AuthenticationError,
    DomainError,
    EntityNotFoundError,
    PermissionDeniedError,
    StorageUnavailableError,
)
from music_streaming_player.domain.shared.messages import ErrorMessages, LogTemplates

logger = logging.getLogger(__name__)

# First match wins; anything else rooted at DomainError is a caller error.
_STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN),
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (StorageUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def status_for(exc: DomainError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def _error_response(
    status_code: int, code: str, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"code": code, "message": message}},
        headers=headers,
    )


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    log = logger.warning if status_code >= 500 else logger.info
    log(LogTemplates.DOMAIN_ERROR_RESPONSE, request.method, request.url.path, status_code, exc.code)

    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return _error_response(status_code, exc.code, exc.message, headers)


def _describe(err: Mapping[str, Any]) -> str:
    location = ".".join(str(part) for part in err.get("loc", ()))
    return f"{location}: {err['msg']}" if location else str(err["msg"])


@contextmanager
def client_input() -> Iterator[None]:
    """Treat model validation failures in the block as a malformed request.

    Wrap only code that builds commands or queries from request data.
    """
    try:
        yield
    except pydantic.ValidationError as exc:
        raise RequestValidationError(exc.errors()) from exc


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = "; ".join(_describe(err) for err in exc.errors())
    logger.info(
        LogTemplates.DOMAIN_ERROR_RESPONSE,
        request.method,
        request.url.path,
        status.HTTP_400_BAD_REQUEST,
        "VALIDATION_ERROR",
    )
    return _error_response(status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR", details)


async def handle_internal_validation_error(
    request: Request, exc: pydantic.ValidationError
) -> JSONResponse:
    # Raised while hydrating stored or internal data.
    logger.error(LogTemplates.INTERNAL_VALIDATION_FAILED, request.method, request.url.path, exc)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR", ErrorMessages.INTERNAL_ERROR
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(pydantic.ValidationError, handle_internal_validation_error)
