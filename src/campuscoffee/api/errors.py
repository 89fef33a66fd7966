"""Translate domain and request-validation errors into HTTP responses."""

from __future__ import annotations

from datetime import UTC, datetime
from http import HTTPStatus
from logging import getLogger
from typing import TYPE_CHECKING

from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from campuscoffee.domain.errors import CampusCoffeeError, ErrorKind

from .dtos import ErrorResponse

if TYPE_CHECKING:
    from fastapi import FastAPI, Request

log = getLogger(__name__)

STATUS_BY_KIND: dict[ErrorKind, HTTPStatus] = {
    ErrorKind.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorKind.DUPLICATION: HTTPStatus.CONFLICT,
    ErrorKind.INVALID_ARGUMENT: HTTPStatus.BAD_REQUEST,
}


def _error_response(
    request: Request,
    status: HTTPStatus,
    error_code: str,
    message: str,
) -> JSONResponse:
    log.info("%s %s -> %s: %s", request.method, request.url.path, status.value, message)
    body = ErrorResponse(
        error_code=error_code,
        message=message,
        status_code=status.value,
        status_message=status.phrase,
        timestamp=datetime.now(UTC),
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.value,
        content=body.model_dump(mode="json", by_alias=True),
    )


async def handle_domain_error(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, CampusCoffeeError):
        raise exc
    return _error_response(request, STATUS_BY_KIND[exc.kind], type(exc).__name__, str(exc))


async def handle_validation_error(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, RequestValidationError):
        raise exc
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    return _error_response(
        request,
        HTTPStatus.BAD_REQUEST,
        type(exc).__name__,
        f"Validation failed: {details}",
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CampusCoffeeError, handle_domain_error)
    # malformed bodies and parameters answer 400 with the same body
    app.add_exception_handler(RequestValidationError, handle_validation_error)
