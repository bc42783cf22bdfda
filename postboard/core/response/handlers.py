"""Envelope responses and the exception handlers that produce them."""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from postboard.core.exceptions import AppException
from postboard.core.response import schemas

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "An unexpected error occurred"


def success_response(
    data: Any = None,
    message: str = "Success",
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    """Send a success envelope with the given HTTP status."""
    body = schemas.success(data, message=message, status_code=status_code)
    return JSONResponse(status_code=status_code, content=body.to_content())


def error_response(
    message: str = "Error",
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    data: Any = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Send an error envelope with the given HTTP status."""
    body = schemas.error(message=message, status_code=status_code, data=data)
    return JSONResponse(status_code=status_code, content=body.to_content(), headers=headers)


def _status_code_of(exc: Exception) -> int:
    code = getattr(exc, "status_code", None)
    if isinstance(code, int) and not isinstance(code, bool) and 400 <= code <= 599:
        return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _message_of(exc: Exception) -> str:
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc) or DEFAULT_ERROR_MESSAGE


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last stop for anything a handler did not answer itself."""
    status_code = _status_code_of(exc)
    logger.error(
        "Error on %s %s: %r",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
        extra={"method": request.method, "path": request.url.path, "status_code": status_code},
    )
    return error_response(message=_message_of(exc), status_code=status_code)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Framework-level HTTP errors (unknown route, wrong method) in envelope form."""
    return error_response(
        message=str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies are client errors."""
    logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
    return error_response(
        message="Invalid request data",
        status_code=status.HTTP_400_BAD_REQUEST,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers. Call once per app."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(AppException, global_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
