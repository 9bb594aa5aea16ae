"""Exception handlers rendering every error as ``{"error": message}``."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from simplebank.modules.common import (
    ForeignKeyViolationError,
    RecordNotFoundError,
    StoreError,
    UniqueViolationError,
)
from simplebank.modules.transfers import InvalidTransferError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "internal server error"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _format_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path"))
        message = error.get("msg", "invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages) or "invalid request"


async def handle_validation_exception(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(
        "request validation error",
        extra={
            "path": request.url.path,
            "method": request.method,
            # Raw inputs stay out of the log; they may carry passwords.
            "errors": [{"loc": error.get("loc"), "msg": error.get("msg")} for error in exc.errors()],
        },
    )
    return error_response(status.HTTP_400_BAD_REQUEST, _format_validation_errors(exc))


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def handle_invalid_transfer(request: Request, exc: InvalidTransferError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def handle_store_error(request: Request, exc: StoreError) -> JSONResponse:
    if isinstance(exc, RecordNotFoundError):
        return error_response(status.HTTP_404_NOT_FOUND, str(exc))
    if isinstance(exc, (UniqueViolationError, ForeignKeyViolationError)):
        logger.warning(
            "constraint violation",
            extra={"path": request.url.path, "method": request.method, "error": str(exc)},
        )
        return error_response(status.HTTP_403_FORBIDDEN, str(exc))
    return await handle_internal_error(request, exc)


async def handle_internal_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unhandled exception",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error": str(exc),
            "error_type": type(exc).__name__,
        },
        exc_info=exc,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, handle_validation_exception)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(InvalidTransferError, handle_invalid_transfer)
    app.add_exception_handler(StoreError, handle_store_error)
    app.add_exception_handler(TimeoutError, handle_internal_error)
    app.add_exception_handler(SQLAlchemyError, handle_internal_error)
    app.add_exception_handler(Exception, handle_internal_error)


__all__ = ["error_response", "register_exception_handlers", "INTERNAL_ERROR_MESSAGE"]
