"""
Error taxonomy and the envelope-rendering exception handlers.

Services raise subclasses of ``PortalError``; each carries the HTTP
status code it maps to and a user-facing Vietnamese message.  The
handlers registered by ``register_exception_handlers`` turn these, as
well as FastAPI's own request validation errors and any unexpected
exception, into the uniform ``{"success": false, "message": ...}``
envelope.  Stack traces are logged, never returned.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)

MSG_INVALID_INPUT = "Dữ liệu không hợp lệ"
MSG_NOT_FOUND_ROUTE = "Không tìm thấy trang hoặc API"
MSG_INTERNAL = "Đã xảy ra lỗi hệ thống. Vui lòng thử lại sau."


class PortalError(Exception):
    """Base class for errors rendered as an error envelope."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = MSG_INTERNAL

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(PortalError):
    """Missing or malformed input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = MSG_INVALID_INPUT


class NotFoundError(PortalError):
    """Unknown identifier or code."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Không tìm thấy dữ liệu"


class DuplicateCodeError(PortalError):
    """A code is already taken in its registry."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Mã số đã tồn tại"


class InternalError(PortalError):
    """Unexpected fault; the message is always the generic one."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = MSG_INTERNAL


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


async def portal_error_handler(request: Request, exc: PortalError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected request to %s: %s", request.url.path, exc.errors())
    return error_response(status.HTTP_400_BAD_REQUEST, MSG_INVALID_INPUT)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return error_response(exc.status_code, MSG_NOT_FOUND_ROUTE)
    return error_response(exc.status_code, str(exc.detail))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    error = InternalError()
    return error_response(error.status_code, error.message)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the envelope-rendering handlers to ``app``."""
    app.add_exception_handler(PortalError, portal_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
