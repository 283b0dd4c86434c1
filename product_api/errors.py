# product_api/errors.py
"""
Error kinds and the single place that turns failures into responses.

Everything that can go wrong in a request (bad key, bad payload, unknown
id) is raised as an ``ApiError`` tagged with an ``ErrorKind``.  The kind
owns the HTTP status, so the renderer never needs to know which subclass
it is looking at.  Anything that is not an ``ApiError`` is an internal
failure: it is logged with its traceback and the client only sees a
generic 500.
"""

import logging
from enum import Enum
from typing import Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    UNAUTHORIZED = (401, "Unauthorized - Invalid or missing API key")
    VALIDATION = (400, "Validation error")
    NOT_FOUND = (404, "Resource not found")
    INTERNAL = (500, "Internal Server Error")

    def __init__(self, status_code: int, default_message: str):
        self.status_code = status_code
        self.default_message = default_message


class ApiError(Exception):
    kind = ErrorKind.INTERNAL

    def __init__(self, message: Optional[str] = None, kind: Optional[ErrorKind] = None):
        if kind is not None:
            self.kind = kind
        self.message = message or self.kind.default_message
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return self.kind.status_code


class UnauthorizedError(ApiError):
    kind = ErrorKind.UNAUTHORIZED


class ValidationError(ApiError):
    kind = ErrorKind.VALIDATION


class NotFoundError(ApiError):
    kind = ErrorKind.NOT_FOUND


def error_response(status_code: int, message: str, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return error_response(exc.kind.status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # unknown routes, wrong methods
    return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = errors[0].get("msg", ErrorKind.VALIDATION.default_message) if errors else ErrorKind.VALIDATION.default_message
    return error_response(ErrorKind.VALIDATION.status_code, message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(ErrorKind.INTERNAL.status_code, ErrorKind.INTERNAL.default_message)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
