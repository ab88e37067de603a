# app/errors.py
from enum import Enum
from http import HTTPStatus
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .logger import get_logger

logger = get_logger("errors")


class ErrorKind(str, Enum):
    NOT_FOUND = "NotFoundError"
    VALIDATION = "ValidationError"
    UNAUTHORIZED = "UnauthorizedError"
    INTERNAL = "InternalServerError"

    @property
    def status_code(self) -> int:
        return _STATUS_BY_KIND[self]


_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.INTERNAL: 500,
}

_KIND_BY_STATUS = {status: kind for kind, status in _STATUS_BY_KIND.items()}


class ApiError(Exception):
    """A failure the API reports to the caller; the kind decides the status code."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    @classmethod
    def not_found(cls, message: str = "Product not found") -> "ApiError":
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def validation(cls, message: str) -> "ApiError":
        return cls(ErrorKind.VALIDATION, message)

    @classmethod
    def unauthorized(cls, message: str = "Invalid API key") -> "ApiError":
        return cls(ErrorKind.UNAUTHORIZED, message)


def error_body(message: str, error_type: str) -> Dict[str, Any]:
    return {"error": {"message": message, "type": error_type}}


def error_response(status_code: int, message: str, error_type: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error_body(message, error_type))


# ---------------------------
# Exception handlers
# ---------------------------
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.kind.value, exc.message)
    return error_response(exc.status_code, exc.message, exc.kind.value)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = [err.get("msg", "") for err in exc.errors()]
    message = "; ".join(m for m in messages if m) or "Invalid request body"
    return error_response(400, message, ErrorKind.VALIDATION.value)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    kind = _KIND_BY_STATUS.get(exc.status_code)
    error_type = kind.value if kind else "HTTPError"
    if isinstance(exc.detail, str):
        message = exc.detail
    else:
        try:
            message = HTTPStatus(exc.status_code).phrase
        except ValueError:
            message = "Error"
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(message, error_type),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, str(exc) or "Internal Server Error", ErrorKind.INTERNAL.value)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
