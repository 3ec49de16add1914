"""
API error types and the app-level handlers that render them.

Every error body has the shape `{"error": str, "code"?: str, "details"?: dict}`.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ApiError(StarletteHTTPException):
    code = "API_ERROR"
    default_status = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        *,
        status_code: int | None = None,
    ) -> None:
        super().__init__(status_code=status_code or self.default_status, detail=message)
        self.details = details


class AuthenticationError(ApiError):
    code = "UNAUTHORIZED"
    default_status = status.HTTP_401_UNAUTHORIZED


class ValidationError(ApiError):
    code = "VALIDATION_ERROR"
    default_status = status.HTTP_400_BAD_REQUEST


class NotFoundError(ApiError):
    code = "NOT_FOUND"
    default_status = status.HTTP_404_NOT_FOUND


class ExternalServiceError(ApiError):
    code = "EXTERNAL_SERVICE_ERROR"
    default_status = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(exc: StarletteHTTPException) -> dict[str, Any]:
    body: dict[str, Any] = {"error": str(exc.detail)}
    if isinstance(exc, ApiError):
        body["code"] = exc.code
        if exc.details:
            body["details"] = exc.details
    return body


async def _http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(error_body(exc), status_code=exc.status_code, headers=exc.headers)


def _field_name(loc: tuple[Any, ...]) -> str:
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts) or "body"


async def _validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    details = {_field_name(tuple(err.get("loc", ()))): err.get("msg", "Invalid value") for err in exc.errors()}
    err = ValidationError("Invalid request", details)
    return JSONResponse(error_body(err), status_code=err.status_code)


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error method=%s path=%s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        {"error": "Internal Server Error"},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def install_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
