"""
Translate exceptions into the uniform error payload.

Every failure leaving the API has the shape
``{code, value, message, timestamp, path}`` with an HTTP status chosen from
the error code.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from uom_service.core.errors import ErrorCode, ServiceError
from uom_service.core.logging import get_logger
from uom_service.core.messages import MessageCatalog

logger = get_logger(__name__)

_STATUS_BY_CODE: dict[int, int] = {
    ErrorCode.INVALID_DATA.code: status.HTTP_400_BAD_REQUEST,
    ErrorCode.RESOURCE_CONFLICT.code: status.HTTP_409_CONFLICT,
    ErrorCode.RESOURCE_NOT_FOUND.code: status.HTTP_404_NOT_FOUND,
}

_PARAMETER_LOCATIONS = frozenset({"query", "path", "header", "cookie"})


class ErrorResponse(BaseModel):
    """Uniform error payload."""

    code: int
    value: str
    message: str
    timestamp: datetime
    path: str


def status_for_code(code: int) -> int:
    """HTTP status for an error code; anything unlisted is a 500."""
    return _STATUS_BY_CODE.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)


def get_message_catalog(request: Request) -> MessageCatalog:
    catalog = getattr(request.app.state, "messages", None)
    if catalog is None:
        catalog = MessageCatalog()
        request.app.state.messages = catalog
    return catalog


def build_error_response(
    request: Request,
    error_code: ErrorCode,
    message: str,
    status_code: int,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    payload = ErrorResponse(
        code=error_code.code,
        value=error_code.symbol,
        message=message,
        timestamp=datetime.now(UTC),
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status_code,
        content=payload.model_dump(mode="json"),
        headers=headers,
    )


def _validation_message(catalog: MessageCatalog, errors: list[dict[str, Any]]) -> str:
    missing = [
        err
        for err in errors
        if err.get("type") == "missing" and err.get("loc") and err["loc"][0] in _PARAMETER_LOCATIONS
    ]
    if missing:
        return catalog.get("parameter.missing", missing[0]["loc"][-1])
    if not errors:
        return ErrorCode.INVALID_DATA.default_message
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ())]
    field = ".".join(loc[1:]) or ".".join(loc) or "request"
    return catalog.get("validation.failed", field, first.get("msg", "invalid value"))


def configure_exception_handlers(app: FastAPI) -> None:
    """Register the error translators on ``app``."""

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
        status_code = status_for_code(exc.code)
        message = get_message_catalog(request).resolve(exc)
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error("service_error", code=exc.code, value=exc.symbol, error_message=message)
        else:
            logger.warning("service_error", code=exc.code, value=exc.symbol, error_message=message)
        return build_error_response(request, exc.error_code, message, status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = _validation_message(get_message_catalog(request), list(exc.errors()))
        logger.warning("request_validation_failed", error_message=message)
        return build_error_response(
            request, ErrorCode.INVALID_DATA, message, status.HTTP_400_BAD_REQUEST
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        catalog = get_message_catalog(request)
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            message = catalog.get("method.not.supported", request.method)
            return build_error_response(
                request,
                ErrorCode.INVALID_DATA,
                message,
                status.HTTP_405_METHOD_NOT_ALLOWED,
                headers=exc.headers,
            )
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            error_code = ErrorCode.RESOURCE_NOT_FOUND
        elif exc.status_code < status.HTTP_500_INTERNAL_SERVER_ERROR:
            error_code = ErrorCode.INVALID_DATA
        else:
            error_code = ErrorCode.UNEXPECTED_ERROR
        return build_error_response(
            request, error_code, str(exc.detail), exc.status_code, headers=exc.headers
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("unhandled_exception", path=request.url.path, exc_info=exc)
        message = get_message_catalog(request).get("global.error.unexpected", str(exc))
        return build_error_response(
            request,
            ErrorCode.UNEXPECTED_ERROR,
            message,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
