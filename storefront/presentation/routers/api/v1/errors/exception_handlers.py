"""Global exception handlers for FastAPI application.

Every error leaves the API in the standard envelope with ``success: false``.

Handlers:
    http_exception_handler: HTTPException (auth dependencies, unknown routes)
    validation_exception_handler: RequestValidationError -> 400
    generic_exception_handler: Catches all unhandled exceptions -> 500

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
    format_validation_errors: Join pydantic error messages
"""

from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.core.container import get_logger
from storefront.presentation.routers.api.v1.errors.error_response_builder import (
    envelope_response,
)

INTERNAL_ERROR_MESSAGE = "Internal server error"
_VALUE_ERROR_PREFIX = "Value error, "


def format_validation_errors(errors: Sequence[Any]) -> str:
    """Join pydantic error messages with ", ".

    Messages raised by our own validators lose pydantic's ``Value error, ``
    prefix; other messages are prefixed with the offending field.

    Example:
        >>> format_validation_errors(
        ...     [{"loc": ("body", "email"), "msg": "Value error, Invalid email"}]
        ... )
        'Invalid email'
    """
    messages: list[str] = []
    for error in errors:
        msg = str(error.get("msg", "Validation failed"))
        if msg.startswith(_VALUE_ERROR_PREFIX):
            messages.append(msg.removeprefix(_VALUE_ERROR_PREFIX))
            continue
        field_parts = [
            str(p) for p in error.get("loc", ()) if p not in ("body", "query", "path")
        ]
        messages.append(f"{'.'.join(field_parts)}: {msg}" if field_parts else msg)
    return ", ".join(messages)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert HTTPException to an envelope response.

    Headers such as ``WWW-Authenticate`` are preserved.
    """
    assert isinstance(exc, StarletteHTTPException)
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return envelope_response(
        exc.status_code, detail, headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Convert RequestValidationError to a 400 envelope response."""
    assert isinstance(exc, RequestValidationError)
    return envelope_response(
        status.HTTP_400_BAD_REQUEST, format_validation_errors(exc.errors())
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions without leaking internals to the client."""
    get_logger().error(
        "unhandled_exception",
        error=exc,
        request_path=request.url.path,
        request_method=request.method,
        trace_id=getattr(request.state, "trace_id", None),
    )
    return envelope_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Example:
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
