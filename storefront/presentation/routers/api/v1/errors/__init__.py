"""Envelope error responses and exception handlers.

Exports:
    ErrorResponseBuilder: Build envelope responses from ApplicationError
    envelope_response: Build any envelope JSONResponse
    register_exception_handlers: Register global exception handlers with FastAPI
"""

from storefront.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
    envelope_response,
)
from storefront.presentation.routers.api.v1.errors.exception_handlers import (
    format_validation_errors,
    register_exception_handlers,
)

__all__ = [
    "ErrorResponseBuilder",
    "envelope_response",
    "format_validation_errors",
    "register_exception_handlers",
]
