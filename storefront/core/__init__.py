"""Shared kernel: result values, error values, enums and settings.

Nothing in ``core`` imports from the outer layers.
"""

from storefront.core.enums import ErrorCode
from storefront.core.errors import (
    AuthenticationError,
    ConflictError,
    DomainError,
    NotFoundError,
)
from storefront.core.result import Failure, Result, Success

__all__ = [
    "AuthenticationError",
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
]
