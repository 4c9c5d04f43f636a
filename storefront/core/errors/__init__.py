"""Core error values.

Usage:
    from storefront.core.errors import DomainError, NotFoundError
"""

from storefront.core.errors.common_errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
)
from storefront.core.errors.domain_error import DomainError

__all__ = [
    "AuthenticationError",
    "ConflictError",
    "DomainError",
    "NotFoundError",
]
