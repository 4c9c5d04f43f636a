"""Infrastructure errors.

Usage:
    from storefront.infrastructure.errors import CacheError
"""

from storefront.infrastructure.errors.infrastructure_error import (
    CacheError,
    InfrastructureError,
    StorageError,
)

__all__ = ["CacheError", "InfrastructureError", "StorageError"]
