"""Infrastructure error values.

Adapters catch backend exceptions and return these inside ``Failure``. They
inherit from ``DomainError`` and are never raised.
"""

from dataclasses import dataclass
from typing import Any

from storefront.core.errors import DomainError
from storefront.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message.
        infrastructure_code: Backend operation that failed.
        details: Additional context (key, original error).
    """

    infrastructure_code: InfrastructureErrorCode | None = None
    details: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheError(InfrastructureError):
    """Redis failure (connection, command or script)."""


@dataclass(frozen=True, slots=True, kw_only=True)
class StorageError(InfrastructureError):
    """Upload could not be stored or was rejected."""
