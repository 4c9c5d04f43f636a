"""Base error value for the domain and infrastructure layers.

``DomainError`` is not an ``Exception``. It travels inside ``Failure`` and is
inspected by handlers, never raised.

Usage:
    @dataclass(frozen=True, slots=True, kw_only=True)
    class CacheError(DomainError):
        pass
"""

from dataclasses import dataclass

from storefront.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Error value returned in ``Failure``.

    Attributes:
        code: Machine-readable error code.
        message: Human-readable message.
        details: Optional debugging context.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
