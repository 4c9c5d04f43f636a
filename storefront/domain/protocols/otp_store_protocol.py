"""One-time code store port."""

from typing import Protocol

from storefront.core.errors import DomainError
from storefront.core.result import Result


class OtpStoreProtocol(Protocol):
    """Single-use, time-boxed codes keyed by email."""

    @property
    def ttl_seconds(self) -> int: ...

    async def issue(self, email: str, code: str) -> Result[None, DomainError]:
        """Store ``code`` for ``email``, replacing any earlier code."""
        ...

    async def consume(self, email: str, code: str) -> Result[bool, DomainError]:
        """Atomically remove the stored code if it equals ``code``.

        Returns:
            Success(True) on match, Success(False) on mismatch or absence,
            Failure when the store is unavailable.
        """
        ...
