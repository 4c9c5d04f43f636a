"""Key-value cache port.

Every operation returns a ``Result`` so callers can tell "key absent"
(``Success(value=None)``) from "cache unreachable" (``Failure``).
"""

from typing import Protocol

from storefront.core.errors import DomainError
from storefront.core.result import Result


class CacheProtocol(Protocol):
    """What the application needs from the cache."""

    async def get(self, key: str) -> Result[str | None, DomainError]:
        """Get a value.

        Returns:
            Success(value) with the stored string, or Success(None) when the
            key does not exist. Failure(CacheError) if the cache is down.
        """
        ...

    async def set(
        self,
        key: str,
        value: str,
        ttl: int | None = None,
    ) -> Result[None, DomainError]:
        """Set a value, overwriting any existing one.

        Args:
            key: Cache key.
            value: Value to store.
            ttl: Time to live in seconds; None keeps the key forever.
        """
        ...

    async def delete(self, key: str) -> Result[bool, DomainError]:
        """Delete a key. Success(True) when something was deleted."""
        ...

    async def ttl(self, key: str) -> Result[int | None, DomainError]:
        """Remaining lifetime in seconds, None if the key is absent or has none."""
        ...

    async def compare_and_delete(
        self, key: str, expected: str
    ) -> Result[bool, DomainError]:
        """Atomically delete ``key`` if its value equals ``expected``.

        Two concurrent callers presenting the same value cannot both succeed.

        Returns:
            Success(True) if the value matched and was deleted, Success(False)
            if the key is absent or holds another value.
        """
        ...

    async def ping(self) -> Result[bool, DomainError]: ...
