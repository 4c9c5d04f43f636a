"""Ephemeral store for one-time email codes.

One code per email. Issuing overwrites the previous code and restarts its
time to live. Consuming is single-use and atomic.
"""

from storefront.core.errors import DomainError
from storefront.core.result import Failure, Result, Success
from storefront.domain.protocols import CacheProtocol
from storefront.infrastructure.cache.cache_keys import CacheKeys


class OtpStore:
    """OTP codes keyed by email on top of CacheProtocol.

    Example:
        >>> store = OtpStore(cache=cache, keys=CacheKeys("storefront"), ttl_seconds=60)
        >>> await store.issue("jane@example.com", "482913")
        Success(value=None)
        >>> await store.consume("jane@example.com", "482913")
        Success(value=True)
        >>> await store.consume("jane@example.com", "482913")
        Success(value=False)
    """

    def __init__(self, *, cache: CacheProtocol, keys: CacheKeys, ttl_seconds: int) -> None:
        self._cache = cache
        self._keys = keys
        self._ttl_seconds = ttl_seconds

    @property
    def ttl_seconds(self) -> int:
        return self._ttl_seconds

    async def issue(self, email: str, code: str) -> Result[None, DomainError]:
        """Store ``code`` for ``email`` with the configured time to live."""
        return await self._cache.set(self._keys.otp(email), code, ttl=self._ttl_seconds)

    async def consume(self, email: str, code: str) -> Result[bool, DomainError]:
        """Delete the stored code if it equals ``code``.

        Returns:
            Success(True) on match, Success(False) when the code is wrong,
            expired or already used, Failure when the cache is unavailable.
        """
        result = await self._cache.compare_and_delete(self._keys.otp(email), code)
        match result:
            case Success(value=matched):
                return Success(value=matched)
            case Failure(error=error):
                return Failure(error=error)
