"""Redis adapter implementing CacheProtocol.

Wraps an async Redis client, maps Redis exceptions to ``CacheError`` and
returns ``Result`` values for every operation.

Architecture:
- Implements CacheProtocol without inheritance (structural typing)
- Owns the client lifecycle: ``close()`` releases the connection pool
- ``compare_and_delete`` runs as one Lua script so the read and the delete
  cannot interleave with another client
"""

from redis.asyncio import Redis
from redis.exceptions import RedisError

from storefront.core.enums import ErrorCode
from storefront.core.result import Failure, Result, Success
from storefront.infrastructure.enums import InfrastructureErrorCode
from storefront.infrastructure.errors import CacheError

# KEYS[1] = key, ARGV[1] = expected value. Returns 1 when deleted, else 0.
COMPARE_AND_DELETE_SCRIPT = """
if redis.call('GET', KEYS[1]) == ARGV[1] then
    return redis.call('DEL', KEYS[1])
end
return 0
"""


def _cache_failure(
    infrastructure_code: InfrastructureErrorCode,
    message: str,
    error: Exception,
    key: str | None = None,
) -> Failure[CacheError]:
    details: dict[str, str] = {"error": str(error), "type": type(error).__name__}
    if key is not None:
        details["key"] = key
    return Failure(
        error=CacheError(
            code=ErrorCode.CACHE_ERROR,
            infrastructure_code=infrastructure_code,
            message=message,
            details=details,
        )
    )


class RedisAdapter:
    """Redis implementation of CacheProtocol.

    Attributes:
        _redis: Async Redis client, created with ``decode_responses=True``.
    """

    def __init__(self, redis_client: Redis) -> None:
        """Initialize Redis adapter.

        Args:
            redis_client: Async Redis client instance.
        """
        self._redis = redis_client
        self._compare_and_delete = redis_client.register_script(
            COMPARE_AND_DELETE_SCRIPT
        )

    @classmethod
    def from_url(cls, redis_url: str) -> "RedisAdapter":
        """Build an adapter with its own connection pool.

        Args:
            redis_url: Redis URL, e.g. ``redis://localhost:6379/0``.
        """
        client = Redis.from_url(redis_url, decode_responses=True)
        return cls(client)

    async def get(self, key: str) -> Result[str | None, CacheError]:
        """Get value from Redis.

        Returns:
            Result with value if found, None if not found, or CacheError.
        """
        try:
            value = await self._redis.get(key)
        except RedisError as e:
            return _cache_failure(
                InfrastructureErrorCode.CACHE_GET_ERROR,
                f"Failed to get key '{key}' from cache",
                e,
                key,
            )
        if value is None:
            return Success(value=None)
        decoded = value.decode("utf-8") if isinstance(value, bytes) else value
        return Success(value=decoded)

    async def set(
        self,
        key: str,
        value: str,
        ttl: int | None = None,
    ) -> Result[None, CacheError]:
        """Set value in Redis, replacing any previous value and expiry.

        Args:
            key: Cache key.
            value: Value to cache.
            ttl: Time to live in seconds (None = no expiration).
        """
        try:
            if ttl is not None:
                await self._redis.setex(key, ttl, value)
            else:
                await self._redis.set(key, value)
        except RedisError as e:
            return _cache_failure(
                InfrastructureErrorCode.CACHE_SET_ERROR,
                f"Failed to set key '{key}' in cache",
                e,
                key,
            )
        return Success(value=None)

    async def delete(self, key: str) -> Result[bool, CacheError]:
        """Delete key from Redis.

        Returns:
            Result with True if the key existed, False otherwise.
        """
        try:
            deleted = await self._redis.delete(key)
        except RedisError as e:
            return _cache_failure(
                InfrastructureErrorCode.CACHE_DELETE_ERROR,
                f"Failed to delete key '{key}' from cache",
                e,
                key,
            )
        return Success(value=deleted > 0)

    async def ttl(self, key: str) -> Result[int | None, CacheError]:
        """Get remaining time to live for a key.

        Returns:
            Seconds left, or None when the key is missing or never expires.
        """
        try:
            remaining = await self._redis.ttl(key)
        except RedisError as e:
            return _cache_failure(
                InfrastructureErrorCode.CACHE_GET_ERROR,
                f"Failed to get TTL for key '{key}'",
                e,
                key,
            )
        # -2: key missing, -1: no expiry
        if remaining < 0:
            return Success(value=None)
        return Success(value=remaining)

    async def compare_and_delete(
        self, key: str, expected: str
    ) -> Result[bool, CacheError]:
        """Delete ``key`` only if it currently holds ``expected`` (atomic).

        Returns:
            Result with True if the value matched and was deleted.
        """
        try:
            deleted = await self._compare_and_delete(keys=[key], args=[expected])
        except RedisError as e:
            return _cache_failure(
                InfrastructureErrorCode.CACHE_SCRIPT_ERROR,
                f"Failed to compare-and-delete key '{key}'",
                e,
                key,
            )
        return Success(value=int(deleted) == 1)

    async def ping(self) -> Result[bool, CacheError]:
        """Check Redis connectivity (health check)."""
        try:
            await self._redis.ping()  # type: ignore[misc]
        except RedisError as e:
            return _cache_failure(
                InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
                "Failed to connect to cache",
                e,
            )
        return Success(value=True)

    async def close(self) -> None:
        """Close the client and release its connection pool."""
        await self._redis.aclose()
