"""Redis cache adapters."""

from storefront.infrastructure.cache.cache_keys import CacheKeys
from storefront.infrastructure.cache.otp_store import OtpStore
from storefront.infrastructure.cache.redis_adapter import RedisAdapter

__all__ = ["CacheKeys", "OtpStore", "RedisAdapter"]
