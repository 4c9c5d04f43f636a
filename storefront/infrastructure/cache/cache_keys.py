"""Cache key construction.

All keys follow the pattern ``{prefix}:{domain}:{id}``.

Usage:
    keys = CacheKeys(prefix=settings.cache_key_prefix)
    keys.otp("jane@example.com")  # "storefront:otp:jane@example.com"
"""

from dataclasses import dataclass


@dataclass
class CacheKeys:
    """Centralized cache key construction.

    Attributes:
        prefix: Namespace for every key (typically "storefront").
    """

    prefix: str

    def otp(self, email: str) -> str:
        """One-time email code key.

        Pattern: {prefix}:otp:{email}

        The email is lowercased so differently cased requests share one code.
        """
        return f"{self.prefix}:otp:{email.strip().lower()}"
