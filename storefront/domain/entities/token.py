"""Persisted token record and the transient token pair."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from storefront.domain.enums import TokenType


@dataclass
class TokenRecord:
    """Stored credential artifact (refresh, reset-password or verify-email).

    A token is valid only while it is present in the store, not blacklisted
    and not expired. Deleting the record revokes it.

    Attributes:
        id: Record identifier.
        token: Signed token value handed to the client.
        user_id: Owner of the token.
        type: Token kind.
        expires_at: Expiry timestamp (UTC).
        blacklisted: Whether the token was revoked before expiry.
        created_at: Issue timestamp.
    """

    id: UUID
    token: str
    user_id: UUID
    type: TokenType
    expires_at: datetime
    blacklisted: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check whether the record is past its expiry.

        Args:
            now: Reference time, defaults to the current UTC time.

        Returns:
            bool: True once ``expires_at`` is not in the future.
        """
        reference = now or datetime.now(UTC)
        expires_at = self.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=UTC)
        return expires_at <= reference

    def is_usable(self, now: datetime | None = None) -> bool:
        """True while the record is neither blacklisted nor expired."""
        return not self.blacklisted and not self.is_expired(now)


@dataclass(frozen=True, slots=True, kw_only=True)
class IssuedToken:
    """A signed token value with its expiry."""

    token: str
    expires: datetime


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthTokenPair:
    """Access and refresh tokens returned after login, registration or refresh.

    Not persisted as such; only the refresh half has a ``TokenRecord``.
    """

    access: IssuedToken
    refresh: IssuedToken
