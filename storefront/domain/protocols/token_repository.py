"""TokenRepository port for persisted refresh, reset and verify tokens."""

from typing import Protocol
from uuid import UUID

from storefront.domain.entities import TokenRecord
from storefront.domain.enums import TokenType


class TokenRepository(Protocol):
    """Token store. Deleting a record revokes the token.

    Example:
        >>> record = await repo.find_valid(value, TokenType.REFRESH)
        >>> if record:
        ...     await repo.delete(record.id)
    """

    async def save(self, record: TokenRecord) -> None:
        """Persist a newly issued token."""
        ...

    async def find_valid(
        self,
        token: str,
        token_type: TokenType,
        *,
        user_id: UUID | None = None,
    ) -> TokenRecord | None:
        """Find a non-blacklisted token by value and type.

        Expiry is not checked here; callers use ``TokenRecord.is_usable``.

        Args:
            token: Token value.
            token_type: Required token kind.
            user_id: When given, the record must also belong to this user.
        """
        ...

    async def delete(self, token_id: UUID) -> bool:
        """Delete one token. Returns False if it was already gone."""
        ...

    async def delete_by_user_and_type(self, user_id: UUID, token_type: TokenType) -> int:
        """Delete every token of ``token_type`` owned by ``user_id``.

        Returns:
            Number of deleted records.
        """
        ...
