"""TokenRepository - SQLAlchemy implementation of the TokenRepository port."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domain.entities import TokenRecord
from storefront.domain.enums import TokenType
from storefront.infrastructure.persistence.models.token import Token as TokenModel


class TokenRepository:
    """SQLAlchemy implementation of TokenRepository protocol.

    Example:
        >>> repo = TokenRepository(session)
        >>> record = await repo.find_valid(value, TokenType.REFRESH)
        >>> await repo.delete(record.id)
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, record: TokenRecord) -> None:
        self.session.add(
            TokenModel(
                id=record.id,
                token=record.token,
                user_id=record.user_id,
                type=record.type.value,
                expires_at=record.expires_at,
                blacklisted=record.blacklisted,
            )
        )
        await self.session.commit()

    async def find_valid(
        self,
        token: str,
        token_type: TokenType,
        *,
        user_id: UUID | None = None,
    ) -> TokenRecord | None:
        """Find a non-blacklisted token by value and type (expiry unchecked)."""
        stmt = select(TokenModel).where(
            TokenModel.token == token,
            TokenModel.type == token_type.value,
            TokenModel.blacklisted.is_(False),
        )
        if user_id is not None:
            stmt = stmt.where(TokenModel.user_id == user_id)
        result = await self.session.execute(stmt.limit(1))
        token_model = result.scalar_one_or_none()
        return self._to_domain(token_model) if token_model else None

    async def delete(self, token_id: UUID) -> bool:
        result = await self.session.execute(
            delete(TokenModel).where(TokenModel.id == token_id)
        )
        await self.session.commit()
        return result.rowcount > 0

    async def delete_by_user_and_type(self, user_id: UUID, token_type: TokenType) -> int:
        result = await self.session.execute(
            delete(TokenModel).where(
                TokenModel.user_id == user_id,
                TokenModel.type == token_type.value,
            )
        )
        await self.session.commit()
        return result.rowcount

    def _to_domain(self, token_model: TokenModel) -> TokenRecord:
        return TokenRecord(
            id=token_model.id,
            token=token_model.token,
            user_id=token_model.user_id,
            type=TokenType(token_model.type),
            expires_at=token_model.expires_at,
            blacklisted=token_model.blacklisted,
            created_at=token_model.created_at,
        )
