"""BrandRepository - SQLAlchemy implementation of the BrandRepository port."""

from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.enums import ErrorCode
from storefront.core.errors import ConflictError
from storefront.core.result import Failure, Result, Success
from storefront.domain.entities import Brand
from storefront.infrastructure.persistence.models.brand import Brand as BrandModel


class BrandRepository:
    """SQLAlchemy implementation of BrandRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, brand_id: UUID) -> Brand | None:
        brand_model = await self.session.get(BrandModel, brand_id)
        return self._to_domain(brand_model) if brand_model else None

    async def exists_by_name(
        self, brand_name: str, *, exclude_brand_id: UUID | None = None
    ) -> bool:
        stmt = select(BrandModel.id).where(
            func.lower(BrandModel.brand_name) == brand_name.lower()
        )
        if exclude_brand_id is not None:
            stmt = stmt.where(BrandModel.id != exclude_brand_id)
        result = await self.session.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None

    async def list_all(self) -> list[Brand]:
        result = await self.session.execute(
            select(BrandModel).order_by(BrandModel.brand_name)
        )
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, brand: Brand) -> Result[None, ConflictError]:
        self.session.add(
            BrandModel(
                id=brand.id,
                brand_name=brand.brand_name,
                brand_image=brand.brand_image,
                description=brand.description,
            )
        )
        return await self._commit_or_conflict()

    async def update(self, brand: Brand) -> Result[None, ConflictError]:
        """Persist brand changes.

        Returns:
            Success(None), or Failure(ConflictError) when the name is taken.

        Raises:
            ValueError: If the brand row does not exist.
        """
        brand_model = await self.session.get(BrandModel, brand.id)
        if brand_model is None:
            raise ValueError(f"Brand {brand.id} not found")
        brand_model.brand_name = brand.brand_name
        brand_model.brand_image = brand.brand_image
        brand_model.description = brand.description
        return await self._commit_or_conflict()

    async def delete(self, brand_id: UUID) -> bool:
        result = await self.session.execute(
            delete(BrandModel).where(BrandModel.id == brand_id)
        )
        await self.session.commit()
        return result.rowcount > 0

    async def _commit_or_conflict(self) -> Result[None, ConflictError]:
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            return Failure(
                error=ConflictError(
                    code=ErrorCode.BRAND_NAME_ALREADY_EXISTS,
                    message="Brand name already taken",
                    resource_type="Brand",
                    conflicting_field="brand_name",
                )
            )
        return Success(value=None)

    def _to_domain(self, brand_model: BrandModel) -> Brand:
        return Brand(
            id=brand_model.id,
            brand_name=brand_model.brand_name,
            brand_image=brand_model.brand_image,
            description=brand_model.description,
            created_at=brand_model.created_at,
            updated_at=brand_model.updated_at,
        )
