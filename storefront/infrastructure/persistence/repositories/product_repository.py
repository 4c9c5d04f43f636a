"""ProductRepository - SQLAlchemy implementation of the ProductRepository port."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domain.entities import Page, Product, QueryOptions
from storefront.domain.protocols import ProductFilter
from storefront.infrastructure.persistence.models.product import (
    Product as ProductModel,
)
from storefront.infrastructure.persistence.repositories.pagination import (
    apply_sort,
    paginate,
)

SORTABLE_COLUMNS = {
    "productName": ProductModel.product_name,
    "product_name": ProductModel.product_name,
    "price": ProductModel.price,
    "quantity": ProductModel.quantity,
    "createdAt": ProductModel.created_at,
    "created_at": ProductModel.created_at,
}


class ProductRepository:
    """SQLAlchemy implementation of ProductRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, product_id: UUID) -> Product | None:
        product_model = await self.session.get(ProductModel, product_id)
        return self._to_domain(product_model) if product_model else None

    async def list_all(self) -> list[Product]:
        result = await self.session.execute(
            select(ProductModel).order_by(ProductModel.created_at.desc())
        )
        return [self._to_domain(model) for model in result.scalars().all()]

    async def query(self, filters: ProductFilter, options: QueryOptions) -> Page[Product]:
        """List products; ``product_name`` matches as a case-insensitive substring."""
        stmt = select(ProductModel)
        if filters.product_name:
            stmt = stmt.where(
                ProductModel.product_name.icontains(filters.product_name, autoescape=True)
            )
        if filters.brand_id is not None:
            stmt = stmt.where(ProductModel.brand_id == filters.brand_id)
        stmt = apply_sort(stmt, options, SORTABLE_COLUMNS, ProductModel.created_at.desc())
        return await paginate(self.session, stmt, options, self._to_domain)

    async def save(self, product: Product) -> None:
        self.session.add(
            ProductModel(
                id=product.id,
                product_name=product.product_name,
                description_product=product.description_product,
                price=product.price,
                brand_id=product.brand_id,
                thumbnail=product.thumbnail,
                product_image_detail=list(product.product_image_detail),
                size=product.size,
                type=product.type,
                quantity=product.quantity,
                status=product.status,
            )
        )
        await self.session.commit()

    async def update(self, product: Product) -> None:
        """Persist product changes.

        Raises:
            ValueError: If the product row does not exist.
        """
        product_model = await self.session.get(ProductModel, product.id)
        if product_model is None:
            raise ValueError(f"Product {product.id} not found")
        product_model.product_name = product.product_name
        product_model.description_product = product.description_product
        product_model.price = product.price
        product_model.brand_id = product.brand_id
        product_model.thumbnail = product.thumbnail
        product_model.product_image_detail = list(product.product_image_detail)
        product_model.size = product.size
        product_model.type = product.type
        product_model.quantity = product.quantity
        product_model.status = product.status
        await self.session.commit()

    async def delete(self, product_id: UUID) -> bool:
        result = await self.session.execute(
            delete(ProductModel).where(ProductModel.id == product_id)
        )
        await self.session.commit()
        return result.rowcount > 0

    def _to_domain(self, product_model: ProductModel) -> Product:
        return Product(
            id=product_model.id,
            product_name=product_model.product_name,
            description_product=product_model.description_product,
            price=product_model.price,
            brand_id=product_model.brand_id,
            thumbnail=product_model.thumbnail,
            product_image_detail=list(product_model.product_image_detail or []),
            size=product_model.size,
            type=product_model.type,
            quantity=product_model.quantity,
            status=product_model.status,
            created_at=product_model.created_at,
            updated_at=product_model.updated_at,
        )
