"""User administration and catalog handler dependency factories.

Request-scoped handler instances for:
- Users (create, get, list, update, delete)
- Brands (create, get, list, update, delete)
- Products (create, get, list, list all, update, delete)
"""

from fastapi import Depends

from storefront.application.commands.handlers import (
    CreateBrandHandler,
    CreateProductHandler,
    CreateUserHandler,
    DeleteBrandHandler,
    DeleteProductHandler,
    DeleteUserHandler,
    UpdateBrandHandler,
    UpdateProductHandler,
    UpdateUserHandler,
)
from storefront.application.queries.handlers import (
    GetBrandHandler,
    GetProductHandler,
    GetUserHandler,
    ListAllProductsHandler,
    ListBrandsHandler,
    ListProductsHandler,
    ListUsersHandler,
)
from storefront.core.container.infrastructure import (
    get_file_storage,
    get_logger,
    get_password_service,
)
from storefront.core.container.repositories import (
    get_brand_repository,
    get_product_repository,
    get_user_repository,
)
from storefront.domain.protocols import (
    BrandRepository,
    ProductRepository,
    UserRepository,
)


# ============================================================================
# Users
# ============================================================================


async def get_create_user_handler(
    user_repo: UserRepository = Depends(get_user_repository),
) -> CreateUserHandler:
    return CreateUserHandler(
        user_repo=user_repo,
        password_service=get_password_service(),
        logger=get_logger(),
    )


async def get_update_user_handler(
    user_repo: UserRepository = Depends(get_user_repository),
) -> UpdateUserHandler:
    return UpdateUserHandler(
        user_repo=user_repo,
        password_service=get_password_service(),
        logger=get_logger(),
    )


async def get_delete_user_handler(
    user_repo: UserRepository = Depends(get_user_repository),
) -> DeleteUserHandler:
    return DeleteUserHandler(user_repo=user_repo, logger=get_logger())


async def get_get_user_handler(
    user_repo: UserRepository = Depends(get_user_repository),
) -> GetUserHandler:
    return GetUserHandler(user_repo=user_repo)


async def get_list_users_handler(
    user_repo: UserRepository = Depends(get_user_repository),
) -> ListUsersHandler:
    return ListUsersHandler(user_repo=user_repo)


# ============================================================================
# Brands
# ============================================================================


async def get_create_brand_handler(
    brand_repo: BrandRepository = Depends(get_brand_repository),
) -> CreateBrandHandler:
    return CreateBrandHandler(brand_repo=brand_repo, logger=get_logger())


async def get_update_brand_handler(
    brand_repo: BrandRepository = Depends(get_brand_repository),
) -> UpdateBrandHandler:
    return UpdateBrandHandler(brand_repo=brand_repo, logger=get_logger())


async def get_delete_brand_handler(
    brand_repo: BrandRepository = Depends(get_brand_repository),
    product_repo: ProductRepository = Depends(get_product_repository),
) -> DeleteBrandHandler:
    return DeleteBrandHandler(
        brand_repo=brand_repo, product_repo=product_repo, logger=get_logger()
    )


async def get_get_brand_handler(
    brand_repo: BrandRepository = Depends(get_brand_repository),
) -> GetBrandHandler:
    return GetBrandHandler(brand_repo=brand_repo)


async def get_list_brands_handler(
    brand_repo: BrandRepository = Depends(get_brand_repository),
) -> ListBrandsHandler:
    return ListBrandsHandler(brand_repo=brand_repo)


# ============================================================================
# Products
# ============================================================================


async def get_create_product_handler(
    product_repo: ProductRepository = Depends(get_product_repository),
    brand_repo: BrandRepository = Depends(get_brand_repository),
) -> CreateProductHandler:
    """Get CreateProduct command handler (request-scoped).

    Upload storage is the app-scoped local disk adapter.
    """
    return CreateProductHandler(
        product_repo=product_repo,
        brand_repo=brand_repo,
        file_storage=get_file_storage(),
        logger=get_logger(),
    )


async def get_update_product_handler(
    product_repo: ProductRepository = Depends(get_product_repository),
    brand_repo: BrandRepository = Depends(get_brand_repository),
) -> UpdateProductHandler:
    return UpdateProductHandler(
        product_repo=product_repo, brand_repo=brand_repo, logger=get_logger()
    )


async def get_delete_product_handler(
    product_repo: ProductRepository = Depends(get_product_repository),
) -> DeleteProductHandler:
    return DeleteProductHandler(product_repo=product_repo, logger=get_logger())


async def get_get_product_handler(
    product_repo: ProductRepository = Depends(get_product_repository),
) -> GetProductHandler:
    return GetProductHandler(product_repo=product_repo)


async def get_list_products_handler(
    product_repo: ProductRepository = Depends(get_product_repository),
) -> ListProductsHandler:
    return ListProductsHandler(product_repo=product_repo)


async def get_list_all_products_handler(
    product_repo: ProductRepository = Depends(get_product_repository),
) -> ListAllProductsHandler:
    return ListAllProductsHandler(product_repo=product_repo)
