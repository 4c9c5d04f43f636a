"""Brands resource handlers.

All routes require a bearer access token.

Handlers:
    create_brand - POST         /brands
    list_brands  - GET          /brands
    get_brand    - GET          /brands/{brand_id}
    update_brand - POST|PATCH   /brands/{brand_id}
    delete_brand - DELETE       /brands/{brand_id}
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from storefront.application.commands.brand_commands import (
    CreateBrand,
    DeleteBrand,
    UpdateBrand,
)
from storefront.application.commands.handlers import (
    CreateBrandHandler,
    DeleteBrandHandler,
    UpdateBrandHandler,
)
from storefront.application.queries.brand_queries import GetBrand, ListBrands
from storefront.application.queries.handlers import GetBrandHandler, ListBrandsHandler
from storefront.core.container import (
    get_create_brand_handler,
    get_delete_brand_handler,
    get_get_brand_handler,
    get_list_brands_handler,
    get_update_brand_handler,
)
from storefront.core.result import Failure, Success
from storefront.presentation.routers.api.middleware.auth_dependencies import (
    get_current_user,
)
from storefront.presentation.routers.api.v1.errors import ErrorResponseBuilder
from storefront.schemas import (
    ApiResponse,
    BrandResponse,
    CreateBrandRequest,
    UpdateBrandRequest,
)

brands_router = APIRouter(
    prefix="/brands", tags=["Brands"], dependencies=[Depends(get_current_user)]
)


@brands_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[BrandResponse],
)
async def create_brand(
    request: Request,
    data: CreateBrandRequest,
    handler: CreateBrandHandler = Depends(get_create_brand_handler),
) -> ApiResponse[BrandResponse] | JSONResponse:
    """Create a brand. 400 "Brand name already taken" on duplicates."""
    result = await handler.handle(
        CreateBrand(
            brand_name=data.brand_name,
            brand_image=data.brand_image,
            description=data.description,
        )
    )

    match result:
        case Success(value=brand):
            return ApiResponse(
                code=status.HTTP_201_CREATED,
                data=BrandResponse.model_validate(brand),
                message="Brand created successfully",
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@brands_router.get("", response_model=ApiResponse[list[BrandResponse]])
async def list_brands(
    request: Request,
    handler: ListBrandsHandler = Depends(get_list_brands_handler),
) -> ApiResponse[list[BrandResponse]] | JSONResponse:
    result = await handler.handle(ListBrands())

    match result:
        case Success(value=brands):
            return ApiResponse(
                code=status.HTTP_200_OK,
                data=[BrandResponse.model_validate(brand) for brand in brands],
                message="Brands retrieved successfully",
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@brands_router.get("/{brand_id}", response_model=ApiResponse[BrandResponse])
async def get_brand(
    request: Request,
    brand_id: UUID,
    handler: GetBrandHandler = Depends(get_get_brand_handler),
) -> ApiResponse[BrandResponse] | JSONResponse:
    result = await handler.handle(GetBrand(brand_id=brand_id))

    match result:
        case Success(value=brand):
            return ApiResponse(
                code=status.HTTP_200_OK,
                data=BrandResponse.model_validate(brand),
                message="Brand retrieved successfully",
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@brands_router.patch("/{brand_id}", response_model=ApiResponse[BrandResponse])
@brands_router.post("/{brand_id}", response_model=ApiResponse[BrandResponse])
async def update_brand(
    request: Request,
    brand_id: UUID,
    data: UpdateBrandRequest,
    handler: UpdateBrandHandler = Depends(get_update_brand_handler),
) -> ApiResponse[BrandResponse] | JSONResponse:
    """Update a brand. Accepted as POST or PATCH."""
    result = await handler.handle(
        UpdateBrand(
            brand_id=brand_id,
            brand_name=data.brand_name,
            brand_image=data.brand_image,
            description=data.description,
        )
    )

    match result:
        case Success(value=brand):
            return ApiResponse(
                code=status.HTTP_200_OK,
                data=BrandResponse.model_validate(brand),
                message="Brand updated successfully",
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@brands_router.delete(
    "/{brand_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
async def delete_brand(
    request: Request,
    brand_id: UUID,
    handler: DeleteBrandHandler = Depends(get_delete_brand_handler),
) -> Response:
    """Delete a brand. 400 while products still reference it."""
    result = await handler.handle(DeleteBrand(brand_id=brand_id))

    match result:
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)
