"""Products resource handlers.

Handlers:
    create_product    - POST   /products               (manageProducts, multipart)
    list_products     - GET    /products
    list_all_products - GET    /products/all
    get_product       - GET    /products/{product_id}
    update_product    - PATCH  /products/{product_id}  (manageProducts)
    delete_product    - DELETE /products/{product_id}  (manageProducts)
"""

from decimal import Decimal
from uuid import UUID

from fastapi import (
    APIRouter,
    Depends,
    File,
    Form,
    Query,
    Request,
    Response,
    UploadFile,
    status,
)
from fastapi.responses import JSONResponse

from storefront.application.commands.handlers import (
    CreateProductHandler,
    DeleteProductHandler,
    UpdateProductHandler,
)
from storefront.application.commands.product_commands import (
    CreateProduct,
    DeleteProduct,
    UpdateProduct,
)
from storefront.application.dtos import UploadedFile
from storefront.application.queries.handlers import (
    GetProductHandler,
    ListAllProductsHandler,
    ListProductsHandler,
)
from storefront.application.queries.product_queries import (
    GetProduct,
    ListAllProducts,
    ListProducts,
)
from storefront.core.container import (
    get_create_product_handler,
    get_delete_product_handler,
    get_get_product_handler,
    get_list_all_products_handler,
    get_list_products_handler,
    get_update_product_handler,
)
from storefront.core.result import Failure, Success
from storefront.domain.entities import QueryOptions
from storefront.domain.protocols import ProductFilter
from storefront.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
)
from storefront.presentation.routers.api.middleware.authorization_dependencies import (
    require_right,
)
from storefront.presentation.routers.api.v1.errors import ErrorResponseBuilder
from storefront.schemas import (
    ApiResponse,
    PageResponse,
    ProductResponse,
    UpdateProductRequest,
)

products_router = APIRouter(prefix="/products", tags=["Products"])


async def _read_upload(upload: UploadFile) -> UploadedFile:
    return UploadedFile(
        filename=upload.filename or "upload",
        content=await upload.read(),
        content_type=upload.content_type,
    )


@products_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[ProductResponse],
)
async def create_product(
    request: Request,
    product_name: str = Form(..., alias="productName", min_length=1, max_length=200),
    description_product: str = Form(..., alias="descriptionProduct", max_length=5000),
    price: Decimal = Form(..., ge=0),
    brand_id: UUID = Form(..., alias="brandId"),
    size: str | None = Form(None, max_length=50),
    product_type: str | None = Form(None, alias="type", max_length=50),
    quantity: int = Form(0, ge=0),
    product_status: str | None = Form(None, alias="status", max_length=50),
    thumbnail: UploadFile | None = File(None),
    product_image_detail: list[UploadFile] | None = File(
        None, alias="productImageDetail"
    ),
    _: CurrentUser = Depends(require_right("manageProducts")),
    handler: CreateProductHandler = Depends(get_create_product_handler),
) -> ApiResponse[ProductResponse] | JSONResponse:
    """Create a product from a multipart form.

    POST /v1/products -> 201 Created

    ``thumbnail`` is a single required image; ``productImageDetail`` takes up
    to five images. Files are stored by the upload storage and the product
    keeps their URLs.
    """
    command = CreateProduct(
        product_name=product_name,
        description_product=description_product,
        price=price,
        brand_id=brand_id,
        thumbnail=await _read_upload(thumbnail) if thumbnail is not None else None,
        product_image_detail=[
            await _read_upload(upload) for upload in product_image_detail or []
        ],
        size=size,
        type=product_type,
        quantity=quantity,
        status=product_status,
    )
    result = await handler.handle(command)

    match result:
        case Success(value=product):
            return ApiResponse(
                code=status.HTTP_201_CREATED,
                data=ProductResponse.model_validate(product),
                message="Product created successfully",
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@products_router.get("", response_model=ApiResponse[PageResponse[ProductResponse]])
async def list_products(
    request: Request,
    product_name: str | None = Query(
        None, alias="productName", description="Case-insensitive substring"
    ),
    brand_id: UUID | None = Query(None, alias="brandId"),
    sort_by: str | None = Query(
        None, alias="sortBy", description="field:asc|desc, comma-separated"
    ),
    limit: int = Query(10, ge=1, le=100),
    page: int = Query(1, ge=1),
    handler: ListProductsHandler = Depends(get_list_products_handler),
) -> ApiResponse[PageResponse[ProductResponse]] | JSONResponse:
    """List products with filters, sorting and pagination."""
    result = await handler.handle(
        ListProducts(
            filters=ProductFilter(product_name=product_name, brand_id=brand_id),
            options=QueryOptions(sort_by=sort_by, limit=limit, page=page),
        )
    )

    match result:
        case Success(value=products_page):
            return ApiResponse(
                code=status.HTTP_200_OK,
                data=PageResponse[ProductResponse].from_page(
                    products_page, ProductResponse
                ),
                message="Products retrieved successfully",
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@products_router.get("/all", response_model=ApiResponse[list[ProductResponse]])
async def list_all_products(
    request: Request,
    handler: ListAllProductsHandler = Depends(get_list_all_products_handler),
) -> ApiResponse[list[ProductResponse]] | JSONResponse:
    result = await handler.handle(ListAllProducts())

    match result:
        case Success(value=products):
            return ApiResponse(
                code=status.HTTP_200_OK,
                data=[ProductResponse.model_validate(p) for p in products],
                message="Products retrieved successfully",
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@products_router.get("/{product_id}", response_model=ApiResponse[ProductResponse])
async def get_product(
    request: Request,
    product_id: UUID,
    handler: GetProductHandler = Depends(get_get_product_handler),
) -> ApiResponse[ProductResponse] | JSONResponse:
    result = await handler.handle(GetProduct(product_id=product_id))

    match result:
        case Success(value=product):
            return ApiResponse(
                code=status.HTTP_200_OK,
                data=ProductResponse.model_validate(product),
                message="Product retrieved successfully",
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@products_router.patch("/{product_id}", response_model=ApiResponse[ProductResponse])
async def update_product(
    request: Request,
    product_id: UUID,
    data: UpdateProductRequest,
    _: CurrentUser = Depends(require_right("manageProducts")),
    handler: UpdateProductHandler = Depends(get_update_product_handler),
) -> ApiResponse[ProductResponse] | JSONResponse:
    """Update product fields from a JSON body."""
    result = await handler.handle(
        UpdateProduct(
            product_id=product_id,
            product_name=data.product_name,
            description_product=data.description_product,
            price=data.price,
            brand_id=data.brand_id,
            thumbnail=data.thumbnail,
            product_image_detail=data.product_image_detail,
            size=data.size,
            type=data.type,
            quantity=data.quantity,
            status=data.status,
        )
    )

    match result:
        case Success(value=product):
            return ApiResponse(
                code=status.HTTP_200_OK,
                data=ProductResponse.model_validate(product),
                message="Product updated successfully",
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@products_router.delete(
    "/{product_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
async def delete_product(
    request: Request,
    product_id: UUID,
    _: CurrentUser = Depends(require_right("manageProducts")),
    handler: DeleteProductHandler = Depends(get_delete_product_handler),
) -> Response:
    result = await handler.handle(DeleteProduct(product_id=product_id))

    match result:
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)
