"""Users resource handlers.

Handlers:
    create_user - POST   /users            (manageUsers)
    list_users  - GET    /users            (getUsers)
    get_user    - GET    /users/{user_id}  (self or getUsers)
    update_user - PATCH  /users/{user_id}  (self or manageUsers)
    delete_user - DELETE /users/{user_id}  (manageUsers)
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from storefront.application.commands.handlers import (
    CreateUserHandler,
    DeleteUserHandler,
    UpdateUserHandler,
)
from storefront.application.commands.user_commands import (
    CreateUser,
    DeleteUser,
    UpdateUser,
)
from storefront.application.queries.handlers import GetUserHandler, ListUsersHandler
from storefront.application.queries.user_queries import GetUser, ListUsers
from storefront.core.container import (
    get_authorization,
    get_create_user_handler,
    get_delete_user_handler,
    get_get_user_handler,
    get_list_users_handler,
    get_update_user_handler,
)
from storefront.core.result import Failure, Success
from storefront.domain.entities import QueryOptions
from storefront.domain.enums import UserRole
from storefront.domain.protocols import UserFilter
from storefront.infrastructure.authorization import CasbinAdapter
from storefront.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)
from storefront.presentation.routers.api.middleware.authorization_dependencies import (
    forbidden,
    require_right,
)
from storefront.presentation.routers.api.v1.errors import ErrorResponseBuilder
from storefront.schemas import (
    ApiResponse,
    CreateUserRequest,
    PageResponse,
    UpdateUserRequest,
    UserResponse,
)

users_router = APIRouter(prefix="/users", tags=["Users"])


@users_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[UserResponse],
)
async def create_user(
    request: Request,
    data: CreateUserRequest,
    _: CurrentUser = Depends(require_right("manageUsers")),
    handler: CreateUserHandler = Depends(get_create_user_handler),
) -> ApiResponse[UserResponse] | JSONResponse:
    """Create a user with any role.

    POST /v1/users -> 201 Created, 400 if the email is taken.
    """
    result = await handler.handle(
        CreateUser(
            email=data.email, password=data.password, name=data.name, role=data.role
        )
    )

    match result:
        case Success(value=user):
            return ApiResponse(
                code=status.HTTP_201_CREATED,
                data=UserResponse.model_validate(user),
                message="User created successfully",
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@users_router.get("", response_model=ApiResponse[PageResponse[UserResponse]])
async def list_users(
    request: Request,
    name: str | None = Query(None, description="Exact name match"),
    role: UserRole | None = Query(None, description="Role filter"),
    sort_by: str | None = Query(
        None, alias="sortBy", description="field:asc|desc, comma-separated"
    ),
    limit: int = Query(10, ge=1, le=100),
    page: int = Query(1, ge=1),
    _: CurrentUser = Depends(require_right("getUsers")),
    handler: ListUsersHandler = Depends(get_list_users_handler),
) -> ApiResponse[PageResponse[UserResponse]] | JSONResponse:
    """List users with filters, sorting and pagination."""
    result = await handler.handle(
        ListUsers(
            filters=UserFilter(name=name, role=role),
            options=QueryOptions(sort_by=sort_by, limit=limit, page=page),
        )
    )

    match result:
        case Success(value=users_page):
            return ApiResponse(
                code=status.HTTP_200_OK,
                data=PageResponse[UserResponse].from_page(users_page, UserResponse),
                message="Users retrieved successfully",
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@users_router.get("/{user_id}", response_model=ApiResponse[UserResponse])
async def get_user(
    request: Request,
    user_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    authorization: CasbinAdapter = Depends(get_authorization),
    handler: GetUserHandler = Depends(get_get_user_handler),
) -> ApiResponse[UserResponse] | JSONResponse:
    """Get a user. Users may read their own record without ``getUsers``."""
    if current_user.user_id != user_id and not authorization.has_right(
        current_user.roles, "getUsers"
    ):
        raise forbidden()

    result = await handler.handle(GetUser(user_id=user_id))

    match result:
        case Success(value=user):
            return ApiResponse(
                code=status.HTTP_200_OK,
                data=UserResponse.model_validate(user),
                message="User retrieved successfully",
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@users_router.patch("/{user_id}", response_model=ApiResponse[UserResponse])
async def update_user(
    request: Request,
    user_id: UUID,
    data: UpdateUserRequest,
    current_user: CurrentUser = Depends(get_current_user),
    authorization: CasbinAdapter = Depends(get_authorization),
    handler: UpdateUserHandler = Depends(get_update_user_handler),
) -> ApiResponse[UserResponse] | JSONResponse:
    """Update a user.

    Users may update their own profile. Changing a role, or anyone else's
    record, needs ``manageUsers``.
    """
    can_manage = authorization.has_right(current_user.roles, "manageUsers")
    if not can_manage and (current_user.user_id != user_id or data.role is not None):
        raise forbidden()

    result = await handler.handle(
        UpdateUser(
            user_id=user_id,
            email=data.email,
            password=data.password,
            name=data.name,
            role=data.role,
            avatar=data.avatar,
            phone_number=data.phone_number,
            address=data.address,
        )
    )

    match result:
        case Success(value=user):
            return ApiResponse(
                code=status.HTTP_200_OK,
                data=UserResponse.model_validate(user),
                message="User updated successfully",
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@users_router.delete(
    "/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
async def delete_user(
    request: Request,
    user_id: UUID,
    _: CurrentUser = Depends(require_right("manageUsers")),
    handler: DeleteUserHandler = Depends(get_delete_user_handler),
) -> Response:
    """Delete a user and, by cascade, its stored tokens."""
    result = await handler.handle(DeleteUser(user_id=user_id))

    match result:
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)
