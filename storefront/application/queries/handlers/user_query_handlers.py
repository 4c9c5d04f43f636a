"""User query handlers.

Handlers return domain entities; the presentation layer maps them to
response schemas, which never include the password hash.

Architecture:
- Queries are side-effect free
- Returns Result[..., ApplicationError]
"""

from storefront.application.errors import ApplicationError, ApplicationErrorCode
from storefront.application.queries.user_queries import GetUser, ListUsers
from storefront.core.result import Failure, Result, Success
from storefront.domain.entities import Page, User
from storefront.domain.protocols import UserRepository


class GetUserError:
    """GetUser-specific errors."""

    USER_NOT_FOUND = "User not found"


class GetUserHandler:
    """Handler for GetUser query."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, query: GetUser) -> Result[User, ApplicationError]:
        user = await self._user_repo.find_by_id(query.user_id)
        if user is None:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message=GetUserError.USER_NOT_FOUND,
                )
            )
        return Success(value=user)


class ListUsersHandler:
    """Handler for ListUsers query."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, query: ListUsers) -> Result[Page[User], ApplicationError]:
        page = await self._user_repo.query(query.filters, query.options)
        return Success(value=page)
