"""UserRepository port for user persistence.

Infrastructure provides the SQLAlchemy implementation; handlers depend only on
this protocol.
"""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from storefront.core.errors import ConflictError
from storefront.core.result import Result
from storefront.domain.entities import Page, QueryOptions, User
from storefront.domain.enums import UserRole


@dataclass(frozen=True, slots=True, kw_only=True)
class UserFilter:
    """Filters for listing users. ``None`` fields are not applied."""

    name: str | None = None
    role: UserRole | None = None


class UserRepository(Protocol):
    """User repository protocol (port).

    Methods:
        find_by_id: Retrieve user by ID
        find_by_email: Retrieve user by email (case-insensitive)
        exists_by_email: Duplicate check before create / email change
        save: Insert a new user
        update: Persist changes to an existing user
        delete: Remove a user
        query: Filtered, sorted, paginated listing
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address, ignoring case.

        Example:
            >>> user = await repo.find_by_email("Jane@Example.com")
        """
        ...

    async def exists_by_email(
        self, email: str, *, exclude_user_id: UUID | None = None
    ) -> bool:
        """Check whether another account already uses ``email``.

        Args:
            email: Address to check (case-insensitive).
            exclude_user_id: User to ignore, for updates of that same user.
        """
        ...

    async def save(self, user: User) -> Result[None, ConflictError]:
        """Insert a new user.

        Returns:
            Failure(ConflictError) if the unique email index rejects the row.
        """
        ...

    async def update(self, user: User) -> Result[None, ConflictError]:
        """Persist changes to an existing user.

        Returns:
            Failure(ConflictError) if the email now clashes with another row.
        """
        ...

    async def delete(self, user_id: UUID) -> bool:
        """Delete a user.

        Returns:
            True if a row was removed, False if the user did not exist.
        """
        ...

    async def query(self, filters: UserFilter, options: QueryOptions) -> Page[User]:
        """List users matching ``filters``, sorted and paginated by ``options``."""
        ...
