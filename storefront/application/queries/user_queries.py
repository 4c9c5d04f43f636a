"""User queries (CQRS read operations)."""

from dataclasses import dataclass, field
from uuid import UUID

from storefront.domain.entities import QueryOptions
from storefront.domain.protocols import UserFilter


@dataclass(frozen=True, kw_only=True)
class GetUser:
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListUsers:
    """Filtered, paginated user listing.

    Example:
        >>> query = ListUsers(
        ...     filters=UserFilter(role=UserRole.ADMIN),
        ...     options=QueryOptions(sort_by="name:asc", limit=20),
        ... )
    """

    filters: UserFilter = field(default_factory=UserFilter)
    options: QueryOptions = field(default_factory=QueryOptions)
