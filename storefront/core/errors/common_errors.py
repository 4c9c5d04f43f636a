"""Generic error values reused across domains.

Usage:
    return Failure(error=NotFoundError(
        code=ErrorCode.USER_NOT_FOUND,
        message="No users found with this email",
        resource_type="User",
        resource_id=email,
    ))
"""

from dataclasses import dataclass

from storefront.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Requested resource does not exist.

    Attributes:
        resource_type: Kind of resource (User, Brand, Product, Token).
        resource_id: Identifier that was looked up.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Credential or token could not be verified."""



@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Unique value already taken.

    Attributes:
        resource_type: Kind of resource in conflict.
        conflicting_field: Field holding the duplicate value.
    """

    resource_type: str
    conflicting_field: str
