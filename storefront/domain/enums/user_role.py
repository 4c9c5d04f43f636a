"""User roles used for authorization.

Roles are matched against the casbin policy, which grants rights such as
``manageProducts`` to ``admin``.

Usage:
    from storefront.domain.enums import UserRole

    if user.role == UserRole.ADMIN:
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """Role assigned to every user account.

    String enum so values serialize directly into JWT claims and the casbin
    policy file.
    """

    USER = "user"
    """Customer account. Can read and update its own profile."""

    ADMIN = "admin"
    """Back-office account. Manages users, brands and products."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: ['user', 'admin'].
        """
        return [role.value for role in cls]
