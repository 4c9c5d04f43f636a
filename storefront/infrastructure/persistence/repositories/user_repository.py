"""UserRepository - SQLAlchemy implementation of the UserRepository port.

Maps between domain ``User`` entities and the ``users`` table.
"""

from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.enums import ErrorCode
from storefront.core.errors import ConflictError
from storefront.core.result import Failure, Result, Success
from storefront.domain.entities import Page, QueryOptions, User
from storefront.domain.enums import UserRole
from storefront.domain.protocols import UserFilter
from storefront.infrastructure.persistence.models.user import User as UserModel
from storefront.infrastructure.persistence.repositories.pagination import (
    apply_sort,
    paginate,
)

SORTABLE_COLUMNS = {
    "name": UserModel.name,
    "email": UserModel.email,
    "role": UserModel.role,
    "createdAt": UserModel.created_at,
    "created_at": UserModel.created_at,
}


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    Does NOT inherit from the protocol (structural typing).

    Example:
        >>> async with database.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_email("jane@example.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()
        return self._to_domain(user_model) if user_model else None

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email, comparing lowercased values."""
        stmt = select(UserModel).where(func.lower(UserModel.email) == email.lower())
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()
        return self._to_domain(user_model) if user_model else None

    async def exists_by_email(
        self, email: str, *, exclude_user_id: UUID | None = None
    ) -> bool:
        stmt = select(UserModel.id).where(func.lower(UserModel.email) == email.lower())
        if exclude_user_id is not None:
            stmt = stmt.where(UserModel.id != exclude_user_id)
        result = await self.session.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None

    async def save(self, user: User) -> Result[None, ConflictError]:
        """Insert ``user``.

        Returns:
            Success(None), or Failure(ConflictError) when the unique email
            index rejects the row (a concurrent registration won).
        """
        self.session.add(self._to_model(user))
        return await self._commit_or_conflict()

    async def update(self, user: User) -> Result[None, ConflictError]:
        """Copy mutable fields of ``user`` onto its row.

        Returns:
            Success(None), or Failure(ConflictError) when the new email is
            already stored on another row.

        Raises:
            ValueError: If the user row does not exist.
        """
        user_model = await self.session.get(UserModel, user.id)
        if user_model is None:
            raise ValueError(f"User {user.id} not found")

        user_model.email = user.email
        user_model.password_hash = user.password_hash
        user_model.name = user.name
        user_model.role = user.role.value
        user_model.is_email_verified = user.is_email_verified
        user_model.avatar = user.avatar
        user_model.phone_number = user.phone_number
        user_model.address = user.address
        return await self._commit_or_conflict()

    async def delete(self, user_id: UUID) -> bool:
        result = await self.session.execute(
            delete(UserModel).where(UserModel.id == user_id)
        )
        await self.session.commit()
        return result.rowcount > 0

    async def query(self, filters: UserFilter, options: QueryOptions) -> Page[User]:
        """List users with exact ``name`` / ``role`` filters."""
        stmt = select(UserModel)
        if filters.name is not None:
            stmt = stmt.where(UserModel.name == filters.name)
        if filters.role is not None:
            stmt = stmt.where(UserModel.role == filters.role.value)
        stmt = apply_sort(stmt, options, SORTABLE_COLUMNS, UserModel.created_at.desc())
        return await paginate(self.session, stmt, options, self._to_domain)

    async def _commit_or_conflict(self) -> Result[None, ConflictError]:
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            return Failure(
                error=ConflictError(
                    code=ErrorCode.EMAIL_ALREADY_EXISTS,
                    message="Email already taken",
                    resource_type="User",
                    conflicting_field="email",
                )
            )
        return Success(value=None)

    def _to_domain(self, user_model: UserModel) -> User:
        return User(
            id=user_model.id,
            email=user_model.email,
            password_hash=user_model.password_hash,
            name=user_model.name,
            role=UserRole(user_model.role),
            is_email_verified=user_model.is_email_verified,
            avatar=user_model.avatar,
            phone_number=user_model.phone_number,
            address=user_model.address,
            created_at=user_model.created_at,
            updated_at=user_model.updated_at,
        )

    def _to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            email=user.email,
            password_hash=user.password_hash,
            name=user.name,
            role=user.role.value,
            is_email_verified=user.is_email_verified,
            avatar=user.avatar,
            phone_number=user.phone_number,
            address=user.address,
        )
