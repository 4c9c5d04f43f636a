"""User administration command handlers.

- CreateUserHandler: admin creates an account (any role)
- UpdateUserHandler: partial profile update, email uniqueness re-checked
- DeleteUserHandler: remove an account and, by cascade, its tokens
"""

from dataclasses import replace

from uuid_extensions import uuid7

from storefront.application.commands.user_commands import (
    CreateUser,
    DeleteUser,
    UpdateUser,
)
from storefront.application.errors import ApplicationError, ApplicationErrorCode
from storefront.core.errors import DomainError
from storefront.core.result import Failure, Result, Success
from storefront.domain.entities import User
from storefront.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)


class UserError:
    """User administration error messages."""

    EMAIL_ALREADY_TAKEN = "Email already taken"
    USER_NOT_FOUND = "User not found"


def _email_taken(domain_error: DomainError | None = None) -> Failure[ApplicationError]:
    return Failure(
        error=ApplicationError(
            code=ApplicationErrorCode.BAD_REQUEST,
            message=UserError.EMAIL_ALREADY_TAKEN,
            domain_error=domain_error,
        )
    )


def _user_not_found() -> Failure[ApplicationError]:
    return Failure(
        error=ApplicationError(
            code=ApplicationErrorCode.NOT_FOUND,
            message=UserError.USER_NOT_FOUND,
        )
    )


class CreateUserHandler:
    """Handler for CreateUser command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._logger = logger

    async def handle(self, cmd: CreateUser) -> Result[User, ApplicationError]:
        if await self._user_repo.exists_by_email(cmd.email):
            return _email_taken()

        user = User(
            id=uuid7(),
            email=cmd.email,
            password_hash=self._password_service.hash_password(cmd.password),
            name=cmd.name,
            role=cmd.role,
        )
        saved = await self._user_repo.save(user)
        if isinstance(saved, Failure):
            return _email_taken(saved.error)
        self._logger.info("user_created", user_id=str(user.id), role=user.role.value)
        return Success(value=user)


class UpdateUserHandler:
    """Handler for UpdateUser command.

    Fields left as ``None`` on the command keep their stored value. A new
    password is hashed before storage.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._logger = logger

    async def handle(self, cmd: UpdateUser) -> Result[User, ApplicationError]:
        """Handle UpdateUser command.

        Returns:
            Success(User) with the updated user.
            Failure(ApplicationError) with NOT_FOUND or BAD_REQUEST.
        """
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return _user_not_found()

        if cmd.email is not None and await self._user_repo.exists_by_email(
            cmd.email, exclude_user_id=user.id
        ):
            return _email_taken()

        changes: dict[str, object] = {
            name: value
            for name, value in (
                ("email", cmd.email),
                ("name", cmd.name),
                ("role", cmd.role),
                ("avatar", cmd.avatar),
                ("phone_number", cmd.phone_number),
                ("address", cmd.address),
            )
            if value is not None
        }
        if cmd.password is not None:
            changes["password_hash"] = self._password_service.hash_password(cmd.password)

        updated = replace(user, **changes)
        stored = await self._user_repo.update(updated)
        if isinstance(stored, Failure):
            return _email_taken(stored.error)
        self._logger.info(
            "user_updated", user_id=str(user.id), fields=sorted(changes)
        )
        return Success(value=updated)


class DeleteUserHandler:
    """Handler for DeleteUser command."""

    def __init__(self, user_repo: UserRepository, logger: LoggerProtocol) -> None:
        self._user_repo = user_repo
        self._logger = logger

    async def handle(self, cmd: DeleteUser) -> Result[None, ApplicationError]:
        if not await self._user_repo.delete(cmd.user_id):
            return _user_not_found()
        self._logger.info("user_deleted", user_id=str(cmd.user_id))
        return Success(value=None)
