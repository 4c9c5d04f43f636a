"""Registration handler.

Flow:
1. Check email uniqueness
2. Hash password
3. Create User entity (role user, email unverified)
4. Save user
5. Issue access + refresh tokens
6. Return Success(AuthenticatedUser)

On failure:
- Duplicate email -> Failure(BAD_REQUEST, "Email already taken"), whether
  caught by the check or by the unique index on save

Architecture:
- Application layer ONLY imports from domain and application packages
- Repositories and services are injected via protocols
"""

from uuid_extensions import uuid7

from storefront.application.commands.auth_commands import RegisterUser
from storefront.application.dtos import AuthenticatedUser
from storefront.application.errors import ApplicationError, ApplicationErrorCode
from storefront.application.services import AuthTokenService
from storefront.core.errors import DomainError
from storefront.core.result import Failure, Result, Success
from storefront.domain.entities import User
from storefront.domain.enums import UserRole
from storefront.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)


class RegistrationError:
    """Registration-specific error messages."""

    EMAIL_ALREADY_TAKEN = "Email already taken"


class RegisterUserHandler:
    """Handler for RegisterUser command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_service: AuthTokenService,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize registration handler with dependencies.

        Args:
            user_repo: User repository for persistence.
            password_service: Password hashing service.
            token_service: Issues the initial token pair.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._token_service = token_service
        self._logger = logger

    async def handle(
        self, cmd: RegisterUser
    ) -> Result[AuthenticatedUser, ApplicationError]:
        """Handle RegisterUser command.

        Returns:
            Success(AuthenticatedUser) with the new user and its tokens.
            Failure(ApplicationError) with BAD_REQUEST on duplicate email.
        """
        if await self._user_repo.exists_by_email(cmd.email):
            self._logger.warning("registration_rejected", reason="email_taken")
            return self._email_taken()

        user = User(
            id=uuid7(),
            email=cmd.email,
            password_hash=self._password_service.hash_password(cmd.password),
            name=cmd.name,
            role=UserRole.USER,
        )
        saved = await self._user_repo.save(user)
        if isinstance(saved, Failure):
            self._logger.warning("registration_rejected", reason="email_taken_on_save")
            return self._email_taken(saved.error)

        tokens = await self._token_service.generate_auth_tokens(user)
        self._logger.info("user_registered", user_id=str(user.id))
        return Success(value=AuthenticatedUser(user=user, tokens=tokens))

    @staticmethod
    def _email_taken(
        domain_error: DomainError | None = None,
    ) -> Failure[ApplicationError]:
        return Failure(
            error=ApplicationError(
                code=ApplicationErrorCode.BAD_REQUEST,
                message=RegistrationError.EMAIL_ALREADY_TAKEN,
                domain_error=domain_error,
            )
        )
