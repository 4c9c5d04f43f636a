"""Login handler.

Flow:
1. Find user by email
2. Verify password against the stored hash
3. Issue access + refresh tokens
4. Return Success(AuthenticatedUser)

Unknown email and wrong password produce the same failure so callers cannot
tell which accounts exist.
"""

from storefront.application.commands.auth_commands import LoginUser
from storefront.application.dtos import AuthenticatedUser
from storefront.application.errors import ApplicationError, ApplicationErrorCode
from storefront.application.services import AuthTokenService
from storefront.core.result import Failure, Result, Success
from storefront.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)


class LoginError:
    """Login-specific error messages."""

    INVALID_CREDENTIALS = "Incorrect email or password"


class LoginUserHandler:
    """Handler for LoginUser command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_service: AuthTokenService,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._token_service = token_service
        self._logger = logger

    async def handle(self, cmd: LoginUser) -> Result[AuthenticatedUser, ApplicationError]:
        """Handle LoginUser command.

        Returns:
            Success(AuthenticatedUser) on valid credentials.
            Failure(ApplicationError) with UNAUTHORIZED otherwise.
        """
        user = await self._user_repo.find_by_email(cmd.email)

        if user is None or not self._password_service.verify_password(
            cmd.password, user.password_hash
        ):
            self._logger.warning(
                "login_failed",
                reason="unknown_email" if user is None else "wrong_password",
            )
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.UNAUTHORIZED,
                    message=LoginError.INVALID_CREDENTIALS,
                )
            )

        tokens = await self._token_service.generate_auth_tokens(user)
        self._logger.info("login_succeeded", user_id=str(user.id))
        return Success(value=AuthenticatedUser(user=user, tokens=tokens))
