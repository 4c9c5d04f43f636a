"""Reset-password handler.

Flow:
1. Verify the reset-password token
2. Resolve the owning user
3. Delete every reset-password token of that user, including unused siblings
   (nothing deleted means a concurrent reset already consumed the token)
4. Store the new password hash

Every failure is reported as the same UNAUTHORIZED error so the caller cannot
tell which check failed.
"""

from storefront.application.commands.auth_commands import ResetPassword
from storefront.application.errors import ApplicationError, ApplicationErrorCode
from storefront.application.services import AuthTokenService
from storefront.core.errors import DomainError
from storefront.core.result import Failure, Result, Success
from storefront.domain.enums import TokenType
from storefront.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    TokenRepository,
    UserRepository,
)


class ResetPasswordError:
    """Reset-specific error messages."""

    RESET_FAILED = "Password reset failed"


class ResetPasswordHandler:
    """Handler for ResetPassword command."""

    def __init__(
        self,
        user_repo: UserRepository,
        token_repo: TokenRepository,
        token_service: AuthTokenService,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._token_repo = token_repo
        self._token_service = token_service
        self._password_service = password_service
        self._logger = logger

    async def handle(self, cmd: ResetPassword) -> Result[None, ApplicationError]:
        """Handle ResetPassword command.

        Returns:
            Success(None) once the password is replaced.
            Failure(ApplicationError) with UNAUTHORIZED otherwise.
        """
        verified = await self._token_service.verify_token(
            cmd.token, TokenType.RESET_PASSWORD
        )
        if isinstance(verified, Failure):
            self._logger.warning(
                "password_reset_rejected", reason=verified.error.code.value
            )
            return self._failed(verified.error)

        user = await self._user_repo.find_by_id(verified.value.user_id)
        if user is None:
            self._logger.warning("password_reset_rejected", reason="user_missing")
            return self._failed()

        if not await self._token_repo.delete_by_user_and_type(
            user.id, TokenType.RESET_PASSWORD
        ):
            self._logger.warning("password_reset_rejected", reason="already_consumed")
            return self._failed()

        user.change_password_hash(self._password_service.hash_password(cmd.new_password))
        stored = await self._user_repo.update(user)
        if isinstance(stored, Failure):
            return self._failed(stored.error)

        self._logger.info("password_reset_completed", user_id=str(user.id))
        return Success(value=None)

    @staticmethod
    def _failed(domain_error: DomainError | None = None) -> Failure[ApplicationError]:
        return Failure(
            error=ApplicationError(
                code=ApplicationErrorCode.UNAUTHORIZED,
                message=ResetPasswordError.RESET_FAILED,
                domain_error=domain_error,
            )
        )
