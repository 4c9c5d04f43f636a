"""Verify-email handler.

Flow:
1. Verify the verify-email token
2. Resolve the owning user
3. Delete every verify-email token of that user
4. Set the email-verified flag

Every failure is reported as the same UNAUTHORIZED error.
"""

from storefront.application.commands.auth_commands import VerifyEmail
from storefront.application.errors import ApplicationError, ApplicationErrorCode
from storefront.application.services import AuthTokenService
from storefront.core.errors import DomainError
from storefront.core.result import Failure, Result, Success
from storefront.domain.entities import User
from storefront.domain.enums import TokenType
from storefront.domain.protocols import LoggerProtocol, TokenRepository, UserRepository


class VerifyEmailError:
    """Verification-specific error messages."""

    VERIFICATION_FAILED = "Email verification failed"


class VerifyEmailHandler:
    """Handler for VerifyEmail command."""

    def __init__(
        self,
        user_repo: UserRepository,
        token_repo: TokenRepository,
        token_service: AuthTokenService,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._token_repo = token_repo
        self._token_service = token_service
        self._logger = logger

    async def handle(self, cmd: VerifyEmail) -> Result[User, ApplicationError]:
        """Handle VerifyEmail command.

        Returns:
            Success(User) with ``is_email_verified`` set.
            Failure(ApplicationError) with UNAUTHORIZED otherwise.
        """
        verified = await self._token_service.verify_token(
            cmd.token, TokenType.VERIFY_EMAIL
        )
        if isinstance(verified, Failure):
            self._logger.warning(
                "email_verification_rejected", reason=verified.error.code.value
            )
            return self._failed(verified.error)

        user = await self._user_repo.find_by_id(verified.value.user_id)
        if user is None:
            self._logger.warning("email_verification_rejected", reason="user_missing")
            return self._failed()

        if not await self._token_repo.delete_by_user_and_type(
            user.id, TokenType.VERIFY_EMAIL
        ):
            self._logger.warning("email_verification_rejected", reason="already_consumed")
            return self._failed()

        user.mark_email_verified()
        stored = await self._user_repo.update(user)
        if isinstance(stored, Failure):
            return self._failed(stored.error)

        self._logger.info("email_verified", user_id=str(user.id))
        return Success(value=user)

    @staticmethod
    def _failed(domain_error: DomainError | None = None) -> Failure[ApplicationError]:
        return Failure(
            error=ApplicationError(
                code=ApplicationErrorCode.UNAUTHORIZED,
                message=VerifyEmailError.VERIFICATION_FAILED,
                domain_error=domain_error,
            )
        )
