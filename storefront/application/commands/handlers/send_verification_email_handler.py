"""Send-verification-email handler.

Issues a verify-email token for the signed-in user and emails the link
``{frontend_url}/verify-email?token=...``.
"""

from urllib.parse import urlencode

from storefront.application.commands.auth_commands import SendVerificationEmail
from storefront.application.errors import ApplicationError, ApplicationErrorCode
from storefront.application.services import AuthTokenService
from storefront.core.result import Failure, Result, Success
from storefront.domain.protocols import EmailProtocol, LoggerProtocol, UserRepository


class SendVerificationEmailError:
    """Error messages."""

    USER_NOT_FOUND = "User not found"


class SendVerificationEmailHandler:
    """Handler for SendVerificationEmail command."""

    def __init__(
        self,
        user_repo: UserRepository,
        token_service: AuthTokenService,
        email_service: EmailProtocol,
        frontend_url: str,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._token_service = token_service
        self._email_service = email_service
        self._frontend_url = frontend_url.rstrip("/")
        self._logger = logger

    async def handle(
        self, cmd: SendVerificationEmail
    ) -> Result[None, ApplicationError]:
        """Handle SendVerificationEmail command.

        Returns:
            Success(None) once the email is handed to the sender.
            Failure(ApplicationError) with NOT_FOUND if the account behind a
            still-valid access token was deleted.
        """
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message=SendVerificationEmailError.USER_NOT_FOUND,
                )
            )

        token = await self._token_service.generate_verify_email_token(user)
        query = urlencode({"token": token})
        verification_url = f"{self._frontend_url}/verify-email?{query}"
        await self._email_service.send_verification_email(
            user.email, user.name, verification_url
        )
        self._logger.info("verification_email_sent", user_id=str(user.id))
        return Success(value=None)
