"""Stub email service for development and tests.

Implements EmailProtocol by logging the message instead of delivering it.
Never logs the OTP code or token outside development.
"""

from storefront.domain.protocols import LoggerProtocol
from storefront.infrastructure.email import templates


class StubEmailService:
    """Email sender that writes structured log events.

    Args:
        logger: Structured logger.
        reveal_secrets: Include links and codes in log events. Enabled in
            development so flows can be exercised without a mail server.
        otp_ttl_seconds: Code lifetime quoted in the OTP body.
    """

    def __init__(
        self,
        *,
        logger: LoggerProtocol,
        reveal_secrets: bool = False,
        otp_ttl_seconds: int = 60,
    ) -> None:
        self._logger = logger
        self._reveal_secrets = reveal_secrets
        self._otp_ttl_seconds = otp_ttl_seconds

    async def send_reset_password_email(self, to_email: str, reset_url: str) -> None:
        self._log(
            to_email,
            templates.RESET_PASSWORD_SUBJECT,
            templates.reset_password_body(reset_url),
        )

    async def send_verification_email(
        self, to_email: str, name: str, verification_url: str
    ) -> None:
        self._log(
            to_email,
            templates.VERIFY_EMAIL_SUBJECT,
            templates.verification_body(name, verification_url),
        )

    async def send_otp_email(self, to_email: str, code: str) -> None:
        self._log(
            to_email,
            templates.OTP_SUBJECT,
            templates.otp_body(code, self._otp_ttl_seconds),
        )

    def _log(self, to_email: str, subject: str, body: str) -> None:
        context: dict[str, str] = {"to": to_email, "subject": subject}
        if self._reveal_secrets:
            context["body"] = body
        self._logger.info("email_stub_sent", **context)
