"""EmailProtocol - port for transactional email.

Infrastructure provides ``StubEmailService`` (logs only) and
``SESEmailService`` (AWS SES). Senders raise on delivery failure; callers
decide whether that aborts the request.
"""

from typing import Protocol


class EmailProtocol(Protocol):
    """Email service protocol (port).

    Methods:
        send_reset_password_email: Password reset link
        send_verification_email: Email verification link
        send_otp_email: One-time confirmation code

    Example:
        >>> await email_service.send_otp_email(
        ...     to_email="jane@example.com",
        ...     code="482913",
        ... )
    """

    async def send_reset_password_email(self, to_email: str, reset_url: str) -> None:
        """Send a password reset link.

        Args:
            to_email: Recipient address.
            reset_url: Full URL carrying the reset token.
        """
        ...

    async def send_verification_email(
        self, to_email: str, name: str, verification_url: str
    ) -> None:
        """Send an email verification link.

        Args:
            to_email: Recipient address.
            name: Recipient display name used in the greeting.
            verification_url: Full URL carrying the verify-email token.
        """
        ...

    async def send_otp_email(self, to_email: str, code: str) -> None:
        """Send a six digit confirmation code."""
        ...
