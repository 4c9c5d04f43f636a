"""AWS SES email service.

Implements EmailProtocol with boto3. boto3 is synchronous, so each send runs
in a worker thread to keep the event loop free.
"""

import asyncio

import boto3

from storefront.domain.protocols import LoggerProtocol
from storefront.infrastructure.email import templates


class SESEmailService:
    """Deliver transactional email through AWS SES.

    Raises ``botocore.exceptions.ClientError`` (or ``BotoCoreError``) when
    delivery fails; the HTTP layer reports it as an internal error.

    Args:
        sender: Verified SES ``Source`` address.
        region: AWS region of the SES endpoint.
        logger: Structured logger.
        otp_ttl_seconds: Code lifetime quoted in the OTP body.
    """

    def __init__(
        self,
        *,
        sender: str,
        region: str,
        logger: LoggerProtocol,
        otp_ttl_seconds: int = 60,
    ) -> None:
        self._client = boto3.client("ses", region_name=region)
        self._sender = sender
        self._logger = logger
        self._otp_ttl_seconds = otp_ttl_seconds

    async def send_reset_password_email(self, to_email: str, reset_url: str) -> None:
        await self._send(
            to_email,
            templates.RESET_PASSWORD_SUBJECT,
            templates.reset_password_body(reset_url),
        )

    async def send_verification_email(
        self, to_email: str, name: str, verification_url: str
    ) -> None:
        await self._send(
            to_email,
            templates.VERIFY_EMAIL_SUBJECT,
            templates.verification_body(name, verification_url),
        )

    async def send_otp_email(self, to_email: str, code: str) -> None:
        await self._send(
            to_email,
            templates.OTP_SUBJECT,
            templates.otp_body(code, self._otp_ttl_seconds),
        )

    async def _send(self, to_email: str, subject: str, body: str) -> None:
        response = await asyncio.to_thread(
            self._client.send_email,
            Source=self._sender,
            Destination={"ToAddresses": [to_email]},
            Message={
                "Subject": {"Data": subject, "Charset": "UTF-8"},
                "Body": {"Text": {"Data": body, "Charset": "UTF-8"}},
            },
        )
        self._logger.info(
            "email_sent",
            to=to_email,
            subject=subject,
            message_id=response.get("MessageId"),
        )
