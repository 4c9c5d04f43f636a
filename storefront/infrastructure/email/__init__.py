"""Email adapters.

- StubEmailService: structured log output (development, tests)
- SESEmailService: AWS SES delivery (production)
"""

from storefront.infrastructure.email.ses_email_service import SESEmailService
from storefront.infrastructure.email.stub_email_service import StubEmailService

__all__ = ["SESEmailService", "StubEmailService"]
