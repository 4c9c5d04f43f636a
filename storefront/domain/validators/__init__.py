"""Domain validators."""

from storefront.domain.validators.functions import (
    validate_email,
    validate_otp_code,
    validate_password,
    validate_phone_number,
)

__all__ = [
    "validate_email",
    "validate_otp_code",
    "validate_password",
    "validate_phone_number",
]
