"""Annotated types with centralized validation.

Usage:
    from storefront.domain.types import Email, Password

    class RegisterRequest(BaseModel):
        email: Email
        password: Password
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from storefront.domain.validators import (
    validate_email,
    validate_otp_code,
    validate_password,
    validate_phone_number,
)

Email = Annotated[
    str,
    Field(
        min_length=5,
        max_length=255,
        description="Email address",
        examples=["jane@example.com"],
    ),
    AfterValidator(validate_email),
]
"""Email address, normalized to lowercase.

Examples:
    >>> class Body(BaseModel):
    ...     email: Email
    >>> Body(email="Jane@Example.COM").email
    'jane@example.com'
"""

Password = Annotated[
    str,
    Field(
        max_length=128,
        description="Password (8+ characters, at least one letter and one digit)",
        examples=["password1"],
    ),
    AfterValidator(validate_password),
]
"""Password with strength validation."""

OtpCode = Annotated[
    str,
    Field(description="Six digit one-time code", examples=["482913"]),
    AfterValidator(validate_otp_code),
]

PhoneNumber = Annotated[
    str,
    Field(max_length=20, description="Phone number, digits only", examples=["5551234567"]),
    AfterValidator(validate_phone_number),
]

DisplayName = Annotated[
    str,
    Field(min_length=1, max_length=100, description="Display name", examples=["Jane Doe"]),
]
