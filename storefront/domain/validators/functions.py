"""Validation functions shared by the annotated types.

Validators are pure functions that raise ``ValueError``. Pydantic turns the
error into a request validation failure at the HTTP boundary.
"""

import re

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
OTP_PATTERN = re.compile(r"^\d{6}$")


def validate_email(v: str) -> str:
    """Validate email format and normalize it.

    Args:
        v: Email address to validate.

    Returns:
        Email stripped and lowercased.

    Raises:
        ValueError: If the address does not look like ``user@domain.tld``.

    Example:
        >>> validate_email(" Jane@Example.COM ")
        'jane@example.com'
    """
    candidate = v.strip()
    if not EMAIL_PATTERN.match(candidate):
        raise ValueError("Invalid email")
    return candidate.lower()


def validate_password(v: str) -> str:
    """Validate password strength.

    Requirements:
        - At least 8 characters
        - At least one letter
        - At least one digit

    Raises:
        ValueError: If a requirement is not met.

    Example:
        >>> validate_password("password1")
        'password1'
        >>> validate_password("password")
        ValueError: password must contain at least 1 letter and 1 number
    """
    if len(v) < 8:
        raise ValueError("password must be at least 8 characters")
    if not re.search(r"\d", v) or not re.search(r"[a-zA-Z]", v):
        raise ValueError("password must contain at least 1 letter and 1 number")
    return v


def validate_otp_code(v: str) -> str:
    """Validate a six digit one-time code."""
    if not OTP_PATTERN.match(v):
        raise ValueError("code must be a 6 digit number")
    return v


def validate_phone_number(v: str) -> str:
    """Validate that a phone number holds digits only."""
    if not v.isdigit():
        raise ValueError("phone number must contain digits only")
    return v
