"""Subjects and plain-text bodies for transactional email."""

RESET_PASSWORD_SUBJECT = "Reset password"
VERIFY_EMAIL_SUBJECT = "Email Verification"
OTP_SUBJECT = "Your verification code"


def reset_password_body(reset_url: str) -> str:
    return (
        "Hi,\n"
        f"To reset your password, click on this link: {reset_url}\n"
        "If you did not request any password resets, please ignore this email."
    )


def verification_body(name: str, verification_url: str) -> str:
    return (
        f"Hi {name},\n"
        f"To verify your email, click on this link: {verification_url}\n"
        "If you did not create an account, then ignore this email."
    )


def otp_body(code: str, ttl_seconds: int) -> str:
    return (
        f"Your verification code is {code}.\n"
        f"It expires in {ttl_seconds} seconds."
    )
