"""Unit tests for domain values, validators and annotated types.

Tests cover:
- QueryOptions parsing and offsets
- Page totals
- TokenRecord usability
- Email / password / OTP / phone validators through pydantic models
"""

from datetime import UTC, datetime, timedelta

import pytest
from pydantic import BaseModel, ValidationError
from uuid_extensions import uuid7

from storefront.domain.entities import Page, QueryOptions, TokenRecord
from storefront.domain.enums import TokenType, UserRole
from storefront.domain.types import Email, OtpCode, Password, PhoneNumber
from storefront.domain.validators import validate_email, validate_password


class Credentials(BaseModel):
    email: Email
    password: Password


class OtpBody(BaseModel):
    code: OtpCode


class PhoneBody(BaseModel):
    phone_number: PhoneNumber


@pytest.mark.unit
class TestQueryOptions:
    """Test sort parsing and paging."""

    def test_sort_fields_parse_direction(self):
        options = QueryOptions(sort_by="price:desc, product_name:asc,name")

        assert options.sort_fields() == [
            ("price", True),
            ("product_name", False),
            ("name", False),
        ]

    def test_empty_sort_by(self):
        assert QueryOptions().sort_fields() == []

    def test_offset_is_zero_based(self):
        assert QueryOptions(limit=10, page=1).offset == 0
        assert QueryOptions(limit=10, page=3).offset == 20


@pytest.mark.unit
class TestPage:
    """Test page totals."""

    @pytest.mark.parametrize(
        ("total_results", "limit", "expected"),
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2)],
    )
    def test_total_pages_rounds_up(self, total_results, limit, expected):
        page = Page(results=[], page=1, limit=limit, total_results=total_results)

        assert page.total_pages == expected


@pytest.mark.unit
class TestTokenRecord:
    """Test stored token state."""

    def test_blacklisted_record_is_not_usable(self):
        record = TokenRecord(
            id=uuid7(),
            token="t",
            user_id=uuid7(),
            type=TokenType.REFRESH,
            expires_at=datetime.now(UTC) + timedelta(days=1),
            blacklisted=True,
        )

        assert record.is_expired() is False
        assert record.is_usable() is False

    def test_naive_expiry_is_treated_as_utc(self):
        now = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)
        record = TokenRecord(
            id=uuid7(),
            token="t",
            user_id=uuid7(),
            type=TokenType.RESET_PASSWORD,
            expires_at=datetime(2026, 10, 19, 11, 59),
        )

        assert record.is_expired(now) is True


@pytest.mark.unit
class TestValidators:
    """Test field validation."""

    def test_email_is_normalized(self):
        assert validate_email("  Jane@Example.COM ") == "jane@example.com"

    @pytest.mark.parametrize("email", ["plainaddress", "a@b", "jane@example"])
    def test_invalid_email_rejected(self, email):
        with pytest.raises(ValidationError):
            Credentials(email=email, password="password1")

    @pytest.mark.parametrize(
        ("password", "message"),
        [
            ("short1", "password must be at least 8 characters"),
            ("password", "password must contain at least 1 letter and 1 number"),
            ("12345678", "password must contain at least 1 letter and 1 number"),
        ],
    )
    def test_weak_passwords_rejected(self, password, message):
        with pytest.raises(ValueError, match=message):
            validate_password(password)

    def test_credentials_model_accepts_valid_input(self):
        body = Credentials(email="Jane@Example.com", password="password1")

        assert body.email == "jane@example.com"

    @pytest.mark.parametrize("code", ["12345", "1234567", "12a456", ""])
    def test_otp_code_must_be_six_digits(self, code):
        with pytest.raises(ValidationError):
            OtpBody(code=code)

    def test_phone_number_digits_only(self):
        assert PhoneBody(phone_number="5551234567").phone_number == "5551234567"
        with pytest.raises(ValidationError):
            PhoneBody(phone_number="555-123")


def test_user_role_values():
    """Test the role names used in tokens and the policy file."""
    assert UserRole.values() == ["user", "admin"]
