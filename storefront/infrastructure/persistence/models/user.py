"""User database model.

Security:
    - password_hash: bcrypt hash only, never plaintext
    - email: unique, stored lowercase
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from storefront.infrastructure.persistence.base import BaseMutableModel


class User(BaseMutableModel):
    """User account row.

    Indexes:
        - ix_users_email: unique, for login and duplicate checks
        - ix_users_role: for admin listings filtered by role

    Relationships:
        - tokens: one-to-many, removed with the user (ON DELETE CASCADE)
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="User email address (unique, lowercase)",
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )
    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Display name",
    )
    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="user",
        index=True,
        comment="Authorization role (user, admin)",
    )
    is_email_verified: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="True once a verify-email token was consumed",
    )
    avatar: Mapped[str | None] = mapped_column(
        String(500),
        nullable=True,
        comment="Avatar image URL",
    )
    phone_number: Mapped[str | None] = mapped_column(
        String(20),
        nullable=True,
        comment="Phone number, digits only",
    )
    address: Mapped[str | None] = mapped_column(
        String(500),
        nullable=True,
        comment="Postal address",
    )
