"""Token database model.

Holds refresh, reset-password and verify-email tokens. Access tokens are
stateless and never stored. Deleting a row revokes the token.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from storefront.infrastructure.persistence.base import BaseModel


class Token(BaseModel):
    """Issued token row (immutable apart from deletion).

    Indexes:
        - ix_tokens_token_type: (token, type) for verification lookups
        - ix_tokens_user_id_type: (user_id, type) for bulk revocation
    """

    __tablename__ = "tokens"

    token: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Signed token value",
    )
    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        comment="Owner of the token",
    )
    type: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="refresh, resetPassword or verifyEmail",
    )
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Expiry timestamp (UTC)",
    )
    blacklisted: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="Revoked before expiry",
    )

    __table_args__ = (
        Index("ix_tokens_token_type", "token", "type"),
        Index("ix_tokens_user_id_type", "user_id", "type"),
    )
