"""initial_schema

Revision ID: 3f1c2a7d9b10
Revises:
Create Date: 2026-10-19 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a7d9b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create users, tokens, brands and products tables."""
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=False,
            comment="User email address (unique, lowercase)",
        ),
        sa.Column(
            "password_hash",
            sa.String(length=255),
            nullable=False,
            comment="Bcrypt hashed password",
        ),
        sa.Column("name", sa.String(length=100), nullable=False, comment="Display name"),
        sa.Column(
            "role",
            sa.String(length=20),
            nullable=False,
            comment="Authorization role (user, admin)",
        ),
        sa.Column(
            "is_email_verified",
            sa.Boolean(),
            nullable=False,
            comment="True once a verify-email token was consumed",
        ),
        sa.Column("avatar", sa.String(length=500), nullable=True, comment="Avatar image URL"),
        sa.Column(
            "phone_number",
            sa.String(length=20),
            nullable=True,
            comment="Phone number, digits only",
        ),
        sa.Column("address", sa.String(length=500), nullable=True, comment="Postal address"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_role", "users", ["role"], unique=False)

    op.create_table(
        "tokens",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("token", sa.Text(), nullable=False, comment="Signed token value"),
        sa.Column("user_id", sa.Uuid(), nullable=False, comment="Owner of the token"),
        sa.Column(
            "type",
            sa.String(length=20),
            nullable=False,
            comment="refresh, resetPassword or verifyEmail",
        ),
        sa.Column(
            "expires_at",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="Expiry timestamp (UTC)",
        ),
        sa.Column(
            "blacklisted",
            sa.Boolean(),
            nullable=False,
            comment="Revoked before expiry",
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_tokens_token_type", "tokens", ["token", "type"], unique=False)
    op.create_index("ix_tokens_user_id_type", "tokens", ["user_id", "type"], unique=False)

    op.create_table(
        "brands",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.Column(
            "brand_name",
            sa.String(length=255),
            nullable=False,
            comment="Brand name (unique)",
        ),
        sa.Column("brand_image", sa.String(length=500), nullable=True, comment="Logo URL"),
        sa.Column("description", sa.Text(), nullable=True, comment="Free-text description"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("brand_name"),
    )

    op.create_table(
        "products",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.Column(
            "product_name",
            sa.String(length=255),
            nullable=False,
            comment="Display name",
        ),
        sa.Column(
            "description_product",
            sa.Text(),
            nullable=False,
            comment="Long description",
        ),
        sa.Column("price", sa.Numeric(precision=12, scale=2), nullable=False, comment="Unit price"),
        sa.Column("brand_id", sa.Uuid(), nullable=False, comment="Owning brand"),
        sa.Column("thumbnail", sa.String(length=500), nullable=True, comment="Main image URL"),
        sa.Column(
            "product_image_detail",
            sa.JSON(),
            nullable=False,
            comment="Detail image URLs",
        ),
        sa.Column("size", sa.String(length=50), nullable=True),
        sa.Column("type", sa.String(length=50), nullable=True),
        sa.Column("quantity", sa.Integer(), nullable=False, comment="Units in stock"),
        sa.Column("status", sa.String(length=50), nullable=True, comment="Listing status label"),
        sa.ForeignKeyConstraint(["brand_id"], ["brands.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_products_brand_id", "products", ["brand_id"], unique=False)
    op.create_index("ix_products_product_name", "products", ["product_name"], unique=False)


def downgrade() -> None:
    """Drop all tables."""
    op.drop_index("ix_products_product_name", table_name="products")
    op.drop_index("ix_products_brand_id", table_name="products")
    op.drop_table("products")
    op.drop_table("brands")
    op.drop_index("ix_tokens_user_id_type", table_name="tokens")
    op.drop_index("ix_tokens_token_type", table_name="tokens")
    op.drop_table("tokens")
    op.drop_index("ix_users_role", table_name="users")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
