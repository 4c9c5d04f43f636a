"""Declarative base and mixins for all database models.

- BaseModel: id (UUID) and created_at
- BaseMutableModel: adds updated_at, refreshed on every UPDATE

Domain entities never inherit from these; repositories map between the two.

Usage:
    class BrandModel(BaseMutableModel):
        __tablename__ = "brands"
        brand_name: Mapped[str]
"""

from datetime import datetime
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides:
        - id: UUID primary key (UUIDv7 when the entity does not supply one)
        - created_at: Insert timestamp set by the database
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"


class TimestampMixin:
    """Adds ``updated_at``, maintained by the database."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for models that are updated after creation.

    Provides id, created_at and updated_at with the mixin order fixed in one
    place.
    """

    __abstract__ = True
