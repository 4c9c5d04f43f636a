"""Persistence layer (SQLAlchemy async)."""

from storefront.infrastructure.persistence.base import (
    BaseModel,
    BaseMutableModel,
    TimestampMixin,
)
from storefront.infrastructure.persistence.database import Database

__all__ = ["BaseModel", "BaseMutableModel", "Database", "TimestampMixin"]
