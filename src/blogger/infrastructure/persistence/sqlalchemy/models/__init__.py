"""SQLAlchemy declarative base and mixins."""

from blogger.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

__all__ = [
    "Base",
    "TimestampMixin",
]
