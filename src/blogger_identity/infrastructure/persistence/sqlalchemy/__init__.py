"""SQLAlchemy implementation for blogger_identity persistence.

Provides:
- IdentityBase: Declarative base for identity models
- UserModel: SQLAlchemy model for users
- LinkedAccountModel: SQLAlchemy model for provider accounts
- UserRepositorySQLAlchemy: Repository implementation for users
"""

from blogger_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase
from blogger_identity.infrastructure.persistence.sqlalchemy.models import (
    LinkedAccountModel,
    UserModel,
)
from blogger_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "IdentityBase",
    "LinkedAccountModel",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
