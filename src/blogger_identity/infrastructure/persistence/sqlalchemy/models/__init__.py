"""SQLAlchemy models for identity management."""

from blogger_identity.infrastructure.persistence.sqlalchemy.models.linked_account_model import (  # noqa: E501
    LinkedAccountModel,
)
from blogger_identity.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = [
    "LinkedAccountModel",
    "UserModel",
]
