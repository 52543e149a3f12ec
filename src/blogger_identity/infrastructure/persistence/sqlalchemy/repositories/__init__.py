from blogger_identity.infrastructure.persistence.sqlalchemy.repositories.user_repository import (  # noqa: E501
    UserRepositorySQLAlchemy,
)

__all__ = [
    "UserRepositorySQLAlchemy",
]
