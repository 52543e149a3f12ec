"""User domain manages user identity and sign-in methods.

This domain handles:
- User aggregate (id, email, name, optional password hash)
- Linked accounts, one per sign-in provider
- Repository port for the relational credential store
"""

from blogger_identity.domain.user.aggregates import User
from blogger_identity.domain.user.entities import LinkedAccount
from blogger_identity.domain.user.exceptions import (
    AccountAlreadyLinkedError,
    EmailAlreadyExistsError,
    InvalidEmailError,
)
from blogger_identity.domain.user.repositories import UserRepository
from blogger_identity.domain.user.value_objects import (
    AccountType,
    Email,
    ProviderKind,
)

__all__ = [
    "AccountAlreadyLinkedError",
    "AccountType",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "LinkedAccount",
    "ProviderKind",
    "User",
    "UserRepository",
]
