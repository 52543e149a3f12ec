from blogger_identity.domain.user.value_objects.email import Email, is_valid_email
from blogger_identity.domain.user.value_objects.provider import (
    AccountType,
    ProviderKind,
)

__all__ = [
    "AccountType",
    "Email",
    "ProviderKind",
    "is_valid_email",
]
