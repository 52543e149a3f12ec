"""Blogger Identity - Users, linked accounts and the sign-in flows.

This module handles all identity-related concerns:
- User management (users and their linked provider accounts)
- Credentials login and signup
- OAuth sign-in and identity reconciliation across providers
- Session issuing and route-level access decisions

Generic token and password primitives live in blogger_auth; the HTTP
surface lives in blogger.presentation.
"""

from blogger_identity.application import (
    AuthResult,
    CredentialsLoginService,
    IdentityReconciler,
    OAuthSignInService,
    SessionContext,
    SessionIssuer,
    SignupService,
)
from blogger_identity.domain.user import (
    AccountAlreadyLinkedError,
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    LinkedAccount,
    ProviderKind,
    User,
    UserRepository,
)
from blogger_identity.exceptions import FlowError, FlowErrorCode

__all__ = [
    # Application
    "AuthResult",
    "CredentialsLoginService",
    "IdentityReconciler",
    "OAuthSignInService",
    "SessionContext",
    "SessionIssuer",
    "SignupService",
    # Domain
    "Email",
    "LinkedAccount",
    "ProviderKind",
    "User",
    "UserRepository",
    # Exceptions
    "AccountAlreadyLinkedError",
    "EmailAlreadyExistsError",
    "FlowError",
    "FlowErrorCode",
    "InvalidEmailError",
]
