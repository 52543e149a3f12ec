"""Provider authenticators, one per sign-in method."""

from blogger_identity.application.providers.base import (
    Authenticator,
    CredentialsPayload,
    Identity,
    OAuthCallbackPayload,
)
from blogger_identity.application.providers.credentials import (
    EMAIL_NOT_FOUND,
    INCORRECT_PASSWORD,
    CredentialsAuthenticator,
)
from blogger_identity.application.providers.oauth import OAuthAuthenticator
from blogger_identity.application.providers.registry import ProviderRegistry

__all__ = [
    "EMAIL_NOT_FOUND",
    "INCORRECT_PASSWORD",
    "Authenticator",
    "CredentialsAuthenticator",
    "CredentialsPayload",
    "Identity",
    "OAuthAuthenticator",
    "OAuthCallbackPayload",
    "ProviderRegistry",
]
