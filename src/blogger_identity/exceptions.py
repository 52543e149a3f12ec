"""Sign-in flow exceptions and flow error codes.

Flow errors are coarse outcomes of a sign-in attempt. They are never shown
inline next to a form field; the HTTP layer turns them into a redirect
carrying ``FlowErrorCode`` in the ``error`` query parameter.
"""

from enum import Enum

from blogger_auth.exceptions import InvalidCredentialsError


class FlowErrorCode(str, Enum):
    """Machine-readable sign-in outcome codes.

    These codes are part of the public contract with the presentation
    layer, which maps them to human text. Should not be changed.
    """

    OAUTH_ACCOUNT_NOT_LINKED = "OAuthAccountNotLinked"
    ACCESS_DENIED = "AccessDenied"
    CREDENTIALS_SIGNIN = "CredentialsSignin"
    OAUTH_SIGNIN = "OAuthSignin"
    OAUTH_CALLBACK = "OAuthCallbackError"
    OAUTH_CREATE_ACCOUNT = "OAuthCreateAccount"
    CALLBACK = "Callback"


class FlowError(Exception):
    """Base exception for sign-in outcomes conveyed by redirect."""

    code: FlowErrorCode = FlowErrorCode.CALLBACK

    def __init__(self, message: str = "Sign-in failed"):
        self.message = message
        super().__init__(self.message)


class OAuthAccountNotLinkedError(FlowError):
    """The email belongs to a user who never linked this provider."""

    code = FlowErrorCode.OAUTH_ACCOUNT_NOT_LINKED

    def __init__(self, email: str, provider: str):
        self.email = email
        self.provider = provider
        super().__init__(f"Email {email} is not linked to provider {provider}")


class UnknownProviderError(FlowError):
    """The requested provider is unknown or not configured."""

    code = FlowErrorCode.OAUTH_SIGNIN

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"Unknown or unconfigured provider: {provider}")


class ProviderAccessDeniedError(FlowError):
    """The user declined the consent screen at the provider."""

    code = FlowErrorCode.ACCESS_DENIED

    def __init__(self, message: str = "Access denied by provider"):
        super().__init__(message)


class InvalidOAuthStateError(FlowError):
    """The OAuth state is missing, expired or does not match the cookie."""

    code = FlowErrorCode.OAUTH_CALLBACK

    def __init__(self, message: str = "Invalid OAuth state"):
        super().__init__(message)


class OAuthProviderError(FlowError):
    """Talking to the provider failed or it returned an unusable profile."""

    code = FlowErrorCode.OAUTH_CALLBACK

    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"{provider}: {message}")


class OAuthCreateAccountError(FlowError):
    """Creating the user for a first OAuth sign-in lost a uniqueness race."""

    code = FlowErrorCode.OAUTH_CREATE_ACCOUNT

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Could not create account for {email}")


class CredentialsRejectedError(InvalidCredentialsError):
    """Credentials were rejected; attributable to one input field.

    Raised by the credentials authenticator. The JSON login flow reports
    ``field``/``message`` inline, the form flow redirects with
    ``FlowErrorCode.CREDENTIALS_SIGNIN``.
    """

    code = FlowErrorCode.CREDENTIALS_SIGNIN

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)
