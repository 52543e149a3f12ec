"""Identity application layer.

Plain async services composing the sign-in pipeline (validate,
authenticate, reconcile, issue). They depend only on the domain ports
and on ``blogger_auth``, so tests can call them without a web framework.
"""

from blogger_identity.application.access_gate import (
    Allow,
    GateDecision,
    Redirect,
    decide,
    safe_callback_url,
)
from blogger_identity.application.context import SessionContext
from blogger_identity.application.results import GENERIC_API_ERROR, AuthResult
from blogger_identity.application.services import (
    CredentialsLoginService,
    IdentityReconciler,
    OAuthRedirect,
    OAuthSignInService,
    SessionIssuer,
    SignupService,
)
from blogger_identity.application.validation import (
    ValidationResult,
    validate_login,
    validate_signup,
)

__all__ = [
    "GENERIC_API_ERROR",
    "Allow",
    "AuthResult",
    "CredentialsLoginService",
    "GateDecision",
    "IdentityReconciler",
    "OAuthRedirect",
    "OAuthSignInService",
    "Redirect",
    "SessionContext",
    "SessionIssuer",
    "SignupService",
    "ValidationResult",
    "decide",
    "safe_callback_url",
    "validate_login",
    "validate_signup",
]
