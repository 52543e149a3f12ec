from blogger_identity.application.services.credentials_login_service import (
    CredentialsLoginService,
)
from blogger_identity.application.services.identity_reconciler import (
    IdentityReconciler,
)
from blogger_identity.application.services.oauth_sign_in_service import (
    OAuthRedirect,
    OAuthSignInService,
)
from blogger_identity.application.services.session_issuer import SessionIssuer
from blogger_identity.application.services.signup_service import (
    EMAIL_ALREADY_EXISTS,
    SignupService,
)

__all__ = [
    "EMAIL_ALREADY_EXISTS",
    "CredentialsLoginService",
    "IdentityReconciler",
    "OAuthRedirect",
    "OAuthSignInService",
    "SessionIssuer",
    "SignupService",
]
