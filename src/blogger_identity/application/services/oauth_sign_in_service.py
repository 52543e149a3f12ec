"""OAuth sign-in: redirect to the provider and handle its callback."""

import logging
import secrets
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

from blogger_auth import InvalidTokenError, JWTService
from blogger_identity.application.access_gate import safe_callback_url
from blogger_identity.application.providers import (
    OAuthCallbackPayload,
    ProviderRegistry,
)
from blogger_identity.application.services.identity_reconciler import (
    IdentityReconciler,
)
from blogger_identity.application.services.session_issuer import SessionIssuer
from blogger_identity.domain.user.value_objects import ProviderKind
from blogger_identity.exceptions import (
    FlowError,
    FlowErrorCode,
    InvalidOAuthStateError,
    OAuthProviderError,
    ProviderAccessDeniedError,
    UnknownProviderError,
)

logger = logging.getLogger(__name__)

ACCESS_DENIED = "access_denied"
CALLBACK_PATH = "/api/auth/callback"


@dataclass(frozen=True)
class OAuthRedirect:
    """Where to send the browser after an OAuth step.

    Attributes
    ----------
    location
        Redirect target
    error
        Flow error code when the step failed
    state_token
        State to store in the state cookie (``begin`` only)
    session_token
        Session to store in the session cookie (successful ``complete``)
    """

    location: str
    error: FlowErrorCode | None = None
    state_token: str | None = None
    session_token: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    @classmethod
    def for_error(cls, code: FlowErrorCode) -> "OAuthRedirect":
        page = "/signup" if code is FlowErrorCode.OAUTH_ACCOUNT_NOT_LINKED else "/login"
        return cls(location=f"{page}?{urlencode({'error': code.value})}", error=code)


class OAuthSignInService:
    """
    Application service for the OAuth redirect round trip.

    ``begin`` signs a state token carrying the post-login destination and
    a nonce; the same token goes to the provider and into a cookie.
    ``complete`` checks both copies match before touching the provider.
    """

    def __init__(  # noqa: PLR0913
        self,
        registry: ProviderRegistry,
        reconciler: IdentityReconciler,
        session_issuer: SessionIssuer,
        jwt_service: JWTService,
        base_url: str,
    ):
        self._registry = registry
        self._reconciler = reconciler
        self._session_issuer = session_issuer
        self._jwt_service = jwt_service
        self._base_url = base_url.rstrip("/")

    def redirect_uri(self, kind: ProviderKind) -> str:
        return f"{self._base_url}{CALLBACK_PATH}/{kind.value}"

    def begin(self, provider: str, callback_url: str | None = None) -> OAuthRedirect:
        try:
            client = self._registry.oauth_client(provider)
        except UnknownProviderError as e:
            logger.warning("OAuth sign-in requested for %s: %s", provider, e.message)
            return OAuthRedirect.for_error(e.code)

        state = self._jwt_service.create_state_token(
            {
                "provider": client.kind.value,
                "callbackUrl": safe_callback_url(callback_url),
                "nonce": secrets.token_urlsafe(16),
            },
        )
        location = client.authorization_url(state, self.redirect_uri(client.kind))
        return OAuthRedirect(location=location, state_token=state)

    async def complete(  # noqa: PLR0913
        self,
        provider: str,
        code: str | None = None,
        state: str | None = None,
        state_cookie: str | None = None,
        error: str | None = None,
    ) -> OAuthRedirect:
        """Finish an OAuth sign-in from the provider callback.

        Every failure is converted into a redirect carrying a flow error
        code; nothing raises out of this method.
        """
        try:
            kind = self._registry.oauth_client(provider).kind

            if error:
                if error == ACCESS_DENIED:
                    raise ProviderAccessDeniedError
                raise OAuthProviderError(kind.value, error)

            state_data = self._verify_state(kind, state, state_cookie)
            identity = await self._registry.authenticate(
                kind,
                OAuthCallbackPayload(code=code or "", redirect_uri=self.redirect_uri(kind)),
            )
            user = await self._reconciler.reconcile(identity)
            token = self._session_issuer.issue(user)
        except FlowError as e:
            logger.info("OAuth sign-in via %s failed: %s", provider, e.message)
            return OAuthRedirect.for_error(e.code)
        except Exception:
            logger.exception("Unexpected error during OAuth callback")
            return OAuthRedirect.for_error(FlowErrorCode.CALLBACK)

        logger.info("User logged in via %s: %s", kind.value, user.email)
        return OAuthRedirect(
            location=safe_callback_url(state_data.get("callbackUrl")),
            session_token=token,
        )

    def _verify_state(
        self,
        kind: ProviderKind,
        state: str | None,
        state_cookie: str | None,
    ) -> dict[str, Any]:
        if not state or not state_cookie:
            msg = "Missing OAuth state"
            raise InvalidOAuthStateError(msg)
        if not secrets.compare_digest(state.encode(), state_cookie.encode()):
            msg = "OAuth state does not match cookie"
            raise InvalidOAuthStateError(msg)
        try:
            data = self._jwt_service.verify_state_token(state)
        except InvalidTokenError as e:
            raise InvalidOAuthStateError(e.message) from e
        if data.get("provider") != kind.value:
            msg = "OAuth state was issued for another provider"
            raise InvalidOAuthStateError(msg)
        return data
