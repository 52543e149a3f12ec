"""OAuth authenticator wrapping a provider client."""

from blogger_identity.application.ports import OAuthClient
from blogger_identity.application.providers.base import (
    Authenticator,
    Identity,
    OAuthCallbackPayload,
)
from blogger_identity.domain.user.value_objects import ProviderKind
from blogger_identity.exceptions import OAuthProviderError


class OAuthAuthenticator(Authenticator):
    """Authenticate a callback code through the provider's client."""

    def __init__(self, client: OAuthClient):
        self._client = client

    @property
    def kind(self) -> ProviderKind:
        return self._client.kind

    @property
    def client(self) -> OAuthClient:
        return self._client

    async def authenticate(self, payload: OAuthCallbackPayload) -> Identity:
        if not payload.code:
            raise OAuthProviderError(self.kind.value, "Missing authorization code")

        profile = await self._client.fetch_profile(payload.code, payload.redirect_uri)

        if not profile.external_id:
            raise OAuthProviderError(self.kind.value, "Profile has no account id")
        if not profile.email:
            raise OAuthProviderError(self.kind.value, "Profile has no email")

        return Identity(
            provider=self.kind,
            external_id=profile.external_id,
            email=profile.email,
            name=profile.name,
        )
