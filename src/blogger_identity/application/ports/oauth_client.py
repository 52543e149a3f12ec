"""OAuth client port for the application layer.

This abstracts the provider round trip (authorization URL, code
exchange, profile fetch), keeping HTTP clients and provider-specific
payloads in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from blogger_identity.domain.user.value_objects import ProviderKind


@dataclass(frozen=True)
class OAuthProfile:
    """Profile returned by a provider after a successful code exchange."""

    external_id: str
    email: str | None
    name: str | None = None


class OAuthClient(ABC):
    """Port for a single OAuth provider."""

    @property
    @abstractmethod
    def kind(self) -> ProviderKind:
        """The provider this client talks to."""

    @abstractmethod
    def authorization_url(self, state: str, redirect_uri: str) -> str:
        """Build the provider consent URL for ``state``."""

    @abstractmethod
    async def fetch_profile(self, code: str, redirect_uri: str) -> OAuthProfile:
        """Exchange ``code`` for a token and fetch the user's profile.

        Raises
        ------
        OAuthProviderError
            If the exchange or the profile request fails
        """

    async def close(self) -> None:
        """Release network resources held by the client."""
