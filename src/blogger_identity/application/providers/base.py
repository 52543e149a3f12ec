"""Provider authenticator contract.

Every sign-in method is a variant of ``ProviderKind`` with exactly one
authenticator. An authenticator turns a provider-specific payload into
an ``Identity`` or raises; it never returns a partial result.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from blogger_identity.domain.user import User
from blogger_identity.domain.user.value_objects import ProviderKind


@dataclass(frozen=True)
class CredentialsPayload:
    email: str
    password: str


@dataclass(frozen=True)
class OAuthCallbackPayload:
    code: str
    redirect_uri: str


@dataclass(frozen=True)
class Identity:
    """An identity verified by a provider.

    ``user`` is set when the provider resolves the stored user itself
    (credentials). OAuth identities leave it empty and go through the
    identity reconciler.
    """

    provider: ProviderKind
    external_id: str
    email: str
    name: str | None = None
    user: User | None = None


class Authenticator(ABC):
    """Authenticates one provider kind."""

    @property
    @abstractmethod
    def kind(self) -> ProviderKind:
        """The provider kind handled by this authenticator."""

    @abstractmethod
    async def authenticate(self, payload: Any) -> Identity:
        """Verify ``payload`` and return the resulting identity."""
