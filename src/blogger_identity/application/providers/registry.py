"""Registry dispatching authentication by provider kind."""

from typing import Any, Iterable, Union

from blogger_identity.application.ports import OAuthClient
from blogger_identity.application.providers.base import Authenticator, Identity
from blogger_identity.application.providers.oauth import OAuthAuthenticator
from blogger_identity.domain.user.value_objects import ProviderKind
from blogger_identity.exceptions import UnknownProviderError


class ProviderRegistry:
    """Holds one authenticator per configured provider kind.

    Examples
    --------
    >>> registry = ProviderRegistry([credentials, OAuthAuthenticator(google)])
    >>> identity = await registry.authenticate("google", payload)
    """

    def __init__(self, authenticators: Iterable[Authenticator] = ()):
        self._authenticators: dict[ProviderKind, Authenticator] = {}
        for authenticator in authenticators:
            self.register(authenticator)

    def register(self, authenticator: Authenticator) -> None:
        self._authenticators[authenticator.kind] = authenticator

    @property
    def kinds(self) -> tuple[ProviderKind, ...]:
        return tuple(self._authenticators)

    def get(self, kind: Union[str, ProviderKind]) -> Authenticator:
        """Return the authenticator for ``kind``.

        Raises
        ------
        UnknownProviderError
            If the kind is unknown or has no configured authenticator
        """
        try:
            parsed = ProviderKind.parse(kind)
        except ValueError as e:
            raise UnknownProviderError(str(kind)) from e

        authenticator = self._authenticators.get(parsed)
        if authenticator is None:
            raise UnknownProviderError(parsed.value)
        return authenticator

    def oauth_client(self, kind: Union[str, ProviderKind]) -> OAuthClient:
        authenticator = self.get(kind)
        if not isinstance(authenticator, OAuthAuthenticator):
            raise UnknownProviderError(authenticator.kind.value)
        return authenticator.client

    async def authenticate(
        self,
        kind: Union[str, ProviderKind],
        payload: Any,
    ) -> Identity:
        return await self.get(kind).authenticate(payload)
