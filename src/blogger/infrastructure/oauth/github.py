"""GitHub OAuth client."""

import logging
from typing import Any

from blogger.infrastructure.oauth.base import HttpOAuthClient
from blogger_identity.application.ports import OAuthProfile
from blogger_identity.domain.user.value_objects import ProviderKind

logger = logging.getLogger(__name__)


class GitHubOAuthClient(HttpOAuthClient):
    """GitHub OAuth app client.

    The ``/user`` endpoint only returns an email when the user made one
    public. Otherwise the primary verified address from ``/user/emails``
    is used.
    """

    AUTHORIZE_URL = "https://github.com/login/oauth/authorize"
    TOKEN_URL = "https://github.com/login/oauth/access_token"  # NOQA: S105
    USER_URL = "https://api.github.com/user"
    EMAILS_URL = "https://api.github.com/user/emails"
    SCOPES = ("read:user", "user:email")

    @property
    def kind(self) -> ProviderKind:
        return ProviderKind.GITHUB

    async def _load_profile(self, access_token: str) -> OAuthProfile:
        user = await self._get_json(self.USER_URL, access_token)
        email = user.get("email")
        if not email:
            emails = await self._get_json(self.EMAILS_URL, access_token)
            email = _primary_verified_email(emails)
            if email is None:
                logger.debug("GitHub user %s has no verified email", user.get("id"))

        external_id = user.get("id")
        return OAuthProfile(
            external_id=str(external_id) if external_id is not None else "",
            email=email,
            name=user.get("name") or user.get("login"),
        )


def _primary_verified_email(emails: Any) -> str | None:
    if not isinstance(emails, list):
        return None
    for entry in emails:
        if entry.get("primary") and entry.get("verified"):
            return entry.get("email")
    return None
