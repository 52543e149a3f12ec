"""Google OAuth client (OpenID Connect userinfo)."""

from blogger.infrastructure.oauth.base import HttpOAuthClient
from blogger_identity.application.ports import OAuthProfile
from blogger_identity.domain.user.value_objects import ProviderKind


class GoogleOAuthClient(HttpOAuthClient):
    AUTHORIZE_URL = "https://accounts.google.com/o/oauth2/v2/auth"
    TOKEN_URL = "https://oauth2.googleapis.com/token"  # NOQA: S105
    USERINFO_URL = "https://openidconnect.googleapis.com/v1/userinfo"
    SCOPES = ("openid", "email", "profile")

    @property
    def kind(self) -> ProviderKind:
        return ProviderKind.GOOGLE

    def _extra_authorize_params(self) -> dict[str, str]:
        return {"prompt": "select_account"}

    async def _load_profile(self, access_token: str) -> OAuthProfile:
        info = await self._get_json(self.USERINFO_URL, access_token)
        email = info.get("email")
        # Google reports unverified addresses for some workspace setups
        if info.get("email_verified") is False:
            email = None
        return OAuthProfile(
            external_id=str(info.get("sub") or ""),
            email=email,
            name=info.get("name"),
        )
