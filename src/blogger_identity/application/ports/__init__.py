from blogger_identity.application.ports.oauth_client import OAuthClient, OAuthProfile

__all__ = ["OAuthClient", "OAuthProfile"]
