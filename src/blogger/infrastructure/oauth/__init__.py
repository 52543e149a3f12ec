"""OAuth provider clients (httpx)."""

from blogger.infrastructure.oauth.base import HttpOAuthClient
from blogger.infrastructure.oauth.factory import build_oauth_clients
from blogger.infrastructure.oauth.github import GitHubOAuthClient
from blogger.infrastructure.oauth.google import GoogleOAuthClient

__all__ = [
    "GitHubOAuthClient",
    "GoogleOAuthClient",
    "HttpOAuthClient",
    "build_oauth_clients",
]
