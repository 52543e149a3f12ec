"""Build OAuth clients for the providers configured in settings."""

import logging

from blogger.infrastructure.oauth.base import HttpOAuthClient
from blogger.infrastructure.oauth.github import GitHubOAuthClient
from blogger.infrastructure.oauth.google import GoogleOAuthClient
from blogger_config import Settings

logger = logging.getLogger(__name__)


def build_oauth_clients(settings: Settings) -> list[HttpOAuthClient]:
    """Return one client per provider with both id and secret set."""
    clients: list[HttpOAuthClient] = []

    if settings.auth_google_id and settings.auth_google_secret:
        clients.append(
            GoogleOAuthClient(
                client_id=settings.auth_google_id,
                client_secret=settings.auth_google_secret.get_secret_value(),
                timeout=settings.oauth_http_timeout,
            ),
        )

    if settings.auth_github_id and settings.auth_github_secret:
        clients.append(
            GitHubOAuthClient(
                client_id=settings.auth_github_id,
                client_secret=settings.auth_github_secret.get_secret_value(),
                timeout=settings.oauth_http_timeout,
            ),
        )

    logger.info(
        "OAuth providers configured: %s",
        ", ".join(c.kind.value for c in clients) or "none",
    )
    return clients
