"""FastAPI dependency injection for the blogger API.

Provides dependencies for:
- Database sessions
- Token and password services
- Sign-in flow services
- The current session (read from the session cookie)
"""

import logging
from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from blogger.presentation.api.config import get_api_settings
from blogger_auth import JWTService, PasswordHashingService
from blogger_config.settings import Settings, get_settings
from blogger_identity.application import (
    CredentialsLoginService,
    IdentityReconciler,
    OAuthSignInService,
    SessionContext,
    SessionIssuer,
    SignupService,
)
from blogger_identity.application.ports import OAuthClient
from blogger_identity.application.providers import (
    CredentialsAuthenticator,
    OAuthAuthenticator,
    ProviderRegistry,
)
from blogger_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_settings().database_url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.
    Routers decide whether to commit or roll back.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.auth_secret.get_secret_value(),
        session_expire_days=settings.session_max_age_days,
        state_expire_minutes=settings.oauth_state_max_age_minutes,
    )


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    return PasswordHashingService(rounds=settings.password_hash_rounds)


def get_oauth_clients(request: Request) -> list[OAuthClient]:
    """OAuth clients built once by the app factory."""
    return list(getattr(request.app.state, "oauth_clients", []))


JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]
PasswordServiceDep = Annotated[PasswordHashingService, Depends(get_password_service)]
OAuthClientsDep = Annotated[list[OAuthClient], Depends(get_oauth_clients)]


def get_session_issuer(jwt_service: JWTServiceDep) -> SessionIssuer:
    return SessionIssuer(jwt_service)


SessionIssuerDep = Annotated[SessionIssuer, Depends(get_session_issuer)]


def get_provider_registry(
    session: DBSession,
    password_service: PasswordServiceDep,
    oauth_clients: OAuthClientsDep,
) -> ProviderRegistry:
    """Get the registry with credentials plus every configured OAuth provider."""
    user_repo = UserRepositorySQLAlchemy(session)
    return ProviderRegistry(
        [
            CredentialsAuthenticator(user_repo, password_service),
            *(OAuthAuthenticator(client) for client in oauth_clients),
        ],
    )


ProviderRegistryDep = Annotated[ProviderRegistry, Depends(get_provider_registry)]


def get_credentials_login_service(
    registry: ProviderRegistryDep,
    session_issuer: SessionIssuerDep,
) -> CredentialsLoginService:
    return CredentialsLoginService(registry, session_issuer)


def get_signup_service(
    session: DBSession,
    password_service: PasswordServiceDep,
) -> SignupService:
    return SignupService(UserRepositorySQLAlchemy(session), password_service)


def get_oauth_sign_in_service(
    session: DBSession,
    registry: ProviderRegistryDep,
    session_issuer: SessionIssuerDep,
    jwt_service: JWTServiceDep,
    settings: SettingsDep,
) -> OAuthSignInService:
    return OAuthSignInService(
        registry=registry,
        reconciler=IdentityReconciler(UserRepositorySQLAlchemy(session)),
        session_issuer=session_issuer,
        jwt_service=jwt_service,
        base_url=settings.auth_base_url,
    )


# Type aliases for injected flow services
LoginService = Annotated[
    CredentialsLoginService,
    Depends(get_credentials_login_service),
]
SignupServiceDep = Annotated[SignupService, Depends(get_signup_service)]
OAuthService = Annotated[OAuthSignInService, Depends(get_oauth_sign_in_service)]


# -----------------------------------------------------------------------------
# Current Session (cookie)
# -----------------------------------------------------------------------------


def get_session_token(request: Request, settings: SettingsDep) -> str | None:
    return request.cookies.get(settings.session_cookie_name)


SessionToken = Annotated[str | None, Depends(get_session_token)]


def get_session_context(
    token: SessionToken,
    session_issuer: SessionIssuerDep,
) -> SessionContext | None:
    """
    Optional session dependency.

    Returns the verified session if the cookie carries a valid token,
    None otherwise.
    """
    return session_issuer.materialize(token)


OptionalSession = Annotated[SessionContext | None, Depends(get_session_context)]
