"""FastAPI application factory.

Creates and configures the FastAPI application with the auth router,
the access gate middleware and the exception handlers.

Run with uvicorn in factory mode:
    uvicorn blogger.presentation.api.app:create_app --factory
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blogger.infrastructure.oauth import build_oauth_clients
from blogger.infrastructure.persistence.sqlalchemy.init_db import create_tables
from blogger.presentation.api.config import get_api_settings
from blogger.presentation.api.dependencies import get_engine, get_jwt_service
from blogger.presentation.api.exception_handlers import setup_exception_handlers
from blogger.presentation.api.middleware import AccessGateMiddleware
from blogger.presentation.api.routers import auth_router
from blogger_config.settings import Settings, get_settings

API_VERSION = "1.0.0"
AUTH_PREFIX = "/api/auth"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Sign-in, signup and session management.

**Sign-in methods:**
- Email and password (JSON or HTML form)
- OAuth providers (Google, GitHub)

**Sessions:**
- Signed, stateless token in an HttpOnly cookie
- Claims can be merged without re-authenticating
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@lru_cache(maxsize=None)
def _configure_logging(log_level_str: str) -> None:
    """Configure application logging.

    Sets up logging for the blogger packages with:
    - Console output with timestamps and module names
    - Configurable log level for blogger modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    for name in ("blogger", "blogger_auth", "blogger_identity"):
        logging.getLogger(name).setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting Blogger auth API v%s...", API_VERSION)
    engine = get_engine()
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None
    yield

    logger.info("Shutting down Blogger auth API...")
    for client in getattr(app.state, "oauth_clients", []):
        await client.close()
    await engine.dispose()
    logger.info("Database connections closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing. When given, every
        dependency reading settings receives this object.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Configure logging on app creation (not on module import)
    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} Auth API",
        description="Credentials and OAuth sign-in, signup and sessions.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )
    app.state.oauth_clients = build_oauth_clients(settings)
    app.dependency_overrides[get_api_settings] = lambda: settings

    # Gate runs before routing; CORS is added last so it wraps the gate
    app.add_middleware(
        AccessGateMiddleware,
        jwt_service=get_jwt_service(settings),
        cookie_name=settings.session_cookie_name,
        exempt_prefixes=settings.exempt_prefixes,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(auth_router, prefix=AUTH_PREFIX, tags=["Authentication"])

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint.

        Returns service status and version info.
        """
        return {
            "status": "healthy",
            "version": API_VERSION,
        }

    return app
