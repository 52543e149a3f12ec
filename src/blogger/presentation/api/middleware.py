"""Access gate middleware.

Runs the access gate on every request before routing. Only the session
cookie is consulted; the database is never touched here.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response
from starlette.types import ASGIApp

from blogger_auth import InvalidTokenError, JWTService
from blogger_identity.application import Redirect, decide

logger = logging.getLogger(__name__)


def is_exempt(path: str, prefixes: tuple[str, ...]) -> bool:
    """True if ``path`` equals or lies below one of ``prefixes``."""
    for prefix in prefixes:
        base = prefix.rstrip("/")
        if not base:
            continue
        if path == base or path.startswith(base + "/"):
            return True
    return False


class AccessGateMiddleware(BaseHTTPMiddleware):
    """Redirect page navigations according to the access gate."""

    def __init__(
        self,
        app: ASGIApp,
        jwt_service: JWTService,
        cookie_name: str,
        exempt_prefixes: tuple[str, ...] = (),
    ):
        super().__init__(app)
        self._jwt_service = jwt_service
        self._cookie_name = cookie_name
        self._exempt_prefixes = exempt_prefixes

    def _has_session(self, request: Request) -> bool:
        token = request.cookies.get(self._cookie_name)
        if not token:
            return False
        try:
            self._jwt_service.verify_session_token(token)
        except InvalidTokenError:
            return False
        return True

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        path = request.url.path
        if is_exempt(path, self._exempt_prefixes):
            return await call_next(request)

        decision = decide(path, request.url.query, self._has_session(request))
        if isinstance(decision, Redirect):
            logger.debug("Access gate redirect: %s -> %s", path, decision.target)
            return RedirectResponse(url=decision.target, status_code=307)
        return await call_next(request)
