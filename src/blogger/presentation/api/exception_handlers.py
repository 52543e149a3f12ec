"""Centralized exception handlers for the FastAPI application.

Flow errors that escape a router become the same redirect the sign-in
flows produce. Token errors become 401. Anything else is logged and
answered with the generic error body, never with internals.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from blogger_auth import InvalidTokenError
from blogger_identity.application import GENERIC_API_ERROR, OAuthRedirect
from blogger_identity.exceptions import FlowError

logger = logging.getLogger(__name__)


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": message,
            "code": code,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(FlowError)
    async def flow_error_handler(
        request: Request,
        exc: FlowError,
    ) -> RedirectResponse:
        logger.warning(
            "Flow error on %s %s: %s (code=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
        )
        return RedirectResponse(
            url=OAuthRedirect.for_error(exc.code).location,
            status_code=status.HTTP_302_FOUND,
        )

    @app.exception_handler(InvalidTokenError)
    async def invalid_token_handler(
        request: Request,
        exc: InvalidTokenError,
    ) -> JSONResponse:
        logger.warning(
            "Invalid token on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
        )
        return _create_error_response(
            status_code=status.HTTP_401_UNAUTHORIZED,
            message="Invalid or expired session",
            code="INVALID_TOKEN",
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message=GENERIC_API_ERROR,
            code="INTERNAL_ERROR",
        )
