"""Authentication router: credentials, signup, OAuth and session endpoints."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, HTTPException, Query, Request, Response, status
from fastapi.responses import JSONResponse, RedirectResponse

from blogger.presentation.api.dependencies import (
    DBSession,
    LoginService,
    OAuthService,
    OptionalSession,
    SessionIssuerDep,
    SessionToken,
    SettingsDep,
    SignupServiceDep,
)
from blogger.presentation.api.schemas.auth import (
    AuthResultResponse,
    SessionResponse,
    SignOutResponse,
)
from blogger_auth import InvalidTokenError
from blogger_config.settings import Settings
from blogger_identity.application import AuthResult, OAuthRedirect, safe_callback_url
from blogger_identity.exceptions import FlowErrorCode

logger = logging.getLogger(__name__)

router = APIRouter()

AUTH_COOKIE_PATH = "/"
STATE_COOKIE_PATH = "/api/auth"
STATE_COOKIE_NAME = "blogger.oauth-state"

JSONPayload = Annotated[dict[str, Any], Body()]


def _set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    """Set the session token as an HttpOnly cookie.

    The cookie is sent on every navigation so the access gate can read it.
    """
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite=settings.session_cookie_samesite,
        max_age=settings.session_max_age_days * 24 * 60 * 60,
        path=AUTH_COOKIE_PATH,
        domain=settings.session_cookie_domain,
    )


def _clear_session_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        key=settings.session_cookie_name,
        path=AUTH_COOKIE_PATH,
        domain=settings.session_cookie_domain,
    )


def _set_state_cookie(response: Response, state: str, settings: Settings) -> None:
    response.set_cookie(
        key=STATE_COOKIE_NAME,
        value=state,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",  # Must survive the top-level redirect back from the provider
        max_age=settings.oauth_state_max_age_minutes * 60,
        path=STATE_COOKIE_PATH,
        domain=settings.session_cookie_domain,
    )


def _clear_state_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        key=STATE_COOKIE_NAME,
        path=STATE_COOKIE_PATH,
        domain=settings.session_cookie_domain,
    )


def _result_response(result: AuthResult, success_status: int) -> JSONResponse:
    if result.success:
        status_code = success_status
    elif result.api_error is not None:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    else:
        status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    return JSONResponse(
        status_code=status_code,
        content=AuthResultResponse.from_result(result).to_content(),
    )


def _error_redirect(code: FlowErrorCode) -> RedirectResponse:
    return RedirectResponse(
        url=OAuthRedirect.for_error(code).location,
        status_code=status.HTTP_302_FOUND,
    )


@router.post(
    "/login",
    summary="Log in with email and password",
    response_model=AuthResultResponse,
    responses={
        200: {"description": "Login successful, session cookie set"},
        422: {"description": "Field errors"},
        500: {"description": "Unexpected error"},
    },
)
async def login(
    payload: JSONPayload,
    login_service: LoginService,
    settings: SettingsDep,
) -> JSONResponse:
    """
    Authenticate with email and password.

    Field errors are returned per input; the session token is set as an
    HttpOnly cookie on success.
    """
    result = await login_service.submit_login(payload)
    response = _result_response(result, status.HTTP_200_OK)
    if result.success and result.session_token:
        _set_session_cookie(response, result.session_token, settings)
    return response


@router.post(
    "/signup",
    summary="Create an account with email and password",
    response_model=AuthResultResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "Account created"},
        422: {"description": "Field errors (including an existing email)"},
        500: {"description": "Unexpected error"},
    },
)
async def signup(
    payload: JSONPayload,
    signup_service: SignupServiceDep,
    session: DBSession,
) -> JSONResponse:
    """
    Register a new user.

    Signing up does not sign the user in; the client logs in afterwards.
    """
    result = await signup_service.submit_signup(payload)
    if result.success:
        try:
            await session.commit()
        except Exception:
            await session.rollback()
            logger.exception("Signup commit failed")
            result = AuthResult.failure()
    else:
        await session.rollback()
    return _result_response(result, status.HTTP_201_CREATED)


@router.post(
    "/callback/credentials",
    summary="Log in from an HTML form",
    status_code=status.HTTP_302_FOUND,
    response_class=RedirectResponse,
)
async def credentials_form_callback(
    request: Request,
    login_service: LoginService,
    settings: SettingsDep,
) -> RedirectResponse:
    """
    Form variant of the login endpoint.

    Redirects to the sanitized ``callbackUrl`` on success and to
    ``/login?error=CredentialsSignin`` on rejection.
    """
    form = await request.form()
    payload = {key: form.get(key) for key in ("email", "password")}
    result = await login_service.submit_login(payload)

    if not result.success:
        if result.api_error is not None:
            return _error_redirect(FlowErrorCode.CALLBACK)
        return _error_redirect(FlowErrorCode.CREDENTIALS_SIGNIN)

    callback = form.get("callbackUrl")
    response = RedirectResponse(
        url=safe_callback_url(callback if isinstance(callback, str) else None),
        status_code=status.HTTP_302_FOUND,
    )
    if result.session_token:
        _set_session_cookie(response, result.session_token, settings)
    return response


@router.get(
    "/signin/{provider}",
    summary="Start an OAuth sign-in",
    status_code=status.HTTP_302_FOUND,
    response_class=RedirectResponse,
)
async def signin_with_provider(
    provider: str,
    oauth_service: OAuthService,
    settings: SettingsDep,
    callback_url: Annotated[str | None, Query(alias="callbackUrl")] = None,
) -> RedirectResponse:
    """Redirect to the provider's consent screen.

    The signed state is stored in a short-lived cookie and compared with
    the ``state`` query parameter on the way back.
    """
    outcome = oauth_service.begin(provider, callback_url)
    response = RedirectResponse(url=outcome.location, status_code=status.HTTP_302_FOUND)
    if outcome.state_token:
        _set_state_cookie(response, outcome.state_token, settings)
    return response


@router.get(
    "/callback/{provider}",
    summary="OAuth provider callback",
    status_code=status.HTTP_302_FOUND,
    response_class=RedirectResponse,
)
async def oauth_callback(  # noqa: PLR0913
    provider: str,
    request: Request,
    oauth_service: OAuthService,
    session: DBSession,
    settings: SettingsDep,
    code: str | None = None,
    state: str | None = None,
    error: str | None = None,
) -> RedirectResponse:
    """
    Finish an OAuth sign-in.

    Redirects to the callback URL carried in the state on success, or to
    the login/signup page with an ``error`` code.
    """
    outcome = await oauth_service.complete(
        provider,
        code=code,
        state=state,
        state_cookie=request.cookies.get(STATE_COOKIE_NAME),
        error=error,
    )

    if outcome.success:
        try:
            await session.commit()
        except Exception:
            await session.rollback()
            logger.exception("OAuth sign-in commit failed")
            response = _error_redirect(FlowErrorCode.CALLBACK)
            _clear_state_cookie(response, settings)
            return response
    else:
        await session.rollback()

    response = RedirectResponse(url=outcome.location, status_code=status.HTTP_302_FOUND)
    _clear_state_cookie(response, settings)
    if outcome.session_token:
        _set_session_cookie(response, outcome.session_token, settings)
    return response


@router.get(
    "/session",
    summary="Get the current session",
    response_model=SessionResponse | None,
)
async def get_session(current: OptionalSession) -> SessionResponse | None:
    """Return the current session, or ``null`` when signed out."""
    if current is None:
        return None
    return SessionResponse.from_context(current)


@router.post(
    "/session",
    summary="Update the current session",
    response_model=SessionResponse,
    responses={401: {"description": "No valid session"}},
)
async def update_session(
    claims: JSONPayload,
    token: SessionToken,
    session_issuer: SessionIssuerDep,
    settings: SettingsDep,
    response: Response,
) -> SessionResponse:
    """
    Merge claims into the session without re-authenticating.

    The user id and token timestamps cannot be changed; the expiry window
    starts again.
    """
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    try:
        new_token = session_issuer.update(token, claims)
    except InvalidTokenError as e:
        logger.warning("Session update with invalid token: %s", e.message)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired session",
        ) from e

    current = session_issuer.materialize(new_token)
    if current is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired session",
        )

    _set_session_cookie(response, new_token, settings)
    return SessionResponse.from_context(current)


@router.post("/signout", summary="Sign out", response_model=SignOutResponse)
async def signout(response: Response, settings: SettingsDep) -> SignOutResponse:
    """Clear the session cookie. Tokens are stateless and not revoked."""
    _clear_session_cookie(response, settings)
    return SignOutResponse()
