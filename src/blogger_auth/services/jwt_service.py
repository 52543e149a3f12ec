"""JWT token service.

Provides creation and verification of the signed, stateless session
token and of the short-lived state token used during OAuth redirects.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Mapping
from uuid import UUID

import jwt

from blogger_auth.exceptions import InvalidTokenError
from blogger_auth.schemas import TokenPayload

SESSION_TOKEN_TYPE = "session"
STATE_TOKEN_TYPE = "oauth_state"  # NOQA: S105


class JWTService:
    """Service for JWT token creation and verification.

    Session tokens carry the user id (as both ``sub`` and ``id``), the
    profile claims echoed into the session and any claims merged in
    later through :meth:`merge_session_claims`.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.create_session_token(user_id, "user@example.com")
    >>> payload = service.verify_session_token(token)
    >>> print(payload.user_id)
    """

    DEFAULT_SESSION_EXPIRE_DAYS = 30
    DEFAULT_STATE_EXPIRE_MINUTES = 15
    ALGORITHM = "HS256"

    # Claims owned by the issuer or enforced by PyJWT on decode; merges
    # never overwrite them
    RESERVED_CLAIMS = frozenset(
        {"sub", "id", "iat", "exp", "type", "aud", "iss", "nbf", "jti"},
    )

    def __init__(
        self,
        secret_key: str,
        session_expire_days: int = DEFAULT_SESSION_EXPIRE_DAYS,
        state_expire_minutes: int = DEFAULT_STATE_EXPIRE_MINUTES,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        session_expire_days
            Days until a session token expires (default 30)
        state_expire_minutes
            Minutes until an OAuth state token expires (default 15)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._session_expire = timedelta(days=session_expire_days)
        self._state_expire = timedelta(minutes=state_expire_minutes)

    @property
    def session_max_age_seconds(self) -> int:
        return int(self._session_expire.total_seconds())

    def create_session_token(
        self,
        user_id: UUID,
        email: str,
        name: str | None = None,
        extra_claims: Mapping[str, Any] | None = None,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a session token for an authenticated user.

        Parameters
        ----------
        user_id
            The user's unique identifier
        email
            The user's email address
        name
            The user's display name (optional)
        extra_claims
            Additional claims to embed; reserved claims are ignored
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        claims: dict[str, Any] = {"email": email, "name": name}
        if extra_claims:
            claims.update(self._strip_reserved(extra_claims))
        claims["sub"] = str(user_id)
        claims["id"] = str(user_id)
        return self._encode(
            claims,
            token_type=SESSION_TOKEN_TYPE,
            expires_delta=expires_delta or self._session_expire,
        )

    def verify_session_token(self, token: str) -> TokenPayload:
        """Verify and decode a session token.

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, malformed or not a session token
        """
        payload = self._decode(token)

        try:
            if payload.get("type") != SESSION_TOKEN_TYPE:
                msg = "Not a session token"
                raise InvalidTokenError(msg)

            user_id = UUID(payload["sub"])
            email = payload["email"]
            exp = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e

        claims = {
            key: value
            for key, value in payload.items()
            if key not in self.RESERVED_CLAIMS
        }
        return TokenPayload(
            user_id=user_id,
            email=email,
            exp=exp,
            token_type=SESSION_TOKEN_TYPE,
            name=payload.get("name"),
            claims=claims,
        )

    def merge_session_claims(self, token: str, updates: Mapping[str, Any]) -> str:
        """Merge claims into an existing session token and re-sign it.

        The user id cannot be changed through a merge. The expiry window
        starts again from now.

        Raises
        ------
        InvalidTokenError
            If the existing token does not verify
        """
        current = self.verify_session_token(token)
        merged = {**current.claims, **self._strip_reserved(updates)}
        email = merged.pop("email", current.email)
        name = merged.pop("name", current.name)
        return self.create_session_token(
            user_id=current.user_id,
            email=email,
            name=name,
            extra_claims=merged,
        )

    def create_state_token(
        self,
        data: Mapping[str, Any],
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a short-lived token protecting an OAuth round trip."""
        return self._encode(
            dict(self._strip_reserved(data)),
            token_type=STATE_TOKEN_TYPE,
            expires_delta=expires_delta or self._state_expire,
        )

    def verify_state_token(self, token: str) -> dict[str, Any]:
        """Verify an OAuth state token and return its data claims.

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired or not a state token
        """
        payload = self._decode(token)
        if payload.get("type") != STATE_TOKEN_TYPE:
            msg = "Not an OAuth state token"
            raise InvalidTokenError(msg)
        return {
            key: value
            for key, value in payload.items()
            if key not in self.RESERVED_CLAIMS
        }

    def _decode(self, token: str) -> dict[str, Any]:
        if not token:
            msg = "Token is empty"
            raise InvalidTokenError(msg)
        try:
            return jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e

    def _encode(
        self,
        claims: dict[str, Any],
        token_type: str,
        expires_delta: timedelta,
    ) -> str:
        now = datetime.now(tz=timezone.utc)
        payload = {
            **claims,
            "type": token_type,
            "iat": now,
            "exp": now + expires_delta,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def _strip_reserved(self, claims: Mapping[str, Any]) -> dict[str, Any]:
        return {
            key: value
            for key, value in claims.items()
            if key not in self.RESERVED_CLAIMS
        }
