"""Session issuer: mints, refreshes and reads session tokens."""

import logging
from typing import Any, Mapping

from blogger_auth import InvalidTokenError, JWTService
from blogger_identity.application.context import SessionContext
from blogger_identity.domain.user import User

logger = logging.getLogger(__name__)


class SessionIssuer:
    """
    Application service for stateless sessions.

    Sessions live entirely in the signed token. Nothing is stored server
    side, so signing out only means dropping the cookie.
    """

    def __init__(self, jwt_service: JWTService):
        self._jwt_service = jwt_service

    @property
    def max_age_seconds(self) -> int:
        return self._jwt_service.session_max_age_seconds

    def issue(
        self,
        user: User,
        extra_claims: Mapping[str, Any] | None = None,
    ) -> str:
        token = self._jwt_service.create_session_token(
            user_id=user.id,
            email=user.email,
            name=user.name,
            extra_claims=extra_claims,
        )
        logger.debug("Session issued for user: %s", user.id)
        return token

    def update(self, token: str, claims: Mapping[str, Any]) -> str:
        """Merge ``claims`` into the session without re-authenticating.

        Raises
        ------
        InvalidTokenError
            If ``token`` is not a valid session token
        """
        return self._jwt_service.merge_session_claims(token, claims)

    def materialize(self, token: str | None) -> SessionContext | None:
        if not token:
            return None
        try:
            payload = self._jwt_service.verify_session_token(token)
        except InvalidTokenError as e:
            logger.debug("Discarding session token: %s", e.message)
            return None
        return SessionContext.from_token_payload(payload)
