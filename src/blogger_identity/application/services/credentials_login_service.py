"""Credentials login: validate, authenticate, issue a session."""

import logging
from typing import Any, Mapping

from blogger_identity.application.providers import (
    CredentialsPayload,
    ProviderRegistry,
)
from blogger_identity.application.results import AuthResult
from blogger_identity.application.services.session_issuer import SessionIssuer
from blogger_identity.application.validation import validate_login
from blogger_identity.domain.user.value_objects import ProviderKind
from blogger_identity.exceptions import CredentialsRejectedError

logger = logging.getLogger(__name__)


class CredentialsLoginService:
    """Application service behind the email and password login form."""

    def __init__(self, registry: ProviderRegistry, session_issuer: SessionIssuer):
        self._registry = registry
        self._session_issuer = session_issuer

    async def submit_login(self, payload: Mapping[str, Any]) -> AuthResult:
        """Run a login submission through the full pipeline.

        Parameters
        ----------
        payload
            Raw form values keyed by field name (``email``, ``password``)

        Returns
        -------
        ``AuthResult`` carrying a session token on success, field errors
        on rejection, or the generic API error on unexpected faults
        """
        validation = validate_login(payload)
        if not validation.success or validation.data is None:
            return AuthResult.field_errors(validation.errors)

        data = validation.data
        try:
            identity = await self._registry.authenticate(
                ProviderKind.CREDENTIALS,
                CredentialsPayload(email=data.email, password=data.password),
            )
            if identity.user is None:
                msg = "Credentials authenticator returned no user"
                raise RuntimeError(msg)
            token = self._session_issuer.issue(identity.user)
        except CredentialsRejectedError as e:
            return AuthResult.field_error(e.field, e.message)
        except Exception:
            logger.exception("Unexpected error during login")
            return AuthResult.failure()

        logger.info("User logged in: %s", identity.user.email)
        return AuthResult.ok(session_token=token)
