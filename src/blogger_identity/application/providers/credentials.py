"""Email and password authenticator."""

import logging

from blogger_auth import PasswordHashingService
from blogger_identity.application.providers.base import (
    Authenticator,
    CredentialsPayload,
    Identity,
)
from blogger_identity.domain.user import UserRepository
from blogger_identity.domain.user.value_objects import ProviderKind
from blogger_identity.exceptions import CredentialsRejectedError

logger = logging.getLogger(__name__)

EMAIL_NOT_FOUND = "This email doesn't exist here!"
INCORRECT_PASSWORD = "Incorrect password!"


class CredentialsAuthenticator(Authenticator):
    """
    Verify an email and password against the credential store.

    An unknown email is reported on the ``email`` field. A user without a
    password hash (signed up through OAuth) and a wrong password are both
    reported on the ``password`` field with the same message.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service

    @property
    def kind(self) -> ProviderKind:
        return ProviderKind.CREDENTIALS

    async def authenticate(self, payload: CredentialsPayload) -> Identity:
        user = await self._user_repo.find_by_email(payload.email)
        if user is None:
            raise CredentialsRejectedError("email", EMAIL_NOT_FOUND)

        if user.password_hash is None:
            logger.debug("Credentials login for passwordless user: %s", user.id)
            raise CredentialsRejectedError("password", INCORRECT_PASSWORD)

        matches = await self._password_service.verify_async(
            payload.password,
            user.password_hash,
        )
        if not matches:
            raise CredentialsRejectedError("password", INCORRECT_PASSWORD)

        return Identity(
            provider=ProviderKind.CREDENTIALS,
            external_id=str(user.id),
            email=user.email,
            name=user.name,
            user=user,
        )
