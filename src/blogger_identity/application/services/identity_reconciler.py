"""Identity reconciler: maps a provider identity onto a stored user."""

import logging

from blogger_identity.application.providers import Identity
from blogger_identity.domain.user import (
    AccountAlreadyLinkedError,
    EmailAlreadyExistsError,
    User,
    UserRepository,
)
from blogger_identity.exceptions import (
    OAuthAccountNotLinkedError,
    OAuthCreateAccountError,
)

logger = logging.getLogger(__name__)


class IdentityReconciler:
    """
    Decide which user an OAuth identity signs in as.

    The order of checks matters:
    1. A linked account for (provider, external id) wins outright.
    2. A user with the same email must already be linked to the provider,
       otherwise the sign-in is rejected. Accounts are never linked by
       email implicitly.
    3. Without any match a new passwordless user is created together with
       its linked account.
    """

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def reconcile(self, identity: Identity) -> User:
        """Return the user ``identity`` signs in as.

        Raises
        ------
        ValueError
            If called with a credentials identity
        OAuthAccountNotLinkedError
            If the email belongs to a user not linked to the provider
        OAuthCreateAccountError
            If creating the new user lost a uniqueness race
        """
        if not identity.provider.is_oauth:
            msg = "Credentials identities are resolved by their authenticator"
            raise ValueError(msg)

        provider = identity.provider.value

        user = await self._user_repo.find_by_linked_account(
            identity.provider,
            identity.external_id,
        )
        if user is not None:
            return user

        user = await self._user_repo.find_by_email(identity.email)
        if user is not None:
            if user.is_linked_to(identity.provider):
                return user
            logger.info(
                "Rejected %s sign-in for %s: account not linked",
                provider,
                user.email,
            )
            raise OAuthAccountNotLinkedError(user.email, provider)

        user = User.register_from_provider(
            email=identity.email,
            name=identity.name,
            provider=identity.provider,
            provider_account_id=identity.external_id,
        )
        try:
            await self._user_repo.create(user)
        except (EmailAlreadyExistsError, AccountAlreadyLinkedError) as e:
            logger.warning("Lost account creation race for %s: %s", user.email, e)
            raise OAuthCreateAccountError(user.email) from e

        logger.info("User created via %s: %s", provider, user.email)
        return user
