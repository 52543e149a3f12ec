"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from blogger_identity.domain.user.aggregates.user import User
from blogger_identity.domain.user.value_objects import Email, ProviderKind


class UserRepository(ABC):
    """Repository interface for User aggregates (the credential store)."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by email address, linked accounts included."""

    @abstractmethod
    async def find_by_linked_account(
        self,
        provider: Union[str, ProviderKind],
        provider_account_id: str,
    ) -> Optional[User]:
        """Find the owner of a provider identity."""

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def create(self, user: User) -> None:
        """Insert a new user together with its linked accounts.

        Raises
        ------
        EmailAlreadyExistsError
            If another user already owns the email
        AccountAlreadyLinkedError
            If one of the provider identities is already linked
        """
