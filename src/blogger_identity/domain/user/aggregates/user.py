"""User aggregate: identity, optional password and linked accounts."""

from datetime import datetime
from typing import Iterable, Union
from uuid import UUID, uuid4

from blogger.domain.shared.time import utc_now
from blogger_identity.domain.user.entities import LinkedAccount
from blogger_identity.domain.user.exceptions import AccountAlreadyLinkedError
from blogger_identity.domain.user.value_objects import (
    AccountType,
    Email,
    ProviderKind,
)


class User:
    """
    User aggregate root.

    A user signs in either with a password (credentials) or through one
    or more OAuth providers. Users created through OAuth have no password
    hash and can never authenticate with credentials.
    """

    def __init__(
        self,
        email: Union[str, Email],
        name: str | None = None,
        password_hash: str | None = None,
        linked_accounts: Iterable[LinkedAccount] = (),
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._id = id or uuid4()
        self._name = name
        self._password_hash = password_hash or None
        self._linked_accounts: list[LinkedAccount] = list(linked_accounts)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def password_hash(self) -> str | None:
        return self._password_hash

    @property
    def has_password(self) -> bool:
        return self._password_hash is not None

    @property
    def linked_accounts(self) -> tuple[LinkedAccount, ...]:
        return tuple(self._linked_accounts)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def is_linked_to(self, provider: Union[str, ProviderKind]) -> bool:
        kind = ProviderKind.parse(provider)
        return any(a.provider is kind for a in self._linked_accounts)

    def link_account(
        self,
        provider: Union[str, ProviderKind],
        provider_account_id: str,
        account_type: AccountType = AccountType.OAUTH,
    ) -> LinkedAccount:
        kind = ProviderKind.parse(provider)
        if self.is_linked_to(kind):
            raise AccountAlreadyLinkedError(kind.value, provider_account_id)

        account = LinkedAccount(
            user_id=self._id,
            provider=kind,
            provider_account_id=provider_account_id,
            account_type=account_type,
        )
        self._linked_accounts.append(account)
        self._updated_at = utc_now()
        return account

    @classmethod
    def register_with_password(
        cls,
        name: str,
        email: Union[str, Email],
        password_hash: str,
    ) -> "User":
        """Create a password user with its synthetic credentials account.

        The credentials account points back at the user itself: its
        provider account id is the user's own id.
        """
        user = cls(email=email, name=name, password_hash=password_hash)
        user.link_account(
            ProviderKind.CREDENTIALS,
            str(user.id),
            account_type=AccountType.CREDENTIALS,
        )
        return user

    @classmethod
    def register_from_provider(
        cls,
        email: Union[str, Email],
        name: str | None,
        provider: Union[str, ProviderKind],
        provider_account_id: str,
    ) -> "User":
        """Create an OAuth-only user (no password) linked to ``provider``."""
        user = cls(email=email, name=name)
        user.link_account(provider, provider_account_id, AccountType.OAUTH)
        return user

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        email: Union[str, Email],
        name: str | None,
        password_hash: str | None,
        linked_accounts: Iterable[LinkedAccount],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            name=name,
            password_hash=password_hash,
            linked_accounts=linked_accounts,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
