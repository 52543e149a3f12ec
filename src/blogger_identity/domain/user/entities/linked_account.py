"""LinkedAccount entity: a user's identity at one sign-in provider."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from blogger.domain.shared.time import utc_now
from blogger_identity.domain.user.value_objects import AccountType, ProviderKind


class LinkedAccount:
    """Association between a User and one provider's external identity.

    A user holds at most one linked account per provider; the aggregate
    enforces this when accounts are attached.
    """

    def __init__(
        self,
        user_id: UUID,
        provider: Union[str, ProviderKind],
        provider_account_id: str,
        account_type: Union[str, AccountType],
        id: UUID | None = None,
        created_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._user_id = user_id
        self._provider = ProviderKind.parse(provider)
        self._provider_account_id = provider_account_id
        self._account_type = (
            account_type
            if isinstance(account_type, AccountType)
            else AccountType(account_type)
        )
        self._created_at = created_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def provider(self) -> ProviderKind:
        return self._provider

    @property
    def provider_account_id(self) -> str:
        return self._provider_account_id

    @property
    def account_type(self) -> AccountType:
        return self._account_type

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedAccount):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"LinkedAccount(provider={self._provider.value}, "
            f"provider_account_id={self._provider_account_id})"
        )
