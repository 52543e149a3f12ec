"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Union
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from blogger.domain.shared.time import ensure_tz_aware
from blogger_identity.domain.user import (
    AccountAlreadyLinkedError,
    Email,
    EmailAlreadyExistsError,
    LinkedAccount,
    ProviderKind,
    User,
    UserRepository,
)
from blogger_identity.infrastructure.persistence.sqlalchemy.models import (
    LinkedAccountModel,
    UserModel,
)

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(self, email: Union[str, Email]) -> User | None:
        email_value = email.value if isinstance(email, Email) else Email(email).value

        stmt = select(UserModel).where(UserModel.email == email_value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_linked_account(
        self,
        provider: Union[str, ProviderKind],
        provider_account_id: str,
    ) -> User | None:
        kind = ProviderKind.parse(provider)
        stmt = (
            select(UserModel)
            .join(LinkedAccountModel, LinkedAccountModel.user_id == UserModel.id)
            .where(
                LinkedAccountModel.provider == kind.value,
                LinkedAccountModel.provider_account_id == provider_account_id,
            )
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        user = await self.find_by_email(email)
        return user is not None

    async def create(self, user: User) -> None:
        model = self._map_to_model(user)
        self._session.add(model)

        try:
            await self._session.flush()
        except IntegrityError as e:
            message = str(e.orig).lower()
            if "email" in message:
                raise EmailAlreadyExistsError(user.email) from e
            if "provider" in message and user.linked_accounts:
                account = user.linked_accounts[0]
                raise AccountAlreadyLinkedError(
                    account.provider.value,
                    account.provider_account_id,
                ) from e
            raise

        logger.info(
            "Created user: %s (email: %s, providers: %s)",
            user.id,
            user.email,
            ", ".join(a.provider.value for a in user.linked_accounts) or "none",
        )

    def _map_to_domain(self, model: UserModel) -> User:
        accounts = [
            LinkedAccount(
                id=account.id,
                user_id=account.user_id,
                provider=account.provider,
                provider_account_id=account.provider_account_id,
                account_type=account.type,
                created_at=ensure_tz_aware(account.created_at),
            )
            for account in model.accounts
        ]
        return User.reconstitute(
            id=model.id,
            email=model.email,
            name=model.name,
            password_hash=model.password_hash,
            linked_accounts=accounts,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            email=user.email,
            name=user.name,
            password_hash=user.password_hash,
            created_at=user.created_at,
            updated_at=user.updated_at,
            accounts=[
                LinkedAccountModel(
                    id=account.id,
                    user_id=user.id,
                    provider=account.provider.value,
                    provider_account_id=account.provider_account_id,
                    type=account.account_type.value,
                    created_at=account.created_at,
                )
                for account in user.linked_accounts
            ],
        )
