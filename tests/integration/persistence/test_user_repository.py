"""Integration tests for UserRepositorySQLAlchemy."""

import pytest

from blogger_identity.domain.user import (
    AccountAlreadyLinkedError,
    EmailAlreadyExistsError,
    ProviderKind,
    User,
)
from blogger_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

pytestmark = pytest.mark.integration


class TestUserRepository:
    async def test_create_and_find_password_user(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        user = User.register_with_password("Jane Doe", "Jane@Example.com", "hash")

        await repo.create(user)
        await db_session.commit()

        found = await repo.find_by_email("jane@example.com")
        assert found is not None
        assert found.id == user.id
        assert found.name == "Jane Doe"
        assert found.password_hash == "hash"
        assert found.is_linked_to(ProviderKind.CREDENTIALS)
        assert found.created_at.tzinfo is not None

    async def test_find_by_id(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        user = User.register_from_provider("dev@example.com", "Dev", "github", "42")
        await repo.create(user)

        found = await repo.find_by_id(user.id)

        assert found is not None
        assert found.password_hash is None
        assert not found.has_password

    async def test_find_by_linked_account(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        user = User.register_from_provider("dev@example.com", "Dev", "google", "g-1")
        await repo.create(user)

        found = await repo.find_by_linked_account(ProviderKind.GOOGLE, "g-1")
        missing = await repo.find_by_linked_account(ProviderKind.GITHUB, "g-1")

        assert found == user
        assert missing is None

    async def test_exists_by_email(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        await repo.create(User.register_with_password("A", "a@example.com", "hash"))

        assert await repo.exists_by_email("A@example.com")
        assert not await repo.exists_by_email("b@example.com")

    async def test_duplicate_email_raises(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        await repo.create(User.register_with_password("A", "a@example.com", "hash"))
        await db_session.commit()

        with pytest.raises(EmailAlreadyExistsError):
            await repo.create(User.register_with_password("B", "a@example.com", "hash"))

    async def test_duplicate_provider_account_raises(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        await repo.create(
            User.register_from_provider("a@example.com", "A", "github", "42"),
        )
        await db_session.commit()

        with pytest.raises(AccountAlreadyLinkedError):
            await repo.create(
                User.register_from_provider("b@example.com", "B", "github", "42"),
            )
