"""Unit tests for the User aggregate."""

import pytest

from blogger_identity.domain.user import (
    AccountAlreadyLinkedError,
    AccountType,
    ProviderKind,
    User,
)


class TestRegisterWithPassword:
    def test_creates_self_referential_credentials_account(self):
        user = User.register_with_password("Jane Doe", "Jane@Example.com", "hash")

        assert user.email == "jane@example.com"
        assert user.has_password
        assert len(user.linked_accounts) == 1

        account = user.linked_accounts[0]
        assert account.provider is ProviderKind.CREDENTIALS
        assert account.account_type is AccountType.CREDENTIALS
        assert account.provider_account_id == str(user.id)
        assert account.user_id == user.id


class TestRegisterFromProvider:
    def test_creates_passwordless_user_linked_to_provider(self):
        user = User.register_from_provider(
            email="dev@example.com",
            name="Dev",
            provider="github",
            provider_account_id="4242",
        )

        assert not user.has_password
        assert user.password_hash is None
        assert user.is_linked_to(ProviderKind.GITHUB)
        assert not user.is_linked_to("google")
        assert user.linked_accounts[0].account_type is AccountType.OAUTH


class TestLinkAccount:
    def test_second_account_for_same_provider_is_rejected(self):
        user = User.register_from_provider("dev@example.com", None, "google", "g-1")

        with pytest.raises(AccountAlreadyLinkedError):
            user.link_account("google", "g-2")

    def test_accounts_for_different_providers(self):
        user = User.register_from_provider("dev@example.com", None, "google", "g-1")

        user.link_account("github", "gh-1")

        assert user.is_linked_to("google")
        assert user.is_linked_to("github")

    def test_unknown_provider_is_rejected(self):
        user = User("dev@example.com")

        with pytest.raises(ValueError):
            user.link_account("myspace", "1")


class TestProviderKind:
    def test_parse_is_case_insensitive(self):
        assert ProviderKind.parse(" GitHub ") is ProviderKind.GITHUB

    def test_credentials_is_not_oauth(self):
        assert not ProviderKind.CREDENTIALS.is_oauth
        assert ProviderKind.GOOGLE.is_oauth
