"""Sign-in provider value objects."""

from enum import Enum


class ProviderKind(str, Enum):
    """Identity-verification methods a user can sign in with."""

    CREDENTIALS = "credentials"
    GOOGLE = "google"
    GITHUB = "github"

    @property
    def is_oauth(self) -> bool:
        return self is not ProviderKind.CREDENTIALS

    @classmethod
    def parse(cls, value: "str | ProviderKind") -> "ProviderKind":
        """Parse a provider name, case-insensitively.

        Raises
        ------
        ValueError
            If the name does not match a known provider
        """
        if isinstance(value, ProviderKind):
            return value
        return cls(value.strip().lower())


class AccountType(str, Enum):
    """How a linked account was established."""

    CREDENTIALS = "credentials"
    OAUTH = "oauth"
