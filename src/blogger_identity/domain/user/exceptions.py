"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""


class InvalidEmailError(ValueError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class EmailAlreadyExistsError(Exception):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Email already registered: {email}")


class AccountAlreadyLinkedError(Exception):
    """A provider identity is already linked (to this or another user)."""

    def __init__(self, provider: str, provider_account_id: str) -> None:
        self.provider = provider
        self.provider_account_id = provider_account_id
        super().__init__(
            f"Account already linked: {provider}/{provider_account_id}",
        )
