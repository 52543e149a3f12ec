"""Result of a form submission (login or signup)."""

from dataclasses import dataclass, field

GENERIC_API_ERROR = "Something went wrong!"


@dataclass(frozen=True)
class AuthResult:
    """Outcome of ``submit_login`` or ``submit_signup``.

    Attributes
    ----------
    success
        True when the submission was accepted
    errors
        Field-to-message mapping, one message per field
    api_error
        Opaque message for faults that are not attributable to a field
    session_token
        Signed session token when the submission signed the user in
    """

    success: bool
    errors: dict[str, str] = field(default_factory=dict)
    api_error: str | None = None
    session_token: str | None = None

    @classmethod
    def ok(cls, session_token: str | None = None) -> "AuthResult":
        return cls(success=True, session_token=session_token)

    @classmethod
    def field_errors(cls, errors: dict[str, str]) -> "AuthResult":
        return cls(success=False, errors=dict(errors))

    @classmethod
    def field_error(cls, field_name: str, message: str) -> "AuthResult":
        return cls(success=False, errors={field_name: message})

    @classmethod
    def failure(cls, api_error: str = GENERIC_API_ERROR) -> "AuthResult":
        return cls(success=False, api_error=api_error)
