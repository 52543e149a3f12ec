"""Schema-based validation of login and signup payloads."""

from blogger_identity.application.validation.schemas import LoginData, SignupData
from blogger_identity.application.validation.validator import (
    PASSWORDS_DO_NOT_MATCH,
    ValidationResult,
    validate_login,
    validate_signup,
)

__all__ = [
    "PASSWORDS_DO_NOT_MATCH",
    "LoginData",
    "SignupData",
    "ValidationResult",
    "validate_login",
    "validate_signup",
]
