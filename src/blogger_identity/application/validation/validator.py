"""Input validator: raw form payloads in, typed data or field errors out."""

from dataclasses import dataclass, field
from typing import Any, Generic, Mapping, TypeVar

from pydantic import BaseModel, ValidationError

from blogger_identity.application.validation.schemas import LoginData, SignupData

PASSWORDS_DO_NOT_MATCH = "Passwords do not match!"

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Outcome of validating one submission.

    Exactly one of ``data`` and ``errors`` is meaningful: ``data`` when
    ``success`` is true, otherwise ``errors`` maps each failed field to
    its single message.
    """

    success: bool
    data: T | None = None
    errors: dict[str, str] = field(default_factory=dict)

    @classmethod
    def ok(cls, data: T) -> "ValidationResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def failed(cls, errors: dict[str, str]) -> "ValidationResult[T]":
        return cls(success=False, errors=errors)


def first_error_per_field(
    error: ValidationError,
    model: type[BaseModel],
) -> dict[str, str]:
    """Collapse pydantic errors to the first message of each field.

    Errors are keyed by the wire name (the alias) of each field.
    """
    aliases = {
        name: info.alias or name for name, info in model.model_fields.items()
    }
    errors: dict[str, str] = {}
    for issue in error.errors():
        loc = issue.get("loc") or ("",)
        field_name = aliases.get(str(loc[0]), str(loc[0]))
        errors.setdefault(field_name, issue["msg"])
    return errors


def validate_login(payload: Mapping[str, Any]) -> ValidationResult[LoginData]:
    try:
        return ValidationResult.ok(LoginData.model_validate(dict(payload)))
    except ValidationError as e:
        return ValidationResult.failed(first_error_per_field(e, LoginData))


def validate_signup(payload: Mapping[str, Any]) -> ValidationResult[SignupData]:
    """Validate a signup payload.

    The password confirmation is compared against the raw password even
    when the password itself is invalid, and the mismatch is reported on
    ``confirmPassword``.
    """
    raw = dict(payload)
    errors: dict[str, str] = {}
    data: SignupData | None = None

    try:
        data = SignupData.model_validate(raw)
    except ValidationError as e:
        errors = first_error_per_field(e, SignupData)

    if "confirmPassword" not in errors and raw.get("confirmPassword") != raw.get(
        "password",
    ):
        errors["confirmPassword"] = PASSWORDS_DO_NOT_MATCH

    if errors or data is None:
        return ValidationResult.failed(errors)
    return ValidationResult.ok(data)
