"""Login and signup payload schemas.

Each field validator applies its checks in a fixed order and raises on
the first failure, so a field never carries more than one message.
Field names on the wire are the form's names (``confirmPassword``).
"""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from blogger_identity.domain.user.value_objects import is_valid_email

NAME_CHARSET_PATTERN = re.compile(r"[A-Za-z ]*")
NAME_SHAPE_PATTERN = re.compile(r"[A-Za-z]+(?: [A-Za-z]+)*")
PASSWORD_COMPLEXITY_PATTERN = re.compile(
    r"(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[^A-Za-z0-9]).+",
)

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 20


def _fail(message: str) -> PydanticCustomError:
    return PydanticCustomError("form_field", message)


class _FormPayload(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        validate_default=True,
    )

    @field_validator("*", mode="before")
    @classmethod
    def _missing_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class LoginData(_FormPayload):
    """Credentials submitted on the login form."""

    email: str = ""
    password: str = ""

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        if not value:
            raise _fail("Email is required!")
        if not is_valid_email(value):
            raise _fail("Invalid email!")
        return value

    @field_validator("password")
    @classmethod
    def _check_password(cls, value: str) -> str:
        if not value:
            raise _fail("Password is required!")
        return value


class SignupData(_FormPayload):
    """Account details submitted on the signup form."""

    name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = Field(default="", alias="confirmPassword")

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not value:
            raise _fail("Name is required!")
        if not NAME_CHARSET_PATTERN.fullmatch(value):
            raise _fail("Only alphabets and spaces allowed")
        if not NAME_SHAPE_PATTERN.fullmatch(value):
            raise _fail("Name must only contain letters and single spaces between")
        return value

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        if not value:
            raise _fail("Email is required")
        if not is_valid_email(value):
            raise _fail("Invalid Email")
        return value

    @field_validator("password")
    @classmethod
    def _check_password(cls, value: str) -> str:
        if len(value) < PASSWORD_MIN_LENGTH:
            raise _fail("Password is too short!")
        if len(value) > PASSWORD_MAX_LENGTH:
            raise _fail("Password is too long!")
        if not PASSWORD_COMPLEXITY_PATTERN.fullmatch(value):
            raise _fail(
                "Password must contain at least one uppercase and lowercase "
                "letter, digit, and special character",
            )
        return value

    @field_validator("confirm_password")
    @classmethod
    def _check_confirm_password(cls, value: str) -> str:
        if not value:
            raise _fail("Confirm password is required!")
        return value
