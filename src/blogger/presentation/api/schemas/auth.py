"""Authentication schemas for request/response models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from blogger_identity.application import AuthResult, SessionContext


class AuthResultResponse(BaseModel):
    """Outcome of a login or signup submission.

    ``errors`` maps field names to one message each; ``apiError`` is set
    only for faults not attributable to a field.
    """

    success: bool
    errors: dict[str, str] | None = None
    api_error: str | None = Field(default=None, alias="apiError")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "success": False,
                "errors": {"email": "This email doesn't exist here!"},
            },
        },
    )

    @classmethod
    def from_result(cls, result: AuthResult) -> "AuthResultResponse":
        return cls(
            success=result.success,
            errors=result.errors or None,
            api_error=result.api_error,
        )

    def to_content(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class SessionUserResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    email: str
    name: str | None = None


class SessionResponse(BaseModel):
    """The signed-in session as seen by clients."""

    user: SessionUserResponse
    expires: str

    @classmethod
    def from_context(cls, context: SessionContext) -> "SessionResponse":
        return cls.model_validate(context.to_dict())


class SignOutResponse(BaseModel):
    success: bool = True
