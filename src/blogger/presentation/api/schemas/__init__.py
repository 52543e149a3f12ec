from blogger.presentation.api.schemas.auth import (
    AuthResultResponse,
    SessionResponse,
    SessionUserResponse,
    SignOutResponse,
)

__all__ = [
    "AuthResultResponse",
    "SessionResponse",
    "SessionUserResponse",
    "SignOutResponse",
]
