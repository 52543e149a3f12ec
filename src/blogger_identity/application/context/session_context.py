"""Session context for the request-scoped signed-in user."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any
from uuid import UUID

if TYPE_CHECKING:
    from blogger_auth import TokenPayload


@dataclass(frozen=True)
class SessionContext:
    """Immutable view of a verified session token."""

    user_id: UUID
    email: str
    expires: datetime
    name: str | None = None
    claims: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_token_payload(cls, payload: TokenPayload) -> SessionContext:
        return cls(
            user_id=payload.user_id,
            email=payload.email,
            expires=payload.exp,
            name=payload.name,
            claims=dict(payload.claims),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize as the session document returned to clients.

        Merged claims are echoed next to the profile claims on ``user``;
        ``id``, ``email`` and ``name`` always reflect the token itself.
        """
        user = {
            **self.claims,
            "id": str(self.user_id),
            "email": self.email,
            "name": self.name,
        }
        return {"user": user, "expires": self.expires.isoformat()}

    def __str__(self) -> str:
        return f"SessionContext({self.email})"

    def __repr__(self) -> str:
        return f"SessionContext(user_id={self.user_id}, email={self.email!r})"
