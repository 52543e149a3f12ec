"""Auth schemas and data structures.

These are simple data classes used for transferring token data
between components.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded session token payload.

    This represents the data extracted from a verified JWT token.

    Attributes
    ----------
    user_id
        The unique identifier of the user
    email
        The user's email address
    exp
        Token expiration timestamp
    token_type
        Either "session" or "oauth_state"
    name
        The user's display name, if any
    claims
        Every non-reserved claim carried by the token, including
        claims merged in through a session update
    """

    user_id: UUID
    email: str
    exp: datetime
    token_type: str
    name: str | None = None
    claims: dict[str, Any] = field(default_factory=dict)

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.exp.tzinfo) > self.exp

    def is_session_token(self) -> bool:
        return self.token_type == "session"
