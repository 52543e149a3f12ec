"""Blogger Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the blog's user domain. It handles:
- Password hashing (bcrypt)
- Session and OAuth state token signing (JWT)

Architecture:
    blogger_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from blogger_auth import PasswordHashingService, JWTService
"""

from blogger_auth.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)
from blogger_auth.schemas import TokenPayload
from blogger_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "WeakPasswordError",
    "InvalidCredentialsError",
]
