"""Auth services - JWT and password hashing."""

from blogger_auth.services.jwt_service import JWTService
from blogger_auth.services.password_service import PasswordHashingService

__all__ = [
    "JWTService",
    "PasswordHashingService",
]
