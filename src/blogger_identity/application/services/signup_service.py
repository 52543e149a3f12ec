"""Signup: validate, check uniqueness, hash and store a new user."""

import logging
from typing import Any, Mapping

from blogger_auth import PasswordHashingService, WeakPasswordError
from blogger_identity.application.results import AuthResult
from blogger_identity.application.validation import validate_signup
from blogger_identity.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserRepository,
)

logger = logging.getLogger(__name__)

EMAIL_ALREADY_EXISTS = "This email already exists!"
PASSWORD_TOO_LONG = "Password is too long!"


class SignupService:
    """
    Application service behind the signup form.

    A successful signup stores the user and its credentials account but
    does not sign the user in.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service

    async def submit_signup(self, payload: Mapping[str, Any]) -> AuthResult:
        validation = validate_signup(payload)
        if not validation.success or validation.data is None:
            return AuthResult.field_errors(validation.errors)

        data = validation.data
        try:
            if await self._user_repo.exists_by_email(data.email):
                return AuthResult.field_error("email", EMAIL_ALREADY_EXISTS)

            password_hash = await self._password_service.hash_async(data.password)
            user = User.register_with_password(
                name=data.name,
                email=data.email,
                password_hash=password_hash,
            )
            await self._user_repo.create(user)
        except EmailAlreadyExistsError:
            # Another signup with the same email committed first
            return AuthResult.field_error("email", EMAIL_ALREADY_EXISTS)
        except WeakPasswordError:
            return AuthResult.field_error("password", PASSWORD_TOO_LONG)
        except Exception:
            logger.exception("Unexpected error during signup")
            return AuthResult.failure()

        logger.info("User registered: %s", user.email)
        return AuthResult.ok()
