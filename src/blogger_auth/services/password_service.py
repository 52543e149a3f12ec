"""Password hashing service using bcrypt.

Provides salted password hashing and verification with a configurable
work factor. The async variants push the bcrypt computation onto a
worker thread so that concurrent sign-ins do not queue behind it.
"""

import asyncio

import bcrypt

from blogger_auth.exceptions import WeakPasswordError


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses bcrypt for password hashing with configurable work factor.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> hash = service.hash("My_secure_pa55word")
    >>> service.verify("My_secure_pa55word", hash)
    True
    >>> service.verify("wrong_password", hash)
    False
    """

    # bcrypt silently ignores everything past 72 bytes of input
    MAX_BYTES = 72

    def __init__(self, rounds: int = 10):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 10.
            Higher values are more secure but slower.
        """
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The bcrypt hash as a string

        Raises
        ------
        WeakPasswordError
            If password is empty or too long for bcrypt
        """
        self.validate_hashable(password)
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a hash.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The bcrypt hash to verify against

        Returns
        -------
        True if password matches, False otherwise
        """
        if not password or not password_hash:
            return False
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            # Invalid hash format or over-long input
            return False

    async def hash_async(self, password: str) -> str:
        return await asyncio.to_thread(self.hash, password)

    async def verify_async(self, password: str, password_hash: str) -> bool:
        return await asyncio.to_thread(self.verify, password, password_hash)

    def validate_hashable(self, password: str) -> None:
        """Validate that a password can be hashed without truncation.

        Strength rules (length, character classes) belong to the input
        validator; this only guards what bcrypt itself cannot handle.

        Raises
        ------
        WeakPasswordError
            If password is empty or exceeds 72 bytes once UTF-8 encoded
        """
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password.encode("utf-8")) > self.MAX_BYTES:
            msg = f"Password cannot exceed {self.MAX_BYTES} bytes"
            raise WeakPasswordError(msg)

    def needs_rehash(self, password_hash: str) -> bool:
        """Check if a password hash needs to be rehashed.

        After changing the rounds setting, existing hashes can be
        identified for rehashing on next login.

        Parameters
        ----------
        password_hash
            The existing hash to check

        Returns
        -------
        True if the hash should be regenerated
        """
        try:
            # bcrypt format: $2b$XX$...
            parts = password_hash.split("$")
            if len(parts) >= 3:
                current_rounds = int(parts[2])
                return current_rounds != self._rounds
        except (ValueError, IndexError):
            pass
        return True
