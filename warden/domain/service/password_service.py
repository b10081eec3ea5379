"""Password hashing domain service using bcrypt."""

import secrets

import bcrypt

from warden.domain.error import ValidationError

from .base import Service

# bcrypt only considers the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


class PasswordService(Service):
    """Hashes and verifies passwords.

    Passwords are never compared in plaintext: ``verify`` re-hashes the
    candidate with the stored salt and compares in constant time.
    """

    def __init__(self, rounds: int = 12) -> None:
        """Initialize password service.

        Args:
            rounds: bcrypt work factor (log2 of iterations)
        """
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a plaintext password with a fresh salt.

        Args:
            password: Plaintext password

        Returns:
            bcrypt hash string

        Raises:
            ValidationError: If the password is empty or too long for bcrypt
        """
        if not password:
            raise ValidationError("Password cannot be empty")
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"Password cannot exceed {MAX_PASSWORD_BYTES} bytes"
            )
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(encoded, salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a candidate password against a stored hash.

        Returns False for any mismatch. A malformed stored hash is a
        programming error and raises ValueError from bcrypt.

        Args:
            password: Candidate plaintext password
            password_hash: Stored bcrypt hash

        Returns:
            True if the password matches
        """
        encoded = password.encode("utf-8")
        if not encoded or len(encoded) > MAX_PASSWORD_BYTES:
            # Never hashed, so it cannot match
            return False
        return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))

    def random_password(self) -> str:
        """Generate a throwaway password for accounts created via OAuth."""
        return secrets.token_hex(16)
