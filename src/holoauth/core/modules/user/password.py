import bcrypt

from holoauth.errors import HashingError

# bcrypt cannot hash more than 72 bytes of input
BCRYPT_MAX_BYTES = 72


class PasswordHasher:
    """One-way password hashing with bcrypt."""

    def __init__(self, rounds: int = 12) -> None:
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a password with a fresh salt.

        Raises:
            HashingError: If the password is longer than 72 bytes or bcrypt fails
        """
        encoded = password.encode("utf-8")
        if len(encoded) > BCRYPT_MAX_BYTES:
            raise HashingError("Password exceeds 72 bytes")
        try:
            return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self.rounds)).decode("utf-8")
        except (ValueError, OSError) as e:
            raise HashingError("Failed to hash password") from e

    def verify(self, password_hash: str, password: str) -> bool:
        """Check a password against a stored hash in constant time.

        Returns False for a mismatch, a malformed hash, and a password
        too long to have been hashed.
        """
        encoded = password.encode("utf-8")
        if len(encoded) > BCRYPT_MAX_BYTES:
            return False
        try:
            return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
        except ValueError:
            return False
