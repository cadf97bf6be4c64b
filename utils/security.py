import logging
import secrets
from passlib.context import CryptContext

from errors import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_BCRYPT_ROUNDS = 10

# bcrypt ignores everything past the first 72 bytes of a secret
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """One-way salted password hashing backed by passlib's bcrypt scheme"""

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self.rounds = rounds
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        if _too_long(password):
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """
        Check a plaintext candidate against a stored hash

        Args:
            password: Candidate plaintext
            password_hash: Digest produced by hash()

        Returns:
            True if the candidate matches, False otherwise (including for
            digests this context cannot parse and candidates longer than
            bcrypt can compare)
        """
        if _too_long(password):
            return False

        try:
            return self._context.verify(password, password_hash)
        except (ValueError, TypeError):
            logger.warning("Stored password hash could not be parsed")
            return False


def _too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


def generate_session_token() -> str:
    """Generate an unguessable session token"""
    return secrets.token_urlsafe(32)
