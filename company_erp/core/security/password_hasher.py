"""
Password hashing and verification utilities.

Provides one-way password hashing using bcrypt with configurable rounds.
"""

import logging

import bcrypt

logger = logging.getLogger(__name__)


class PasswordHasher:
    """
    Handle password hashing and verification using bcrypt.

    Registration hashes explicitly through this class before the employee
    row is written; nothing hashes implicitly on save.
    """

    DEFAULT_ROUNDS = 10
    # bcrypt reads at most 72 bytes of input.
    MAX_PASSWORD_BYTES = 72
    MIN_ROUNDS = 4
    MAX_ROUNDS = 31

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        """
        Initialize password hasher.

        Args:
            rounds: Number of bcrypt rounds (4-31, default 10)

        Raises:
            ValueError: If rounds is outside valid range
        """
        if not (self.MIN_ROUNDS <= rounds <= self.MAX_ROUNDS):
            raise ValueError(
                f"Rounds must be between {self.MIN_ROUNDS} and {self.MAX_ROUNDS}, got {rounds}"
            )
        self.rounds = rounds

    def _encode(self, password: str) -> bytes:
        return password.encode('utf-8')[:self.MAX_PASSWORD_BYTES]

    def hash(self, password: str) -> str:
        """
        Hash a password with a fresh salt.

        Raises:
            ValueError: If password is empty
            TypeError: If password is not a string
        """
        if not isinstance(password, str):
            raise TypeError("Password must be a string")
        if not password:
            raise ValueError("Password cannot be empty")

        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(self._encode(password), salt).decode('utf-8')

    def verify(self, password: str, hashed_password: str) -> bool:
        """
        Verify a password against its hash.

        Returns False for empty input or an unparseable hash.
        """
        if not password or not hashed_password:
            return False

        try:
            return bcrypt.checkpw(
                self._encode(password),
                hashed_password.encode('utf-8')
            )
        except ValueError as e:
            logger.warning(f"Error verifying password: {e}")
            return False
