"""Password hashing service using bcrypt.

Provides salted, deliberately slow one-way digests and constant-time
verification.
"""

import logging

import bcrypt

from todolist_auth.exceptions import PasswordHashingError, WeakPasswordError

logger = logging.getLogger(__name__)


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses bcrypt with a configurable work factor. The salt and the cost
    are embedded in every digest, so verification needs nothing else.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> digest = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", digest)
    True
    >>> service.verify("wrong_password", digest)
    False
    """

    DEFAULT_ROUNDS = 10
    # bcrypt only looks at the first 72 bytes of its input
    MAX_BYTES = 72

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 10,
            which keeps interactive logins well below 200ms.
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
            If password doesn't meet requirements
        PasswordHashingError
            If no random salt could be generated
        """
        self.validate_strength(password)
        try:
            salt = bcrypt.gensalt(rounds=self._rounds)
        except (OSError, NotImplementedError) as e:
            logger.error("Random source unavailable for password salt: %s", e)
            raise PasswordHashingError from e

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

    def validate_strength(self, password: str) -> None:
        """Validate that a password can be hashed.

        Current requirements:
        - Not empty
        - At most 72 bytes once UTF-8 encoded

        Parameters
        ----------
        password
            The password to validate

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password.encode("utf-8")) > self.MAX_BYTES:
            msg = f"Password cannot exceed {self.MAX_BYTES} bytes"
            raise WeakPasswordError(msg)

    def needs_rehash(self, password_hash: str) -> bool:
        """Check if a password hash was made with a different work factor.

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
