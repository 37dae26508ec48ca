"""Password hashing protocol.

The seeder never stores plaintext: the initial administrator password is
hashed through this port before the user entity is built.
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Implementations:
        - BcryptPasswordService: bcrypt (default)

    Usage:
        password_hash = password_service.hash_password(settings.admin_initial_password)
        assert password_service.verify_password("admin", password_hash)
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password.

        Returns:
            Salted one-way hash. Equal inputs produce different hashes.
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a hash.

        Args:
            password: Plaintext password to check.
            password_hash: Stored hash.

        Returns:
            True on match; False on mismatch or malformed hash.
        """
        ...
