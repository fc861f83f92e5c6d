"""Password Hasher Interface

Contract for the single strong password hashing implementation.
"""

from abc import abstractmethod
from typing import Protocol


class IPasswordHasher(Protocol):
    """Produces and checks password hashes in their encoded string form."""

    @abstractmethod
    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Returns:
            Encoded hash including algorithm, parameters and salt
        """
        ...

    @abstractmethod
    def verify_password(self, password_hash: str, password: str) -> bool:
        """Check a plaintext password against an encoded hash."""
        ...

    @abstractmethod
    def needs_rehash(self, password_hash: str) -> bool:
        """Check if a hash was produced with outdated parameters."""
        ...
