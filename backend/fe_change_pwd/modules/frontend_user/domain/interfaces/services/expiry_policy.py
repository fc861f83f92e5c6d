"""Password Expiry Policy Interface"""

from abc import abstractmethod
from typing import Protocol


class IPasswordExpiryPolicy(Protocol):
    """Decides when a newly set password expires."""

    @abstractmethod
    def next_expiry_timestamp(self, now: int) -> int:
        """Expiry timestamp for a password set at ``now``; 0 disables expiry."""
        ...
