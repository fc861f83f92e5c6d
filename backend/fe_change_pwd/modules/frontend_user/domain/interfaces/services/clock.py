"""Clock Interface"""

from abc import abstractmethod
from typing import Protocol


class IClock(Protocol):
    """Source of the current time as a unix timestamp."""

    @abstractmethod
    def now(self) -> int:
        """Current time in whole seconds since the epoch."""
        ...
