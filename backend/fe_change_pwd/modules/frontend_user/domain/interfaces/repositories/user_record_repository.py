"""User Record Repository Interface

Domain contract for the host's frontend user record store.
"""

from abc import abstractmethod
from typing import Protocol

from ...entities.user_record import UserRecord
from ...value_objects.password_update import PasswordUpdate


class IUserRecordRepository(Protocol):
    """Repository interface for frontend user records."""

    @abstractmethod
    def find_by_id(self, uid: int) -> UserRecord | None:
        """Find a user record by its unique identifier.

        Args:
            uid: User record identifier

        Returns:
            The record if found, None otherwise
        """
        ...

    @abstractmethod
    def apply_password_update(self, uid: int, password_update: PasswordUpdate) -> int:
        """Write password change values to the record with the given id.

        Args:
            uid: User record identifier
            password_update: Column values to write

        Returns:
            Number of records affected by the update
        """
        ...
