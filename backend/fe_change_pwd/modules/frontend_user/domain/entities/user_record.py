"""
User Record Entity

The slice of the host's frontend user row that password change logic reads.
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from ..constants import UserTable
from ..value_objects.password_update import PasswordUpdate


def _as_int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


@dataclass
class UserRecord:
    """
    Frontend user record owned by the host record store.

    ``password_expiry_date`` and ``updated_at`` are unix timestamps;
    a ``password_expiry_date`` of 0 means no expiry applies.
    """

    uid: int
    must_change_password: bool = False
    password_expiry_date: int = 0
    password: str = ""
    updated_at: int = 0

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "UserRecord":
        """
        Build a record from a host row using the fe_users column names.

        Missing or empty columns are read as zero/false.
        """
        return cls(
            uid=_as_int(row.get(UserTable.UID)),
            must_change_password=bool(_as_int(row.get(UserTable.MUST_CHANGE_PASSWORD))),
            password_expiry_date=_as_int(row.get(UserTable.PASSWORD_EXPIRY_DATE)),
            password=row.get(UserTable.PASSWORD) or "",
            updated_at=_as_int(row.get(UserTable.TSTAMP)),
        )

    def with_update(self, update: PasswordUpdate) -> "UserRecord":
        """Return a copy reflecting a persisted password update."""
        return replace(
            self,
            password=update.password,
            must_change_password=update.must_change_password,
            password_expiry_date=update.password_expiry_date,
            updated_at=update.updated_at,
        )

    def __repr__(self) -> str:
        return (
            f"UserRecord(uid={self.uid}, must_change_password={self.must_change_password}, "
            f"password_expiry_date={self.password_expiry_date})"
        )
