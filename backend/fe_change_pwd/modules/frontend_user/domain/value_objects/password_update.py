"""
Password Update Value Object

Column values written to the user record after an accepted password change.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PasswordUpdate:
    """Values persisted by a successful password change."""

    password: str
    password_expiry_date: int
    updated_at: int
    must_change_password: bool = False

    def __post_init__(self) -> None:
        if not self.password:
            raise ValueError("Password hash is required")
        if self.password_expiry_date < 0:
            raise ValueError("Password expiry date cannot be negative")

    def __repr__(self) -> str:
        return (
            f"PasswordUpdate(password='***', password_expiry_date={self.password_expiry_date}, "
            f"updated_at={self.updated_at}, must_change_password={self.must_change_password})"
        )
