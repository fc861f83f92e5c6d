"""
Password Expiry Rule

Schedules the expiry of newly set passwords.
"""

from fe_change_pwd.core.config import SECONDS_PER_DAY, PasswordExpirationConfig


class DaysPasswordExpiryPolicy:
    """Passwords expire a fixed number of days after they were set."""

    def __init__(self, enabled: bool = False, validity_in_days: int = 0) -> None:
        self._enabled = enabled
        self._validity_in_days = validity_in_days

    @classmethod
    def from_config(cls, config: PasswordExpirationConfig) -> "DaysPasswordExpiryPolicy":
        return cls(enabled=config.enabled, validity_in_days=config.validity_in_days)

    @property
    def is_enabled(self) -> bool:
        return self._enabled and self._validity_in_days > 0

    def next_expiry_timestamp(self, now: int) -> int:
        """Expiry timestamp for a password set at ``now``; 0 when disabled."""
        if not self.is_enabled:
            return 0
        return now + self._validity_in_days * SECONDS_PER_DAY
