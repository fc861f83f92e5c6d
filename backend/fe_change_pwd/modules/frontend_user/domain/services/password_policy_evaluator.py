"""
Password Policy Evaluator

Decides whether a frontend user has to change their password before
continuing.
"""

from ..entities.user_record import UserRecord
from ..enums import PasswordChangeReason
from ..interfaces.services.clock import IClock


class PasswordPolicyEvaluator:
    """Evaluates the forced-change flag and password expiry of a user record."""

    def __init__(self, clock: IClock) -> None:
        self._clock = clock

    def must_change_password(self, user: UserRecord) -> bool:
        return self.password_change_reason(user) is not None

    def password_change_reason(self, user: UserRecord) -> PasswordChangeReason | None:
        """
        Reason the user has to change their password, if any.

        A set forced-change flag wins over an elapsed expiry date. An expiry
        date of 0 means no expiry applies.
        """
        if user.must_change_password:
            return PasswordChangeReason.FORCED

        expiry = user.password_expiry_date
        if expiry > 0 and expiry < self._clock.now():
            return PasswordChangeReason.EXPIRED

        return None
