"""
Password Updater

Persists an accepted password change on the user's record.
"""

from fe_change_pwd.core.errors import PersistenceError
from fe_change_pwd.core.logging import get_logger

from ..entities.user_record import UserRecord
from ..interfaces.repositories.user_record_repository import IUserRecordRepository
from ..interfaces.services.clock import IClock
from ..interfaces.services.expiry_policy import IPasswordExpiryPolicy
from ..interfaces.services.password_hasher import IPasswordHasher
from ..value_objects.password_update import PasswordUpdate

logger = get_logger(__name__)


class PasswordUpdater:
    """
    Hashes and stores a new password.

    The stored record gets the new hash, a cleared forced-change flag, the
    next expiry date from the expiry policy and a fresh modification time.
    The password must already have passed complexity validation.
    """

    def __init__(
        self,
        repository: IUserRecordRepository,
        password_hasher: IPasswordHasher,
        expiry_policy: IPasswordExpiryPolicy,
        clock: IClock,
    ) -> None:
        self._repository = repository
        self._password_hasher = password_hasher
        self._expiry_policy = expiry_policy
        self._clock = clock

    def update_password(self, user: UserRecord, new_password: str) -> UserRecord:
        """
        Update the password of ``user``.

        Returns:
            The user record as it now exists in the store

        Raises:
            PersistenceError: If the update did not affect exactly one record
        """
        update = self.build_update(new_password)
        affected_rows = self._repository.apply_password_update(user.uid, update)

        if affected_rows != 1:
            raise PersistenceError(
                f"Password update for user {user.uid} affected {affected_rows} records",
                record_id=user.uid,
                affected_rows=affected_rows,
            )

        logger.info(
            "Password updated",
            user_id=user.uid,
            password_expiry_date=update.password_expiry_date,
        )
        return user.with_update(update)

    def build_update(self, new_password: str) -> PasswordUpdate:
        now = self._clock.now()
        return PasswordUpdate(
            password=self._password_hasher.hash_password(new_password),
            password_expiry_date=self._expiry_policy.next_expiry_timestamp(now),
            updated_at=now,
            must_change_password=False,
        )
