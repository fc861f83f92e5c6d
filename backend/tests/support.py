"""
Test doubles and factories shared by the test suite.
"""

import factory
from faker import Faker

from fe_change_pwd.modules.frontend_user.domain.entities.user_record import UserRecord
from fe_change_pwd.modules.frontend_user.domain.value_objects.password_update import (
    PasswordUpdate,
)
from fe_change_pwd.modules.frontend_user.infrastructure.models import FrontendUserModel

fake = Faker()

NOW = 1_700_000_000


# Test Factories using Factory Boy
class UserRecordFactory(factory.Factory):
    """Factory for creating test user records."""

    class Meta:
        model = UserRecord

    uid = factory.Sequence(lambda n: n + 1)
    must_change_password = False
    password_expiry_date = 0
    password = factory.LazyFunction(lambda: f"$argon2id$v=19$m=8,t=1,p=1${fake.sha256()}")
    updated_at = factory.LazyFunction(lambda: NOW - fake.random_int(min=86400, max=86400 * 30))


class FrontendUserModelFactory(factory.Factory):
    """Factory for fe_users rows."""

    class Meta:
        model = FrontendUserModel

    uid = factory.Sequence(lambda n: n + 1)
    username = factory.Faker("user_name")
    password = factory.LazyFunction(lambda: f"$argon2id$v=19$m=8,t=1,p=1${fake.sha256()}")
    must_change_password = True
    password_expiry_date = 0
    tstamp = NOW - 86400


class FixedClock:
    """Clock frozen at a given timestamp."""

    def __init__(self, now: int = NOW):
        self.current = now

    def now(self) -> int:
        return self.current

    def advance(self, seconds: int) -> None:
        self.current += seconds


class InMemoryUserRecordRepository:
    """User record store keeping records in a dict and recording updates."""

    def __init__(self, records: list[UserRecord] | None = None):
        self.records = {record.uid: record for record in records or []}
        self.updates: list[tuple[int, PasswordUpdate]] = []

    def find_by_id(self, uid: int) -> UserRecord | None:
        return self.records.get(uid)

    def apply_password_update(self, uid: int, password_update: PasswordUpdate) -> int:
        self.updates.append((uid, password_update))
        if uid not in self.records:
            return 0
        self.records[uid] = self.records[uid].with_update(password_update)
        return 1
