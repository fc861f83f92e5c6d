"""
Tests for frontend user entities and value objects.
"""

import pytest

from fe_change_pwd.core.config import PasswordComplexityConfig
from fe_change_pwd.modules.frontend_user.domain.entities import UserRecord
from fe_change_pwd.modules.frontend_user.domain.enums import CharacterClass
from fe_change_pwd.modules.frontend_user.domain.value_objects import (
    ChangePasswordRequest,
    PasswordComplexityPolicy,
    PasswordUpdate,
)

from tests.support import NOW


class TestUserRecord:
    """Test UserRecord."""

    def test_from_row_reads_host_columns(self):
        row = {
            "uid": "7",
            "password": "$argon2id$hash",
            "must_change_password": 1,
            "password_expiry_date": NOW,
            "tstamp": NOW - 10,
        }

        user = UserRecord.from_row(row)

        assert user.uid == 7
        assert user.must_change_password is True
        assert user.password_expiry_date == NOW
        assert user.updated_at == NOW - 10

    def test_from_row_treats_missing_values_as_zero(self):
        user = UserRecord.from_row({"uid": 3, "password_expiry_date": None})

        assert user.must_change_password is False
        assert user.password_expiry_date == 0
        assert user.password == ""
        assert user.updated_at == 0

    def test_with_update_returns_copy(self):
        user = UserRecord(uid=1, must_change_password=True, password="old")
        update = PasswordUpdate(password="new", password_expiry_date=NOW, updated_at=NOW)

        updated = user.with_update(update)

        assert updated.password == "new"
        assert updated.must_change_password is False
        assert user.password == "old"

    def test_repr_hides_password(self):
        user = UserRecord(uid=1, password="$argon2id$secret")

        assert "argon2" not in repr(user)


class TestChangePasswordRequest:
    """Test ChangePasswordRequest."""

    def test_defaults_are_empty(self):
        request = ChangePasswordRequest()

        assert request.is_complete is False
        assert request.passwords_match is True

    def test_repr_hides_passwords(self):
        assert "hunter2" not in repr(ChangePasswordRequest("hunter2", "hunter2"))

    def test_is_immutable(self):
        request = ChangePasswordRequest("a", "a")

        with pytest.raises(AttributeError):
            request.password1 = "b"


class TestPasswordUpdate:
    """Test PasswordUpdate."""

    def test_requires_hash(self):
        with pytest.raises(ValueError):
            PasswordUpdate(password="", password_expiry_date=0, updated_at=NOW)

    def test_rejects_negative_expiry(self):
        with pytest.raises(ValueError):
            PasswordUpdate(password="h", password_expiry_date=-1, updated_at=NOW)

    def test_repr_masks_hash(self):
        update = PasswordUpdate(password="$argon2id$x", password_expiry_date=0, updated_at=NOW)

        assert "$argon2id$x" not in repr(update)


class TestPasswordComplexityPolicy:
    """Test PasswordComplexityPolicy."""

    def test_all_checks_disabled_by_default(self):
        policy = PasswordComplexityPolicy()

        assert policy.min_length is None
        assert policy.required_character_classes == ()

    def test_rejects_negative_length(self):
        with pytest.raises(ValueError):
            PasswordComplexityPolicy(min_length=-1)

    def test_from_config_keeps_check_order(self):
        config = PasswordComplexityConfig(
            min_length=10,
            special_char_check=True,
            capital_char_check=True,
            digit_check=True,
        )

        policy = PasswordComplexityPolicy.from_config(config)

        assert policy.min_length == 10
        assert policy.required_character_classes == (
            CharacterClass.UPPERCASE,
            CharacterClass.DIGIT,
            CharacterClass.SPECIAL,
        )
