"""
Tests for PasswordComplexityValidator.

Verifies short-circuiting on empty and mismatching input, accumulation of
complexity failures and the reported keys, codes and arguments.
"""

import pytest

from fe_change_pwd.modules.frontend_user.domain.constants import ErrorCodes, MessageKeys
from fe_change_pwd.modules.frontend_user.domain.rules import PasswordComplexityValidator
from fe_change_pwd.modules.frontend_user.domain.value_objects import (
    ChangePasswordRequest,
    PasswordComplexityPolicy,
)

ALL_CHECKS = PasswordComplexityPolicy(
    min_length=8,
    require_uppercase=True,
    require_lowercase=True,
    require_digit=True,
    require_special_char=True,
)

CAPITAL = "passwordComplexity.failure.capitalCharCheck"
LOWER = "passwordComplexity.failure.lowerCaseCharCheck"
DIGIT = "passwordComplexity.failure.digitCheck"
SPECIAL = "passwordComplexity.failure.specialCharCheck"


@pytest.fixture
def validator():
    return PasswordComplexityValidator()


def pair(password1: str, password2: str | None = None) -> ChangePasswordRequest:
    return ChangePasswordRequest(
        password1=password1, password2=password1 if password2 is None else password2
    )


class TestRequiredFields:
    """Test the empty field and confirmation checks."""

    @pytest.mark.parametrize(
        "password1,password2", [("", "x"), ("x", ""), ("", "")]
    )
    def test_empty_field_yields_single_error(self, validator, password1, password2):
        result = validator.validate(pair(password1, password2), ALL_CHECKS)

        assert result.keys == [MessageKeys.FIELDS_EMPTY]
        assert result.errors[0].code == ErrorCodes.PASSWORD_FIELDS
        assert result.is_valid is False

    def test_mismatch_yields_single_error(self, validator):
        """No complexity errors are reported when the passwords differ."""
        result = validator.validate(pair("Abc123!", "Abc123?"), ALL_CHECKS)

        assert result.keys == [MessageKeys.PASSWORDS_DO_NOT_MATCH]
        assert result.errors[0].code == ErrorCodes.PASSWORD_FIELDS

    def test_mismatch_suppresses_weak_password_errors(self, validator):
        result = validator.validate(pair("a", "b"), ALL_CHECKS)

        assert result.keys == [MessageKeys.PASSWORDS_DO_NOT_MATCH]


class TestComplexityChecks:
    """Test min length and character class checks."""

    def test_min_length_and_digit_both_reported(self, validator):
        policy = PasswordComplexityPolicy(min_length=8, require_digit=True)

        result = validator.validate(pair("abcdef"), policy)

        assert result.keys == [MessageKeys.MIN_LENGTH, DIGIT]
        assert result.errors[0].code == ErrorCodes.MIN_LENGTH
        assert result.errors[0].arguments == (8,)
        assert result.errors[1].code == ErrorCodes.CHARACTER_CLASS

    def test_all_classes_satisfied(self, validator):
        result = validator.validate(pair("Aa1!aaaa"), ALL_CHECKS)

        assert result.is_valid
        assert result.errors == []

    def test_failures_reported_in_check_order(self, validator):
        """Length first, then uppercase, lowercase, digit, special."""
        result = validator.validate(pair("    "), ALL_CHECKS)

        assert result.keys == [MessageKeys.MIN_LENGTH, CAPITAL, LOWER, DIGIT]

    def test_only_enabled_checks_run(self, validator):
        policy = PasswordComplexityPolicy(require_uppercase=True)

        result = validator.validate(pair("abc"), policy)

        assert result.keys == [CAPITAL]

    def test_empty_policy_accepts_any_matching_pair(self, validator):
        result = validator.validate(pair("a"), PasswordComplexityPolicy())

        assert result.is_valid

    def test_length_exactly_min_length_passes(self, validator):
        policy = PasswordComplexityPolicy(min_length=6)

        assert validator.validate(pair("abcdef"), policy).is_valid
        assert not validator.validate(pair("abcde"), policy).is_valid

    def test_min_length_zero_never_fails(self, validator):
        policy = PasswordComplexityPolicy(min_length=0)

        assert validator.validate(pair("x"), policy).is_valid

    @pytest.mark.parametrize(
        "password,expected",
        [
            ("abc", [CAPITAL, DIGIT, SPECIAL]),
            ("ABC", [LOWER, DIGIT, SPECIAL]),
            ("123", [CAPITAL, LOWER, SPECIAL]),
            ("!!!", [CAPITAL, LOWER, DIGIT]),
        ],
    )
    def test_single_class_passwords(self, validator, password, expected):
        policy = PasswordComplexityPolicy(
            require_uppercase=True,
            require_lowercase=True,
            require_digit=True,
            require_special_char=True,
        )

        assert validator.validate(pair(password), policy).keys == expected

    @pytest.mark.parametrize("password", ["abc def", "abc_def", "abcädef", "abc-def"])
    def test_special_char_is_anything_but_ascii_letters_and_digits(self, validator, password):
        policy = PasswordComplexityPolicy(require_special_char=True)

        assert validator.validate(pair(password), policy).is_valid

    def test_uppercase_check_is_ascii_only(self, validator):
        policy = PasswordComplexityPolicy(require_uppercase=True)

        assert validator.validate(pair("ÄÖÜ"), policy).keys == [CAPITAL]


class TestValidationResult:
    """Test rendering of validation results."""

    def test_render_uses_translator_in_order(self, validator, translator):
        policy = PasswordComplexityPolicy(min_length=8, require_digit=True)

        messages = validator.validate(pair("abcdef"), policy).render(translator)

        assert messages == [
            "The password must be at least 8 characters long.",
            "The password must contain at least one digit.",
        ]

    def test_iterates_messages(self, validator):
        result = validator.validate(pair("", ""), ALL_CHECKS)

        assert [message.key for message in result] == [MessageKeys.FIELDS_EMPTY]
