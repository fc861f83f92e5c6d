"""
Password Complexity Rule

Validates a submitted password pair against a complexity policy.
"""

import re

from ..constants import ErrorCodes, MessageKeys
from ..enums import CharacterClass
from ..value_objects.change_password import ChangePasswordRequest
from ..value_objects.complexity_policy import PasswordComplexityPolicy
from ..value_objects.validation_result import ValidationResult

CHARACTER_CLASS_PATTERNS: dict[CharacterClass, re.Pattern[str]] = {
    CharacterClass.UPPERCASE: re.compile(r"[A-Z]"),
    CharacterClass.LOWERCASE: re.compile(r"[a-z]"),
    CharacterClass.DIGIT: re.compile(r"[0-9]"),
    CharacterClass.SPECIAL: re.compile(r"[^0-9a-z]", re.IGNORECASE),
}


class PasswordComplexityValidator:
    """
    Password pair validation.

    Empty fields and mismatching passwords stop validation immediately with a
    single message. Otherwise every enabled check runs and each failure adds
    one message, so the user sees all unmet requirements at once.
    """

    def validate(
        self,
        request: ChangePasswordRequest,
        policy: PasswordComplexityPolicy,
    ) -> ValidationResult:
        result = ValidationResult()

        if not request.is_complete:
            result.add_error(MessageKeys.FIELDS_EMPTY, ErrorCodes.PASSWORD_FIELDS)
            return result

        if not request.passwords_match:
            result.add_error(MessageKeys.PASSWORDS_DO_NOT_MATCH, ErrorCodes.PASSWORD_FIELDS)
            return result

        self._check_length(request.password1, policy, result)
        self._check_character_classes(request.password1, policy, result)

        return result

    def _check_length(
        self,
        password: str,
        policy: PasswordComplexityPolicy,
        result: ValidationResult,
    ) -> None:
        if policy.min_length is None:
            return
        if len(password) < policy.min_length:
            result.add_error(
                MessageKeys.MIN_LENGTH,
                ErrorCodes.MIN_LENGTH,
                (policy.min_length,),
            )

    def _check_character_classes(
        self,
        password: str,
        policy: PasswordComplexityPolicy,
        result: ValidationResult,
    ) -> None:
        for character_class in policy.required_character_classes:
            if not CHARACTER_CLASS_PATTERNS[character_class].search(password):
                result.add_error(character_class.message_key, ErrorCodes.CHARACTER_CLASS)
