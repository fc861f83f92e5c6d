"""Frontend user domain enums."""

from enum import Enum


class PasswordChangeReason(Enum):
    """Why a user has to change their password."""

    FORCED = "forced"
    EXPIRED = "expired"

    @property
    def message_key(self) -> str:
        return f"changePasswordRequired.{self.value}"


class CharacterClass(Enum):
    """Character classes a complexity policy can require.

    The value is the host setting key enabling the check.
    """

    UPPERCASE = "capitalCharCheck"
    LOWERCASE = "lowerCaseCharCheck"
    DIGIT = "digitCheck"
    SPECIAL = "specialCharCheck"

    @property
    def message_key(self) -> str:
        return f"passwordComplexity.failure.{self.value}"
