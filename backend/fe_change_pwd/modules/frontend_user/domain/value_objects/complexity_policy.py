"""
Password Complexity Policy Value Object

Structural requirements a new password must satisfy.
"""

from dataclasses import dataclass

from fe_change_pwd.core.config import PasswordComplexityConfig

from ..enums import CharacterClass


@dataclass(frozen=True)
class PasswordComplexityPolicy:
    """
    Complexity requirements for new passwords.

    Every requirement is disabled unless set. ``min_length`` of None means
    no length check at all.
    """

    min_length: int | None = None
    require_uppercase: bool = False
    require_lowercase: bool = False
    require_digit: bool = False
    require_special_char: bool = False

    def __post_init__(self) -> None:
        if self.min_length is not None and self.min_length < 0:
            raise ValueError("Minimum length cannot be negative")

    @classmethod
    def from_config(cls, config: PasswordComplexityConfig) -> "PasswordComplexityPolicy":
        return cls(
            min_length=config.min_length,
            require_uppercase=config.capital_char_check,
            require_lowercase=config.lower_case_char_check,
            require_digit=config.digit_check,
            require_special_char=config.special_char_check,
        )

    @property
    def required_character_classes(self) -> tuple[CharacterClass, ...]:
        """Enabled character class checks in evaluation order."""
        flags = (
            (CharacterClass.UPPERCASE, self.require_uppercase),
            (CharacterClass.LOWERCASE, self.require_lowercase),
            (CharacterClass.DIGIT, self.require_digit),
            (CharacterClass.SPECIAL, self.require_special_char),
        )
        return tuple(character_class for character_class, enabled in flags if enabled)
