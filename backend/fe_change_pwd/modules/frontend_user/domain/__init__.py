"""
Frontend User Domain

Password change policy, complexity validation and password update logic.
"""

from .entities import UserRecord
from .enums import CharacterClass, PasswordChangeReason
from .rules import DaysPasswordExpiryPolicy, PasswordComplexityValidator
from .services import PasswordPolicyEvaluator, PasswordUpdater
from .value_objects import (
    ChangePasswordRequest,
    PasswordComplexityPolicy,
    PasswordUpdate,
    ValidationMessage,
    ValidationResult,
)

__all__ = [
    "ChangePasswordRequest",
    "CharacterClass",
    "DaysPasswordExpiryPolicy",
    "PasswordChangeReason",
    "PasswordComplexityPolicy",
    "PasswordComplexityValidator",
    "PasswordPolicyEvaluator",
    "PasswordUpdate",
    "PasswordUpdater",
    "UserRecord",
    "ValidationMessage",
    "ValidationResult",
]
