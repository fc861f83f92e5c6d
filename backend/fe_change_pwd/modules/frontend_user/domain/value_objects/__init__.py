"""Frontend user value objects."""

from .change_password import ChangePasswordRequest
from .complexity_policy import PasswordComplexityPolicy
from .password_update import PasswordUpdate
from .validation_result import ValidationMessage, ValidationResult

__all__ = [
    "ChangePasswordRequest",
    "PasswordComplexityPolicy",
    "PasswordUpdate",
    "ValidationMessage",
    "ValidationResult",
]
