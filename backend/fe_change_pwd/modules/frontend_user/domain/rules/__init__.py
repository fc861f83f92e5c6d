"""Frontend user business rules."""

from .password_complexity import CHARACTER_CLASS_PATTERNS, PasswordComplexityValidator
from .password_expiry import DaysPasswordExpiryPolicy

__all__ = [
    "CHARACTER_CLASS_PATTERNS",
    "DaysPasswordExpiryPolicy",
    "PasswordComplexityValidator",
]
