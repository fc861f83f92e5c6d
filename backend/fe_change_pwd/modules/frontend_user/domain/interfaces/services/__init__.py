"""Service interfaces implemented by infrastructure adapters."""

from .clock import IClock
from .expiry_policy import IPasswordExpiryPolicy
from .password_hasher import IPasswordHasher
from .translator import ITranslator

__all__ = [
    "IClock",
    "IPasswordExpiryPolicy",
    "IPasswordHasher",
    "ITranslator",
]
