"""Frontend user infrastructure adapters."""

from .clock_adapter import SystemClock
from .localization_adapter import DEFAULT_CATALOGS, CatalogTranslator
from .password_hasher_adapter import Argon2PasswordHasher, create_password_hasher

__all__ = [
    "DEFAULT_CATALOGS",
    "Argon2PasswordHasher",
    "CatalogTranslator",
    "SystemClock",
    "create_password_hasher",
]
