"""Password hasher service implementation."""

import argon2
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

from fe_change_pwd.core.config import HashingConfig
from fe_change_pwd.core.enums import HashAlgorithm
from fe_change_pwd.core.errors import ConfigurationError
from fe_change_pwd.core.logging import get_logger
from fe_change_pwd.modules.frontend_user.domain.interfaces.services.password_hasher import (
    IPasswordHasher,
)

logger = get_logger(__name__)


class Argon2PasswordHasher(IPasswordHasher):
    """Argon2id hashing backed by argon2-cffi."""

    def __init__(self, config: HashingConfig | None = None):
        self.config = config or HashingConfig()
        self._hasher = argon2.PasswordHasher(
            time_cost=self.config.time_cost,
            memory_cost=self.config.memory_cost,
            parallelism=self.config.parallelism,
            hash_len=self.config.hash_len,
            salt_len=self.config.salt_len,
            type=argon2.Type.ID,
        )

    def hash_password(self, password: str) -> str:
        return self._hasher.hash(password)

    def verify_password(self, password_hash: str, password: str) -> bool:
        try:
            return self._hasher.verify(password_hash, password)
        except VerifyMismatchError:
            return False
        except (VerificationError, InvalidHashError):
            logger.warning("Password hash could not be verified")
            return False

    def needs_rehash(self, password_hash: str) -> bool:
        try:
            return self._hasher.check_needs_rehash(password_hash)
        except InvalidHashError:
            return True


def create_password_hasher(config: HashingConfig) -> IPasswordHasher:
    """
    Build the password hasher for the configured algorithm.

    Only argon2id is accepted; there is no weaker fallback.

    Raises:
        ConfigurationError: If another algorithm is configured
    """
    if config.algorithm is not HashAlgorithm.ARGON2ID:
        raise ConfigurationError(
            f"Unsupported password hashing algorithm: {config.algorithm.value}",
            setting="hashing.algorithm",
        )

    logger.debug(
        "Password hasher initialized",
        algorithm=config.algorithm.value,
        time_cost=config.time_cost,
        memory_cost=config.memory_cost,
    )
    return Argon2PasswordHasher(config)
