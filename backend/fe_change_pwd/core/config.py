"""Configuration management for the password change plugin.

Settings come from one of two sources:

- the host framework's settings map (``Settings.from_mapping``), using the
  same camelCase keys the host exposes to plugins, e.g.
  ``{"passwordComplexity": {"minLength": 8, "digitCheck": 1}}``
- environment variables prefixed with ``FE_CHANGE_PWD_`` plus an optional
  ``.env`` file (``Settings.from_env``)

Every optional key defaults to "check disabled". Invalid values raise
ConfigurationError when settings are built, never during a request.

Architecture:
- EnvironmentLoader: Environment variable loading using validation utilities
- PasswordComplexityConfig: Minimum length and character class checks
- PasswordExpirationConfig: Validity period applied after a successful change
- RedirectConfig: Change password page and pages exempt from redirection
- HashingConfig: Argon2 parameters
- DatabaseConfig: User record store connection
- LoggingSettings: Log level and environment
- Settings: Aggregate of all of the above
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

from fe_change_pwd.core.enums import Environment, HashAlgorithm, LogLevel
from fe_change_pwd.core.errors import ConfigurationError, ValidationError
from fe_change_pwd.utils.validation import (
    validate_boolean,
    validate_enum,
    validate_integer,
    validate_list,
    validate_string,
)

ENV_PREFIX = "FE_CHANGE_PWD_"
SECONDS_PER_DAY = 86400


# =====================================================================================
# ENVIRONMENT LOADING
# =====================================================================================


class EnvironmentLoader:
    """
    Environment variable loader with type conversion and validation.

    Keys are looked up with the ``FE_CHANGE_PWD_`` prefix. Values from the
    optional env file never override variables already set in the process.
    """

    def __init__(self, env_file: str | None = ".env", prefix: str = ENV_PREFIX):
        self.env_file = env_file
        self.prefix = prefix
        self._load_env_file()

    def _load_env_file(self) -> None:
        """Load environment variables from file if it exists."""
        if not self.env_file or not os.path.exists(self.env_file):
            return

        try:
            with open(self.env_file, encoding="utf-8") as f:
                for raw_line in f:
                    line = raw_line.strip()

                    if not line or line.startswith("#") or "=" not in line:
                        continue

                    key, value = line.split("=", 1)
                    key = key.strip()
                    value = value.strip()

                    if (value.startswith('"') and value.endswith('"')) or (
                        value.startswith("'") and value.endswith("'")
                    ):
                        value = value[1:-1]

                    if key not in os.environ:
                        os.environ[key] = value

        except OSError as e:
            raise ConfigurationError(
                f"Failed to load environment file {self.env_file}: {e}"
            ) from e

    def _raw(self, key: str, default: Any = None) -> Any:
        return os.environ.get(f"{self.prefix}{key}", default)

    def get_string(self, key: str, default: str | None = None, **kwargs) -> str | None:
        """Get string value from environment."""
        return validate_string(self._raw(key, default), key, required=False, **kwargs)

    def get_integer(self, key: str, default: int | None = None, **kwargs) -> int | None:
        """Get integer value from environment."""
        return validate_integer(self._raw(key, default), key, required=False, **kwargs)

    def get_boolean(self, key: str, default: bool = False) -> bool:
        """Get boolean value from environment."""
        value = validate_boolean(self._raw(key), key, required=False)
        return default if value is None else value

    def get_enum(self, key: str, enum_class: type, default: Any = None) -> Any:
        """Get enum value from environment."""
        value = validate_enum(self._raw(key), enum_class, key, required=False)
        return default if value is None else value

    def get_list(self, key: str, item_type: type = str) -> list[Any]:
        """Get comma separated list from environment."""
        return validate_list(self._raw(key), key, item_type=item_type, required=False) or []


# =====================================================================================
# CONFIGURATION CLASSES
# =====================================================================================


@dataclass
class PasswordComplexityConfig:
    """Password complexity checks, each disabled unless configured."""

    min_length: int | None = None
    capital_char_check: bool = False
    lower_case_char_check: bool = False
    digit_check: bool = False
    special_char_check: bool = False

    def __post_init__(self):
        if self.min_length is not None and self.min_length < 0:
            raise ConfigurationError(
                "Minimum password length cannot be negative",
                setting="passwordComplexity.minLength",
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PasswordComplexityConfig":
        return cls(
            min_length=validate_integer(
                data.get("minLength"), "passwordComplexity.minLength", required=False
            ),
            capital_char_check=_flag(data, "capitalCharCheck", "passwordComplexity"),
            lower_case_char_check=_flag(data, "lowerCaseCharCheck", "passwordComplexity"),
            digit_check=_flag(data, "digitCheck", "passwordComplexity"),
            special_char_check=_flag(data, "specialCharCheck", "passwordComplexity"),
        )


@dataclass
class PasswordExpirationConfig:
    """Password validity applied after a successful password change."""

    enabled: bool = False
    validity_in_days: int = 90

    def __post_init__(self):
        if self.enabled and self.validity_in_days < 1:
            raise ConfigurationError(
                "Password validity must be at least one day when expiration is enabled",
                setting="passwordExpiration.validityInDays",
            )

    @property
    def validity_in_seconds(self) -> int:
        return self.validity_in_days * SECONDS_PER_DAY

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PasswordExpirationConfig":
        validity = validate_integer(
            data.get("validityInDays"),
            "passwordExpiration.validityInDays",
            required=False,
        )
        return cls(
            enabled=_flag(data, "enabled", "passwordExpiration"),
            validity_in_days=90 if validity is None else validity,
        )


@dataclass
class RedirectConfig:
    """Where users who must change their password are sent."""

    change_password_page_id: int | None = None
    excluded_page_ids: list[int] = field(default_factory=list)

    @property
    def is_enabled(self) -> bool:
        return bool(self.change_password_page_id)


@dataclass
class HashingConfig:
    """Argon2id parameters for new password hashes."""

    algorithm: HashAlgorithm = HashAlgorithm.ARGON2ID
    time_cost: int = 3
    memory_cost: int = 65536
    parallelism: int = 4
    hash_len: int = 32
    salt_len: int = 16

    def __post_init__(self):
        for name in ("time_cost", "memory_cost", "parallelism", "hash_len", "salt_len"):
            if getattr(self, name) < 1:
                raise ConfigurationError(
                    f"Hashing parameter {name} must be positive", setting=f"hashing.{name}"
                )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "HashingConfig":
        defaults = cls()
        return cls(
            algorithm=validate_enum(
                data.get("algorithm"), HashAlgorithm, "hashing.algorithm", required=False
            )
            or defaults.algorithm,
            time_cost=_int_or(data, "timeCost", defaults.time_cost, "hashing"),
            memory_cost=_int_or(data, "memoryCost", defaults.memory_cost, "hashing"),
            parallelism=_int_or(data, "parallelism", defaults.parallelism, "hashing"),
            hash_len=_int_or(data, "hashLength", defaults.hash_len, "hashing"),
            salt_len=_int_or(data, "saltLength", defaults.salt_len, "hashing"),
        )


@dataclass
class DatabaseConfig:
    """User record store connection."""

    url: str = "sqlite:///fe_change_pwd.db"
    echo: bool = False


@dataclass
class LoggingSettings:
    """Log level and environment used to build the structlog configuration."""

    level: LogLevel = LogLevel.INFO
    environment: Environment = Environment.DEVELOPMENT

    def to_log_config(self):
        from fe_change_pwd.core.logging import LogConfig

        config = LogConfig(environment=self.environment)
        if not self.environment.is_testing:
            config.level = self.level
        return config


@dataclass
class Settings:
    """All plugin settings."""

    language: str = "en"
    password_complexity: PasswordComplexityConfig = field(
        default_factory=PasswordComplexityConfig
    )
    password_expiration: PasswordExpirationConfig = field(
        default_factory=PasswordExpirationConfig
    )
    redirect: RedirectConfig = field(default_factory=RedirectConfig)
    hashing: HashingConfig = field(default_factory=HashingConfig)
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Settings":
        """
        Build settings from the host settings map.

        Raises:
            ConfigurationError: If a value has the wrong type or range
        """
        try:
            database = data.get("database") or {}
            logging_data = data.get("logging") or {}
            return cls(
                language=validate_string(data.get("language"), "language", required=False)
                or "en",
                password_complexity=PasswordComplexityConfig.from_mapping(
                    data.get("passwordComplexity") or {}
                ),
                password_expiration=PasswordExpirationConfig.from_mapping(
                    data.get("passwordExpiration") or {}
                ),
                redirect=RedirectConfig(
                    change_password_page_id=validate_integer(
                        data.get("changePasswordPid"),
                        "changePasswordPid",
                        required=False,
                        min_value=0,
                    ),
                    excluded_page_ids=validate_list(
                        data.get("excludedPids"), "excludedPids", item_type=int, required=False
                    )
                    or [],
                ),
                hashing=HashingConfig.from_mapping(data.get("hashing") or {}),
                database=DatabaseConfig(
                    url=validate_string(database.get("url"), "database.url", required=False)
                    or DatabaseConfig.url,
                    echo=bool(
                        validate_boolean(database.get("echo"), "database.echo", required=False)
                    ),
                ),
                logging=LoggingSettings(
                    level=validate_enum(
                        logging_data.get("level"), LogLevel, "logging.level", required=False
                    )
                    or LogLevel.INFO,
                    environment=validate_enum(
                        logging_data.get("environment"),
                        Environment,
                        "logging.environment",
                        required=False,
                    )
                    or Environment.DEVELOPMENT,
                ),
            )
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid plugin settings: {e.message}", setting=e.details.get("field")
            ) from e

    @classmethod
    def from_env(cls, env_file: str | None = ".env") -> "Settings":
        """
        Build settings from FE_CHANGE_PWD_* environment variables.

        Raises:
            ConfigurationError: If a variable has the wrong type or range
        """
        try:
            env = EnvironmentLoader(env_file)
            return cls(
                language=env.get_string("LANGUAGE", "en"),
                password_complexity=PasswordComplexityConfig(
                    min_length=env.get_integer("MIN_LENGTH"),
                    capital_char_check=env.get_boolean("CAPITAL_CHAR_CHECK"),
                    lower_case_char_check=env.get_boolean("LOWER_CASE_CHAR_CHECK"),
                    digit_check=env.get_boolean("DIGIT_CHECK"),
                    special_char_check=env.get_boolean("SPECIAL_CHAR_CHECK"),
                ),
                password_expiration=PasswordExpirationConfig(
                    enabled=env.get_boolean("PASSWORD_EXPIRATION_ENABLED"),
                    validity_in_days=env.get_integer("PASSWORD_VALIDITY_IN_DAYS", 90),
                ),
                redirect=RedirectConfig(
                    change_password_page_id=env.get_integer("CHANGE_PASSWORD_PID"),
                    excluded_page_ids=env.get_list("EXCLUDED_PIDS", item_type=int),
                ),
                hashing=HashingConfig(
                    algorithm=env.get_enum(
                        "HASH_ALGORITHM", HashAlgorithm, HashAlgorithm.ARGON2ID
                    ),
                    time_cost=env.get_integer("ARGON2_TIME_COST", 3),
                    memory_cost=env.get_integer("ARGON2_MEMORY_COST", 65536),
                    parallelism=env.get_integer("ARGON2_PARALLELISM", 4),
                ),
                database=DatabaseConfig(
                    url=env.get_string("DATABASE_URL", DatabaseConfig.url),
                    echo=env.get_boolean("DATABASE_ECHO"),
                ),
                logging=LoggingSettings(
                    level=env.get_enum("LOG_LEVEL", LogLevel, LogLevel.INFO),
                    environment=env.get_enum(
                        "ENVIRONMENT", Environment, Environment.DEVELOPMENT
                    ),
                ),
            )
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid environment configuration: {e.message}",
                setting=e.details.get("field"),
            ) from e


def _flag(data: Mapping[str, Any], key: str, section: str) -> bool:
    return bool(validate_boolean(data.get(key), f"{section}.{key}", required=False))


def _int_or(data: Mapping[str, Any], key: str, default: int, section: str) -> int:
    value = validate_integer(data.get(key), f"{section}.{key}", required=False)
    return default if value is None else value


@lru_cache
def get_settings(env_file: str | None = ".env") -> Settings:
    """Get cached settings loaded from the environment."""
    return Settings.from_env(env_file)


__all__ = [
    "DatabaseConfig",
    "EnvironmentLoader",
    "HashingConfig",
    "LoggingSettings",
    "PasswordComplexityConfig",
    "PasswordExpirationConfig",
    "RedirectConfig",
    "Settings",
    "get_settings",
]
