# ruff: noqa: A005
"""Structured logging configuration.

The plugin logs through structlog with a thin wrapper that runs every record
through security filters before it is emitted. Password change code handles
plaintext passwords and fresh hashes, so the sensitive data filter is on by
default in every environment.

Architecture:
- LogConfig: Configuration with validation and environment defaults
- LogFilter: Filters applied to each record before rendering
- StructuredLogger: Logger wrapper applying filters and bound context
- LoggerFactory: structlog configuration and logger caching

Note: This module name intentionally shadows the standard library 'logging'
module inside the package namespace.
"""

import logging
import re
import sys
from abc import ABC, abstractmethod
from contextlib import suppress
from dataclasses import dataclass, field
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars

from fe_change_pwd.core.enums import Environment, LogFormat, LogLevel
from fe_change_pwd.core.errors import ConfigurationError

# =====================================================================================
# CONFIGURATION
# =====================================================================================


@dataclass
class LogConfig:
    """
    Logging configuration with validation and environment defaults.

    Usage Example:
        config = LogConfig(
            level=LogLevel.INFO,
            environment=Environment.PRODUCTION,
        )
        configure_logging(config)
    """

    level: LogLevel = field(default=LogLevel.INFO)
    format: LogFormat = field(default=LogFormat.JSON)
    environment: Environment = field(default=Environment.DEVELOPMENT)

    enable_timestamps: bool = field(default=True)
    enable_caller_info: bool = field(default=False)
    enable_exception_info: bool = field(default=True)

    enable_sensitive_data_filtering: bool = field(default=True)
    truncate_long_messages: bool = field(default=True)
    max_message_length: int = field(default=10000)

    def __post_init__(self):
        self.validate()
        self.apply_environment_defaults()

    def validate(self) -> None:
        """
        Validate logging configuration parameters.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if self.max_message_length < 1000:
            raise ConfigurationError(
                "Maximum message length must be at least 1000 characters",
                setting="max_message_length",
            )

    def apply_environment_defaults(self) -> None:
        """Apply environment-specific defaults."""
        if self.environment == Environment.DEVELOPMENT:
            self.format = LogFormat.CONSOLE
            self.enable_caller_info = True

        elif self.environment == Environment.TESTING:
            self.level = LogLevel.WARNING
            self.format = LogFormat.PLAIN

        elif self.environment in (Environment.STAGING, Environment.PRODUCTION):
            self.format = LogFormat.JSON
            self.enable_caller_info = False
            self.enable_sensitive_data_filtering = True

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "level": self.level.level_name,
            "format": self.format.value,
            "environment": self.environment.value,
            "enable_timestamps": self.enable_timestamps,
            "enable_caller_info": self.enable_caller_info,
            "enable_sensitive_data_filtering": self.enable_sensitive_data_filtering,
            "max_message_length": self.max_message_length,
        }


# =====================================================================================
# SECURITY FILTERS
# =====================================================================================


class LogFilter(ABC):
    """Base class for log record filters."""

    @abstractmethod
    def filter(self, record: dict[str, Any]) -> dict[str, Any]:
        """
        Filter and sanitize log record.

        Args:
            record: Log record to filter

        Returns:
            dict[str, Any]: Filtered log record
        """

    @abstractmethod
    def should_skip(self, record: dict[str, Any]) -> bool:
        """
        Determine if record should be skipped entirely.

        Args:
            record: Log record to evaluate

        Returns:
            bool: True if record should be skipped
        """


class SensitiveDataFilter(LogFilter):
    """
    Masks values of sensitive fields in log records.

    Field names matching password, hash, token, secret or credential patterns
    are masked regardless of nesting depth. Argon2 encoded hashes that leak
    into free text are masked as well.
    """

    def __init__(self, mask_char: str = "*", preserve_length: bool = False):
        self.mask_char = mask_char
        self.preserve_length = preserve_length

        # password_expiry_date and must_change_password stay readable
        self.sensitive_patterns = [
            re.compile(r"^(new_|old_)?password\d?$", re.IGNORECASE),
            re.compile(r"passwd", re.IGNORECASE),
            re.compile(r"(^|_)hash$", re.IGNORECASE),
            re.compile(r"token", re.IGNORECASE),
            re.compile(r"secret", re.IGNORECASE),
            re.compile(r"credential", re.IGNORECASE),
        ]

        self.value_patterns = [
            re.compile(r"\$argon2(?:id|i|d)\$[^\s\"']+"),
        ]

    def filter(self, record: dict[str, Any]) -> dict[str, Any]:
        """Filter and sanitize log record."""
        filtered_record = {}

        for key, value in record.items():
            if self._is_sensitive_field(key):
                filtered_record[key] = self._mask_value(value)
            elif isinstance(value, str):
                filtered_record[key] = self._sanitize_string_value(value)
            elif isinstance(value, dict):
                filtered_record[key] = self.filter(value)
            else:
                filtered_record[key] = value

        return filtered_record

    def should_skip(self, record: dict[str, Any]) -> bool:
        return False

    def _is_sensitive_field(self, field_name: str) -> bool:
        """Check if field name indicates sensitive data."""
        return any(pattern.search(field_name) for pattern in self.sensitive_patterns)

    def _mask_value(self, value: Any) -> str | None:
        """Mask sensitive value."""
        if value is None:
            return None

        if self.preserve_length:
            return self.mask_char * len(str(value))
        return f"{self.mask_char * 3}[MASKED]"

    def _sanitize_string_value(self, value: str) -> str:
        """Sanitize string value by masking sensitive patterns."""
        sanitized = value
        for pattern in self.value_patterns:
            sanitized = pattern.sub(lambda m: self._mask_value(m.group()), sanitized)
        return sanitized


class MessageLengthFilter(LogFilter):
    """Filter for truncating overly long log messages."""

    def __init__(
        self, max_length: int = 10000, truncation_suffix: str = "... [TRUNCATED]"
    ):
        self.max_length = max_length
        self.truncation_suffix = truncation_suffix

    def filter(self, record: dict[str, Any]) -> dict[str, Any]:
        """Filter and truncate long messages."""
        filtered_record = record.copy()

        message = record.get("message", "")
        if isinstance(message, str) and len(message) > self.max_length:
            truncated_length = self.max_length - len(self.truncation_suffix)
            filtered_record["message"] = (
                message[:truncated_length] + self.truncation_suffix
            )
            filtered_record["original_message_length"] = len(message)

        return filtered_record

    def should_skip(self, record: dict[str, Any]) -> bool:
        return False


# =====================================================================================
# STRUCTURED LOGGER
# =====================================================================================


class StructuredLogger:
    """Structured logger applying security filters before emitting records."""

    def __init__(self, name: str, config: LogConfig):
        self.name = name
        self.apply_config(config)
        self._log_count = 0
        self._error_count = 0

    def apply_config(self, config: LogConfig) -> None:
        """Rebind level, filters and the structlog proxy to a new configuration."""
        self.config = config

        self.filters: list[LogFilter] = []
        if config.enable_sensitive_data_filtering:
            self.filters.append(SensitiveDataFilter())
        if config.truncate_long_messages:
            self.filters.append(MessageLengthFilter(config.max_message_length))

        self._logger = structlog.get_logger(self.name)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(LogLevel.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(LogLevel.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(LogLevel.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(LogLevel.ERROR, message, **kwargs)
        self._error_count += 1

    def exception(self, message: str, **kwargs: Any) -> None:
        """Log exception with traceback."""
        kwargs["exc_info"] = True
        self.error(message, **kwargs)

    def _log(self, level: LogLevel, message: str, **kwargs: Any) -> None:
        if level.priority < self.config.level.priority:
            return

        record = {"message": message, **kwargs}

        for filter_instance in self.filters:
            if filter_instance.should_skip(record):
                return
            record = filter_instance.filter(record)

        try:
            getattr(self._logger, level.level_name.lower())(
                record.pop("message"), **record
            )
            self._log_count += 1
        except Exception as e:
            # Fall back to stdlib logging when structlog is misconfigured
            fallback_logger = logging.getLogger(self.name)
            with suppress(Exception):
                fallback_logger.exception("Structured logging failed: %s", str(e))
            fallback_logger.log(level.to_logging_level(), message)

    def get_stats(self) -> dict[str, Any]:
        """Get logger statistics."""
        return {
            "logger_name": self.name,
            "log_count": self._log_count,
            "error_count": self._error_count,
        }


# =====================================================================================
# LOGGER FACTORY
# =====================================================================================


class LoggerFactory:
    """Configures structlog once and caches structured loggers by name."""

    def __init__(self, config: LogConfig):
        self.config = config
        self._loggers: dict[str, StructuredLogger] = {}
        self._configured = False

    def configure_logging(self) -> None:
        """Configure structlog and the standard library root logger."""
        if self._configured:
            return

        processors = [
            merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
        ]

        if self.config.enable_timestamps:
            processors.append(structlog.processors.TimeStamper(fmt="iso"))

        if self.config.enable_caller_info:
            processors.append(
                structlog.processors.CallsiteParameterAdder(
                    parameters=[
                        structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO,
                        structlog.processors.CallsiteParameter.FUNC_NAME,
                    ]
                )
            )

        if self.config.enable_exception_info:
            processors.extend(
                [
                    structlog.processors.StackInfoRenderer(),
                    structlog.processors.format_exc_info,
                ]
            )

        processors.append(structlog.processors.UnicodeDecoder())

        if self.config.format == LogFormat.JSON:
            processors.append(structlog.processors.JSONRenderer())
        elif self.config.format == LogFormat.CONSOLE:
            processors.append(structlog.dev.ConsoleRenderer(colors=False))
        else:
            processors.append(structlog.processors.KeyValueRenderer())

        structlog.configure(
            processors=processors,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            stream=sys.stdout,
            level=self.config.level.to_logging_level(),
        )
        logging.getLogger().setLevel(self.config.level.to_logging_level())

        if self.config.environment == Environment.PRODUCTION:
            logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

        self._configured = True

        for logger in self._loggers.values():
            logger.apply_config(self.config)

    def reconfigure(self, config: LogConfig) -> None:
        """Replace the configuration, including loggers already handed out."""
        self.config = config
        self._configured = False
        self.configure_logging()

    def get_logger(self, name: str) -> StructuredLogger:
        """Get or create structured logger."""
        if not self._configured:
            self.configure_logging()

        if name not in self._loggers:
            self._loggers[name] = StructuredLogger(name, self.config)

        return self._loggers[name]


# =====================================================================================
# GLOBAL CONFIGURATION AND FACTORY
# =====================================================================================

_logger_factory: LoggerFactory | None = None


def configure_logging(config: LogConfig | None = None) -> None:
    """
    Configure the package logging system.

    Args:
        config: Logging configuration (read from settings if not provided)
    """
    global _logger_factory  # noqa: PLW0603

    if config is None:
        from fe_change_pwd.core.config import get_settings

        config = get_settings().logging.to_log_config()

    if _logger_factory is None:
        _logger_factory = LoggerFactory(config)
        _logger_factory.configure_logging()
    else:
        _logger_factory.reconfigure(config)


def get_logger(name: str) -> StructuredLogger:
    """
    Get structured logger instance.

    Args:
        name: Logger name (usually __name__)
    """
    if _logger_factory is None:
        configure_logging()

    return _logger_factory.get_logger(name)


__all__ = [
    "LogConfig",
    "LogFilter",
    "LoggerFactory",
    "MessageLengthFilter",
    "SensitiveDataFilter",
    "StructuredLogger",
    "configure_logging",
    "get_logger",
]
