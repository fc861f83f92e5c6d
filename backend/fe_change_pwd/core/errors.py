"""Error hierarchy for the password change plugin."""

import logging
import time
import uuid
from enum import Enum
from typing import Any


class ErrorSeverity(Enum):
    """Error severity levels for monitoring and alerting."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


SENSITIVE_KEYS = frozenset(
    {"password", "hash", "token", "secret", "key", "credential", "authorization"}
)


class FeChangePwdError(Exception):
    """
    Base exception for all fe_change_pwd errors.

    Carries an error id, a machine readable code, a severity level and
    free-form details. Every instance logs itself on creation with
    sensitive detail keys redacted.
    """

    default_code: str = "ERROR"
    severity: ErrorSeverity = ErrorSeverity.MEDIUM

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message
        self.code = kwargs.get("code") or self.default_code
        self.details = dict(kwargs.get("details") or {})
        self.error_id = str(uuid.uuid4())
        self.timestamp = time.time()
        self.user_message = kwargs.get("user_message") or message
        self.__cause__ = kwargs.get("cause")

        self._log_error()

    def _log_error(self) -> None:
        """Log error with structured data."""
        logger = logging.getLogger(f"fe_change_pwd.errors.{self.__class__.__name__}")
        log_data = {
            "error_id": self.error_id,
            "code": self.code,
            "error_message": self.message,
            "severity": self.severity.value,
            "details": self._sanitize_details(self.details),
            "error_class": self.__class__.__name__,
        }

        if self.severity == ErrorSeverity.CRITICAL:
            logger.critical("Critical error occurred", extra=log_data)
        elif self.severity == ErrorSeverity.HIGH:
            logger.error("High severity error", extra=log_data)
        elif self.severity == ErrorSeverity.MEDIUM:
            logger.warning("Medium severity error", extra=log_data)
        else:
            logger.info("Low severity error", extra=log_data)

    def _sanitize_details(self, details: dict) -> dict:
        """Sanitize error details to remove sensitive information."""
        if not details:
            return {}

        sanitized = {}
        for key, value in details.items():
            if any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS):
                sanitized[key] = "***REDACTED***"
            elif isinstance(value, dict):
                sanitized[key] = self._sanitize_details(value)
            else:
                sanitized[key] = value

        return sanitized

    def to_dict(self, include_internal: bool = False) -> dict[str, Any]:
        """
        Serialize error for the host controller or for logging.

        Args:
            include_internal: Include error_id, severity and the internal message
        """
        data = {
            "error": self.code,
            "message": self.user_message,
            "timestamp": self.timestamp,
        }

        if self.details:
            data["details"] = self._sanitize_details(self.details)

        if include_internal:
            data.update(
                {
                    "error_id": self.error_id,
                    "severity": self.severity.value,
                    "internal_message": self.message,
                }
            )

        return data

    def __str__(self) -> str:
        return f"[{self.error_id}] {self.code}: {self.message}"


class ApplicationError(FeChangePwdError):
    """Base class for application layer errors."""

    default_code = "APPLICATION_ERROR"
    severity = ErrorSeverity.MEDIUM


class InfrastructureError(FeChangePwdError):
    """Base class for infrastructure errors."""

    default_code = "INFRASTRUCTURE_ERROR"
    severity = ErrorSeverity.HIGH


class ValidationError(ApplicationError):
    """Invalid input value, raised while loading configuration."""

    default_code = "VALIDATION_ERROR"
    severity = ErrorSeverity.LOW

    def __init__(self, message: str, field: str | None = None, **kwargs: Any) -> None:
        if field:
            kwargs["details"] = {**(kwargs.get("details") or {}), "field": field}
        super().__init__(message, **kwargs)


class ConfigurationError(InfrastructureError):
    """Invalid or incomplete configuration detected at startup."""

    default_code = "CONFIGURATION_ERROR"
    severity = ErrorSeverity.CRITICAL

    def __init__(self, message: str, setting: str | None = None, **kwargs: Any) -> None:
        if setting:
            kwargs["details"] = {**(kwargs.get("details") or {}), "setting": setting}
        super().__init__(message, **kwargs)


class PersistenceError(InfrastructureError):
    """The user record store did not apply an update as expected."""

    default_code = "PERSISTENCE_ERROR"
    severity = ErrorSeverity.HIGH

    def __init__(
        self,
        message: str,
        record_id: Any = None,
        affected_rows: int | None = None,
        **kwargs: Any,
    ) -> None:
        user_message = kwargs.pop(
            "user_message", "Your password could not be saved. Please try again later."
        )
        details = dict(kwargs.pop("details", None) or {})
        if record_id is not None:
            details["record_id"] = record_id
        if affected_rows is not None:
            details["affected_rows"] = affected_rows
        super().__init__(message, user_message=user_message, details=details, **kwargs)


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "ErrorSeverity",
    "FeChangePwdError",
    "InfrastructureError",
    "PersistenceError",
    "ValidationError",
]
