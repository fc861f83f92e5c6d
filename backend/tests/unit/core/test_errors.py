"""Tests for the error hierarchy."""

import logging

from fe_change_pwd.core.errors import (
    ConfigurationError,
    ErrorSeverity,
    FeChangePwdError,
    InfrastructureError,
    PersistenceError,
    ValidationError,
)


class TestHierarchy:
    """Test error classes and codes."""

    def test_all_errors_share_base(self):
        for error in (
            ConfigurationError("bad"),
            PersistenceError("lost"),
            ValidationError("wrong"),
        ):
            assert isinstance(error, FeChangePwdError)

    def test_persistence_error(self):
        error = PersistenceError("no row", record_id=42, affected_rows=0)

        assert isinstance(error, InfrastructureError)
        assert error.code == "PERSISTENCE_ERROR"
        assert error.severity is ErrorSeverity.HIGH
        assert error.details == {"record_id": 42, "affected_rows": 0}
        assert error.user_message == "Your password could not be saved. Please try again later."

    def test_configuration_error_records_setting(self):
        error = ConfigurationError("bad algorithm", setting="hashing.algorithm")

        assert error.code == "CONFIGURATION_ERROR"
        assert error.severity is ErrorSeverity.CRITICAL
        assert error.details["setting"] == "hashing.algorithm"

    def test_validation_error_records_field(self):
        error = ValidationError("must be int", field="minLength")

        assert error.details["field"] == "minLength"
        assert error.severity is ErrorSeverity.LOW

    def test_str_contains_code_and_id(self):
        error = PersistenceError("no row")

        assert str(error) == f"[{error.error_id}] PERSISTENCE_ERROR: no row"


class TestSerialization:
    """Test to_dict."""

    def test_public_dict_hides_internal_message(self):
        error = PersistenceError("UPDATE fe_users failed", record_id=1)

        data = error.to_dict()

        assert data["error"] == "PERSISTENCE_ERROR"
        assert data["message"] == error.user_message
        assert "internal_message" not in data
        assert "error_id" not in data

    def test_public_dict_keys(self):
        data = PersistenceError("no row", record_id=1).to_dict()

        assert set(data) == {"error", "message", "timestamp", "details"}

    def test_internal_dict(self):
        error = PersistenceError("UPDATE fe_users failed")

        data = error.to_dict(include_internal=True)

        assert data["internal_message"] == "UPDATE fe_users failed"
        assert data["severity"] == "high"
        assert data["error_id"] == error.error_id

    def test_sensitive_details_are_redacted(self):
        error = FeChangePwdError(
            "failed", details={"password": "plain", "nested": {"hash": "$argon2id$x"}, "uid": 1}
        )

        details = error.to_dict()["details"]

        assert details["password"] == "***REDACTED***"
        assert details["nested"]["hash"] == "***REDACTED***"
        assert details["uid"] == 1


class TestSelfLogging:
    """Test that errors log themselves."""

    def test_logs_with_severity_level(self, caplog):
        with caplog.at_level(logging.INFO, logger="fe_change_pwd.errors"):
            error = PersistenceError("no row", record_id=3)

        record = next(r for r in caplog.records if r.name.endswith("PersistenceError"))
        assert record.levelno == logging.ERROR
        assert record.error_id == error.error_id
        assert record.details == {"record_id": 3}

    def test_logged_details_include_subclass_fields(self, caplog):
        with caplog.at_level(logging.INFO, logger="fe_change_pwd.errors"):
            ConfigurationError("bad algorithm", setting="hashing.algorithm")
            ValidationError("must be int", field="minLength", details={"value": "x"})
            PersistenceError("no row", record_id=7, affected_rows=0)

        logged = {r.error_class: r.details for r in caplog.records if hasattr(r, "error_class")}
        assert logged["ConfigurationError"] == {"setting": "hashing.algorithm"}
        assert logged["ValidationError"] == {"value": "x", "field": "minLength"}
        assert logged["PersistenceError"] == {"record_id": 7, "affected_rows": 0}
