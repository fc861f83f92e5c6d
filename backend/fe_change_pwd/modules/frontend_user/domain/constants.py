"""
Frontend User Constants

Message keys and numeric error codes emitted by password change validation.
The numeric codes are stable identifiers hosts may already match on.
"""


class ErrorCodes:
    """Numeric codes attached to validation messages."""
    PASSWORD_FIELDS = 1537701950
    MIN_LENGTH = 1537898028
    CHARACTER_CLASS = 1537898029


class MessageKeys:
    """Localization keys for validation and result messages."""
    FIELDS_EMPTY = "passwordFieldsEmptyOrNotBothFilledOut"
    PASSWORDS_DO_NOT_MATCH = "passwordsDoNotMatch"
    MIN_LENGTH = "passwordComplexity.failure.minLength"
    PASSWORD_UPDATED = "passwordUpdated"


class UserTable:
    """Column names of the host's frontend user table."""
    NAME = "fe_users"
    UID = "uid"
    PASSWORD = "password"
    MUST_CHANGE_PASSWORD = "must_change_password"
    PASSWORD_EXPIRY_DATE = "password_expiry_date"
    TSTAMP = "tstamp"
