"""
Response DTOs for the frontend user module.
"""

from pydantic import BaseModel, Field

from fe_change_pwd.modules.frontend_user.domain.enums import PasswordChangeReason
from fe_change_pwd.modules.frontend_user.domain.value_objects.validation_result import (
    ValidationResult,
)


class ChangePasswordResponse(BaseModel):
    """Outcome of a password change submission."""

    success: bool = Field(..., description="Whether the new password was stored")
    messages: list[str] = Field(default_factory=list, description="Translated messages in order")
    validation_result: ValidationResult = Field(default_factory=ValidationResult)

    @property
    def error_keys(self) -> list[str]:
        return self.validation_result.keys


class PasswordChangeStatusResponse(BaseModel):
    """Whether the change password form has to be shown, and why."""

    required: bool = Field(False)
    reason: PasswordChangeReason | None = Field(None)
    message: str | None = Field(None, description="Translated reason")
